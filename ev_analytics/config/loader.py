from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from ev_analytics.config.model import DEFAULT_DATA_SOURCE, GlobalConfig
from ev_analytics.core.dataset_loader import is_url
from ev_analytics.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_SOURCE_ENV = "EV_ANALYTICS_DATA"

_INT_FIELDS = ("top_makes_limit", "top_models_limit", "top_locations_limit", "min_growth_year")


def _resolve_source(raw: str, root: Path) -> str:
    if is_url(raw):
        return raw
    path = Path(raw)
    if path.is_absolute():
        return str(path)
    return str((root / path).resolve())


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open() as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return raw


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from <root>/global.json.

    A missing file gives the defaults. Relative data_source paths are
    resolved against root. EV_ANALYTICS_DATA overrides data_source.

    Raises:
        ConfigError: if global.json is unreadable, not an object, or has
            non-integer limits
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if global_path.is_file():
        raw = _read_json(global_path)
    else:
        logger.warning(f"global.json not found at {global_path}; using defaults")
        raw = {}

    defaults = GlobalConfig()
    limits: Dict[str, int] = {}
    for key in _INT_FIELDS:
        value = raw.get(key, getattr(defaults, key))
        try:
            limits[key] = int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{key} must be an integer, got {value!r}") from e

    source_raw = os.getenv(DATA_SOURCE_ENV) or raw.get("data_source") or DEFAULT_DATA_SOURCE

    cfg = GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        data_source=_resolve_source(str(source_raw), root),
        **limits,
    )

    logger.info(
        "Global config loaded",
        extra={"config_root": str(root), "data_source": cfg.data_source},
    )
    return cfg
