from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ev_analytics.config.model import GlobalConfig
from ev_analytics.core.dataset import Dataset
from ev_analytics.core.dataset_handle import DatasetHandle, LoadStatus
from ev_analytics.core.metrics import Metrics
from ev_analytics.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config, the loaded dataset handle,
    the metrics computed once at startup and the view registry. This is
    passed into layout + callback registration functions instead of using
    module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    handle: DatasetHandle
    metrics: Metrics
    registry: Optional[ViewRegistry] = None
    year_options: Optional[List[str]] = None
    make_options: Optional[List[str]] = None

    @property
    def is_ready(self) -> bool:
        return self.handle.status is LoadStatus.READY

    @property
    def dataset(self) -> Optional[Dataset]:
        return self.handle.dataset if self.is_ready else None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
