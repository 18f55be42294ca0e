from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from ev_analytics.config.loader import load_global_config
from ev_analytics.core.aggregations import make_options, year_options
from ev_analytics.core.dataset_handle import DatasetHandle
from ev_analytics.core.metrics import Metrics, compute_metrics
from ev_analytics.core.view_registry import ViewRegistry
from ev_analytics.ui.layout.build_layout import build_layout
from ev_analytics.ui.callbacks.callbacks_filters import register_filter_callbacks
from ev_analytics.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from ev_analytics.views import (
        TopMakesView,
        YearlyGrowthView,
        RangeDistributionView,
        VehicleTypeView,
        TopModelsView,
        GeographicView,
    )

    registry = ViewRegistry()
    registry.register(TopMakesView)
    registry.register(YearlyGrowthView)
    registry.register(RangeDistributionView)
    registry.register(VehicleTypeView)
    registry.register(TopModelsView)
    registry.register(GeographicView)
    return registry


def build_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the dataset once; a failure is kept on the handle, not raised
    handle = DatasetHandle.load(global_config.data_source)

    # 3) Metrics + selector options over the full table
    metrics = Metrics()
    years: list[str] = []
    makes: list[str] = []
    if handle.is_materialised():
        records = handle.dataset.records
        metrics = compute_metrics(records)
        years = year_options(records, min_year=global_config.min_growth_year)
        makes = make_options(records)

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        handle=handle,
        metrics=metrics,
        registry=_build_view_registry(),
        year_options=years,
        make_options=makes,
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_config(config_root)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = getattr(ctx.global_config, "ui_title", "EV Analytics")

    app.layout = build_layout(ctx)

    # Charts and filters only exist once the dataset is loaded
    if ctx.is_ready:
        register_filter_callbacks(app, ctx)
        register_render_callbacks(app, ctx)
    else:
        logger.error(
            "Starting in error state",
            extra={"source": ctx.handle.source, "error": ctx.handle.error},
        )

    return app
