from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from ev_analytics.core.filter_state import FilterState
from ev_analytics.ui.ids import IDs
from ev_analytics.ui.layout.build_chart_grid import build_chart_grid
from ev_analytics.ui.layout.build_error_panel import build_error_panel
from ev_analytics.ui.layout.build_filter_panel import build_filter_panel
from ev_analytics.ui.layout.build_insights_panel import build_insights_panel
from ev_analytics.ui.layout.build_metrics_panel import build_metrics_panel
from ev_analytics.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from ev_analytics.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.global_config, live=ctx.is_ready)

    if not ctx.is_ready:
        return dbc.Container(
            fluid=True,
            className="evd-root",
            children=[
                navbar,
                build_error_panel(ctx.handle.error or "Unknown error", ctx.handle.source),
            ],
        )

    return dbc.Container(
        fluid=True,
        className="evd-root",
        children=[
            navbar,

            # App-level stores
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="session", data=FilterState().to_dict()),

            build_filter_panel(ctx.year_options or [], ctx.make_options or []),
            build_metrics_panel(ctx.metrics),
            build_chart_grid(ctx.registry),
            build_insights_panel(ctx.metrics),

            html.Footer(
                html.P(
                    "Data Source: Electric Vehicle Population Dataset",
                    className="text-muted small mb-0",
                ),
                className="mt-4 mb-3 text-center",
            ),
        ],
    )
