from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from ev_analytics.core.view_registry import ViewRegistry
from ev_analytics.ui.ids import IDs, graph_id

# Charts that share a row with a neighbour instead of spanning the page
HALF_WIDTH_VIEWS = {"range_distribution", "vehicle_type"}


def build_chart_card(view_cls) -> dbc.Col:
    width = 6 if view_cls.id in HALF_WIDTH_VIEWS else 12
    return dbc.Col(
        dbc.Card(
            [
                dbc.CardHeader(html.Strong(view_cls.label), className="p-2"),
                dbc.CardBody(
                    dcc.Loading(
                        type="default",
                        children=dcc.Graph(
                            id=graph_id(view_cls.id),
                            config={"responsive": True, "displayModeBar": False},
                        ),
                    )
                ),
            ],
            className="evd-chart",
        ),
        lg=width,
    )


def build_chart_grid(registry: ViewRegistry) -> dbc.Row:
    return dbc.Row(
        [build_chart_card(view_cls) for view_cls in registry.all_classes()],
        id=IDs.Control.CHART_GRID,
        className="g-3 mt-1",
    )
