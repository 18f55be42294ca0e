from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from ev_analytics.core.metrics import Metrics
from ev_analytics.ui.helpers import insights


def build_insights_panel(metrics: Metrics) -> html.Div:
    cards = [
        dbc.Col(
            dbc.Card(
                dbc.CardBody(
                    [
                        html.Div(f"{i:02d}", className="evd-insight-number"),
                        html.H5(item["title"]),
                        html.P(item["text"], className="mb-0"),
                    ]
                ),
                className="h-100",
            ),
            md=6,
            lg=3,
        )
        for i, item in enumerate(insights(metrics), start=1)
    ]
    return html.Div(
        [
            html.H3("Key Insights", className="mt-4"),
            dbc.Row(cards, className="g-3"),
        ],
        className="evd-insights",
    )
