from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from ev_analytics.core.metrics import Metrics
from ev_analytics.ui.helpers import metric_cards


def build_metrics_panel(metrics: Metrics) -> dbc.Row:
    cards = []
    for card in metric_cards(metrics):
        cards.append(
            dbc.Col(
                dbc.Card(
                    dbc.CardBody(
                        [
                            html.Div(card["icon"], className="evd-metric-icon"),
                            html.Div(
                                [
                                    html.Div(card["label"], className="evd-metric-label"),
                                    html.Div(card["value"], className="evd-metric-value"),
                                ]
                            ),
                        ],
                        className="d-flex align-items-center gap-3",
                    ),
                    className=f"evd-metric evd-metric-{card['tone']}",
                ),
                md=3,
            )
        )
    return dbc.Row(cards, className="g-3 mt-1")
