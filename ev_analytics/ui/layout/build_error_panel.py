from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html


def build_error_panel(message: str, source: str) -> dbc.Alert:
    return dbc.Alert(
        [
            html.H4("Error Loading Data", className="alert-heading"),
            html.P(message),
            html.Hr(),
            html.P(
                f"Check that the dataset is available at {source}, or point "
                "EV_ANALYTICS_DATA at it.",
                className="mb-0 small",
            ),
        ],
        color="danger",
        className="mt-4",
    )
