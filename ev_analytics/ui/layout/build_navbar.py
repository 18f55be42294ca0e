from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from ev_analytics.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig, live: bool = True) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "Electric Vehicle Analytics")
    subtitle = getattr(global_config, "subtitle", "")

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Badge(
                    "Live Data" if live else "Unavailable",
                    color="success" if live else "danger",
                    className="ms-auto",
                    pill=True,
                ),
            ],
        ),
        dark=False,
        className="shadow-sm evd-navbar",
    )
