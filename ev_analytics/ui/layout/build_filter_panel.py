from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import dcc, html

from ev_analytics.core.dataset import ALL
from ev_analytics.ui.helpers import ALL_MAKES_LABEL, ALL_YEARS_LABEL, dropdown_options
from ev_analytics.ui.ids import IDs


def build_filter_panel(year_options: List[str], make_options: List[str]) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            dbc.Row(
                [
                    dbc.Col(
                        [
                            dbc.Label("Filter by Year:", html_for=IDs.Control.YEAR_SELECT),
                            dcc.Dropdown(
                                id=IDs.Control.YEAR_SELECT,
                                options=dropdown_options(year_options, ALL_YEARS_LABEL),
                                value=ALL,
                                clearable=False,
                            ),
                        ],
                        md=4,
                    ),
                    dbc.Col(
                        [
                            dbc.Label("Filter by Make:", html_for=IDs.Control.MAKE_SELECT),
                            dcc.Dropdown(
                                id=IDs.Control.MAKE_SELECT,
                                options=dropdown_options(make_options, ALL_MAKES_LABEL),
                                value=ALL,
                                clearable=False,
                            ),
                        ],
                        md=4,
                    ),
                    dbc.Col(
                        [
                            dbc.Button(
                                "Reset Filters",
                                id=IDs.Control.RESET_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                                style={"display": "none"},
                            ),
                            html.Div(
                                id=IDs.Control.FILTER_SUMMARY,
                                className="text-muted small mt-1",
                            ),
                        ],
                        md=4,
                        className="d-flex flex-column justify-content-end",
                    ),
                ],
                className="g-3",
            )
        ),
        className="evd-filters mt-3",
    )
