from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Tuple

import dash
from dash import Input, Output

from ev_analytics.core.filter_state import FilterState
from ev_analytics.ui.helpers import format_filter_summary
from ev_analytics.ui.ids import IDs

if TYPE_CHECKING:
    from ev_analytics.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}


def state_from_selection(year: str | None, make: str | None) -> dict[str, Any]:
    state = FilterState()
    state.set_year(year)
    state.set_make(make)
    return state.to_dict()


def reset_selection() -> Tuple[str, str]:
    state = FilterState()
    return state.year, state.make


def filter_status(ctx: AppConfig, fs_data: dict[str, Any] | None) -> Tuple[dict, str]:
    """Reset button visibility (only while a filter is active) and the summary line."""
    state = FilterState.from_dict(fs_data)
    ds = ctx.dataset
    n_rows = len(ds.subset_for_state(state)) if ds is not None else 0
    style = {} if state.is_active() else HIDDEN
    return style, format_filter_summary(state, n_rows)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Selectors -> FilterState store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.YEAR_SELECT, "value"),
        Input(IDs.Control.MAKE_SELECT, "value"),
    )
    def update_filter_state(year: str | None, make: str | None):
        data = state_from_selection(year, make)
        logger.info("filter_change", extra=data)
        return data

    # ---------------------------------------------------------
    # Reset button -> selectors back to "all"
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.YEAR_SELECT, "value"),
        Output(IDs.Control.MAKE_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(_n_clicks):
        return reset_selection()

    # ---------------------------------------------------------
    # Reset visibility + summary line
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESET_BTN, "style"),
        Output(IDs.Control.FILTER_SUMMARY, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_filter_status(fs_data: dict[str, Any] | None):
        return filter_status(ctx, fs_data)
