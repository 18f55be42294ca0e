from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from ev_analytics.core.filter_state import FilterState
from ev_analytics.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from ev_analytics.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this chart.", details)


def render_view(ctx: AppConfig, view_id: str, state: FilterState) -> go.Figure:
    """Compute and render one chart; failures become an error figure."""
    try:
        view = ctx.registry.create(view_id, ctx.dataset, ctx.global_config)
        data = view.timed_compute(state)
        return view.render_figure(data, state)
    except Exception:
        logger.exception(
            "Error rendering view",
            extra={"view_id": view_id, "filter_state": state.to_dict()},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def render_all(ctx: AppConfig, fs_data: dict[str, Any] | None) -> List[go.Figure]:
    view_ids = ctx.registry.ids()

    if ctx.dataset is None:
        fig = _message_figure("Dataset not loaded.")
        return [fig for _ in view_ids]

    try:
        state = FilterState.from_dict(fs_data)
    except Exception:
        logger.exception("Invalid filter state in render callback: %r", fs_data)
        fig = _error_figure("Internal error: invalid filter state.")
        return [fig for _ in view_ids]

    logger.info("render_start", extra={"year": state.year, "make": state.make, "n_views": len(view_ids)})
    return [render_view(ctx, view_id, state) for view_id in view_ids]


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterState -> one figure per registered view
    # ---------------------------------------------------------
    @app.callback(
        [Output(graph_id(view_id), "figure") for view_id in ctx.registry.ids()],
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_charts_from_state(fs_data: dict[str, Any] | None):
        return render_all(ctx, fs_data)
