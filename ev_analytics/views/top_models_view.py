from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_analytics.core.aggregations import TOP_MODELS_LIMIT, top_models
from ev_analytics.core.base_view import BaseView
from ev_analytics.core.filter_state import FilterState


class TopModelsView(BaseView):
    """
    Horizontal bar chart of the most common "Make Model" pairs.
    """

    id = "top_models"
    label = "Most Popular EV Models"
    color = "#8884D8"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        df = self.filtered_dataset(state)
        return top_models(df, limit=self.setting("top_models_limit", TOP_MODELS_LIMIT))

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No models match the current filters")

        fig = go.Figure(
            go.Bar(
                x=data["count"],
                y=data["model"],
                orientation="h",
                marker_color=self.color,
                hovertemplate="%{y}: %{x:,}<extra></extra>",
            )
        )
        # most popular at the top
        fig.update_yaxes(autorange="reversed", type="category")
        return self.style_figure(fig)
