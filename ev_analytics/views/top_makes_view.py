from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_analytics.core.aggregations import TOP_MAKES_LIMIT, top_makes
from ev_analytics.core.base_view import BaseView
from ev_analytics.core.filter_state import FilterState


class TopMakesView(BaseView):
    """
    Bar chart of the manufacturers with the most registrations in the
    filtered records.
    """

    id = "top_makes"
    label = "Top 10 Manufacturers by Vehicle Count"
    color = "#00C49F"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        df = self.filtered_dataset(state)
        return top_makes(df, limit=self.setting("top_makes_limit", TOP_MAKES_LIMIT))

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No vehicles match the current filters")

        fig = go.Figure(
            go.Bar(
                x=data["make"],
                y=data["count"],
                marker_color=self.color,
                hovertemplate="%{x}: %{y:,}<extra></extra>",
            )
        )
        fig.update_xaxes(tickangle=-45)
        return self.style_figure(fig)
