from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_analytics.core.aggregations import electric_range_buckets
from ev_analytics.core.base_view import BaseView
from ev_analytics.core.filter_state import FilterState


class RangeDistributionView(BaseView):
    """
    Bar chart of electric range in fixed 50-mile bands.
    """

    id = "range_distribution"
    label = "Electric Range Distribution"
    color = "#FFBB28"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        return electric_range_buckets(self.filtered_dataset(state))

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        # all seven bands are always present, so "empty" means every band is zero
        if data is None or data.empty or int(data["count"].sum()) == 0:
            return self.empty_figure("No electric range data for the current filters")

        fig = go.Figure(
            go.Bar(
                x=data["range"],
                y=data["count"],
                marker_color=self.color,
                hovertemplate="%{x} mi: %{y:,}<extra></extra>",
            )
        )
        fig.update_xaxes(type="category", title_text="Range (miles)")
        return self.style_figure(fig, height=300)
