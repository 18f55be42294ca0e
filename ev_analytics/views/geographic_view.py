from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_analytics.core.aggregations import TOP_LOCATIONS_LIMIT, geographic_distribution
from ev_analytics.core.base_view import BaseView
from ev_analytics.core.filter_state import FilterState


class GeographicView(BaseView):
    """
    Bar chart of the locations (State, falling back to County) with the
    most registrations. Records with no location are left out.
    """

    id = "geographic"
    label = "Geographic Distribution (Top 10 Locations)"
    color = "#FF8042"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        df = self.filtered_dataset(state)
        return geographic_distribution(df, limit=self.setting("top_locations_limit", TOP_LOCATIONS_LIMIT))

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No locations for the current filters")

        fig = go.Figure(
            go.Bar(
                x=data["state"],
                y=data["count"],
                marker_color=self.color,
                hovertemplate="%{x}: %{y:,}<extra></extra>",
            )
        )
        fig.update_xaxes(tickangle=-45, type="category")
        return self.style_figure(fig)
