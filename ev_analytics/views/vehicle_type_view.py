from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_analytics.core.aggregations import vehicle_type_distribution
from ev_analytics.core.base_view import BaseView
from ev_analytics.core.filter_state import FilterState

COLORS = ["#00C49F", "#0088FE", "#FFBB28", "#FF8042", "#8884D8", "#FF6B9D", "#C084FC", "#34D399"]


class VehicleTypeView(BaseView):
    """
    Pie chart of BEV / PHEV / Other.
    """

    id = "vehicle_type"
    label = "Vehicle Type Distribution"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        return vehicle_type_distribution(self.filtered_dataset(state))

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No vehicle types for the current filters")

        colors = [COLORS[i % len(COLORS)] for i in range(len(data))]
        fig = go.Figure(
            go.Pie(
                labels=data["name"],
                values=data["value"],
                marker={"colors": colors},
                texttemplate="%{label}: %{percent:.0%}",
                sort=False,
            )
        )
        return self.style_figure(fig, height=300)
