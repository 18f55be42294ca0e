from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_analytics.core.aggregations import MIN_GROWTH_YEAR, yearly_growth
from ev_analytics.core.base_view import BaseView
from ev_analytics.core.filter_state import FilterState


class YearlyGrowthView(BaseView):
    """
    Area chart of registrations per model year.

    Always computed over the full dataset: the growth trend is global and
    ignores the year/make filters.
    """

    id = "yearly_growth"
    label = "EV Population Growth Over Time"
    color = "#0088FE"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        return yearly_growth(
            self.dataset.records,
            min_year=self.setting("min_growth_year", MIN_GROWTH_YEAR),
        )

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No model years to show")

        fig = go.Figure(
            go.Scatter(
                x=data["year"],
                y=data["count"],
                mode="lines",
                line={"color": self.color, "shape": "spline"},
                fill="tozeroy",
                hovertemplate="%{x}: %{y:,}<extra></extra>",
            )
        )
        fig.update_xaxes(type="category")
        return self.style_figure(fig)
