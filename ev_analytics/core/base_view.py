from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional, TYPE_CHECKING

import pandas as pd
import plotly.graph_objs as go

from .dataset import Dataset
from .filter_state import FilterState

if TYPE_CHECKING:
    from ev_analytics.config.model import GlobalConfig

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally (also the dcc.Graph id suffix)
    - expose a 'label' - used as the chart card title
    - implement 'compute_data' - the chart dataset for the current FilterState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Dataset, settings: Optional[GlobalConfig] = None):
        self.dataset = dataset
        self.settings = settings

    def setting(self, name: str, default: Any) -> Any:
        """Read an optional GlobalConfig field, falling back to the view default."""
        return getattr(self.settings, name, default)

    @abstractmethod
    def compute_data(self, state: FilterState) -> pd.DataFrame:
        """
        Compute the chart dataset given the current FilterState
        :param state: the current year/make selection
        :return: data: an ordered dataframe of key/count rows
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by compute_data()
        :param state: the current year/make selection
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_dataset(self, state: FilterState) -> pd.DataFrame:
        """
        Return this view's records filtered according to the given FilterState.

        All views should call this instead of filtering the frame directly,
        so if we ever need to change the filtering behaviour, we do it in one place.
        """
        return self.dataset.subset_for_state(state)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig

    @staticmethod
    def style_figure(fig: go.Figure, height: int = 350) -> go.Figure:
        fig.update_layout(
            height=height,
            margin=dict(l=40, r=20, t=20, b=40),
            plot_bgcolor="white",
            showlegend=False,
        )
        fig.update_yaxes(gridcolor="#e0e0e0", griddash="dash")
        return fig

    def timed_compute(self, state: FilterState) -> Any:
        """compute_data with timing, logged at debug level."""
        start = time.perf_counter()
        data = self.compute_data(state)
        logger.debug(
            "view_compute",
            extra={
                "view_id": self.id,
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
                "n_rows": len(data) if data is not None else 0,
            },
        )
        return data
