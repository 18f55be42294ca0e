"""
Core domain layer: record table, filter state, metrics, chart aggregators,
view base class and the view registry
"""

from .dataset import Dataset
from .filter_state import FilterState
from .metrics import Metrics, compute_metrics
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["Dataset", "FilterState", "Metrics", "compute_metrics", "BaseView", "ViewRegistry"]
