"""
Top-level package for the EV analytics dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    ev_analytics.core
    ev_analytics.views
    ev_analytics.ui
"""

__all__: list[str] = []
