"""
Config package for ev_analytics.

Responsible for:
- the GlobalConfig model
- loading global.json (with environment overrides)
"""

from .model import GlobalConfig
from .loader import load_global_config

__all__ = ["GlobalConfig", "load_global_config"]
