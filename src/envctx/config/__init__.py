"""
Settings management.

Loading and validation of the optional envctx.yaml settings file.
"""

from envctx.config.loader import Settings, load_settings

__all__ = [
    "load_settings",
    "Settings",
]
