"""
Configuration module for the Quake 3 Arena log parser.

Provides environment-driven settings, game constants and YAML overrides
for means-of-death display data.
"""

from .settings import ParserSettings, get_settings, reload_settings
from .loader import ConfigLoader, load_and_apply_config

__all__ = [
    "ParserSettings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_and_apply_config",
]
