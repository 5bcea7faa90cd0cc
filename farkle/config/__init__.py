"""
Farkle Configuration.

Environment variables, settings, and logging configuration.
"""

from farkle.config.settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
