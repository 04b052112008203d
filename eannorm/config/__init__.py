"""
Configuration management for eannorm.
"""

from eannorm.config.logging_setup import configure_logging
from eannorm.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
