"""
Shared utilities module.

Configuration and logging used across the package.
"""

from nullsafe.shared.config import Settings, get_settings, reset_settings
from nullsafe.shared.logging_config import configure_logging, get_logger

__all__ = ["Settings", "get_settings", "reset_settings", "configure_logging", "get_logger"]
