"""
Configuration layer - cover parameters, message tables, runtime settings.
"""

from .loader import load_parameters, parse_parameters
from .messages import MessageTables, load_message_table, read_messages
from .settings import CoverSettings, configure_logging, get_settings, reload_settings

__all__ = [
    "load_parameters",
    "parse_parameters",
    "MessageTables",
    "load_message_table",
    "read_messages",
    "CoverSettings",
    "configure_logging",
    "get_settings",
    "reload_settings",
]
