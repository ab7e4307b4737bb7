"""logregistry.__init__
=======================
Mini-README: Public surface of the logregistry package. Re-exports the registry, the
module-level convenience helpers backed by the process-wide registry, the formatter
and the level utilities so callers can write ``from logregistry import get_logger``.
"""

from .config import Settings, get_settings
from .formatter import ConsoleFormatter, ShortNameCache
from .levels import Level, colorize, parse_level
from .naming import shorten_qualified_name
from .registry import (
    ROOT_TAG,
    LogRegistry,
    add_handler,
    get_formatter,
    get_global,
    get_handlers,
    get_level,
    get_logger,
    get_registry,
    init_logger,
    is_use_console_handler,
    remove_handler,
    reset_registry,
    set_as_default_logger,
    set_formatter,
    set_level,
    set_use_console_handler,
)

__all__ = [
    "ROOT_TAG",
    "ConsoleFormatter",
    "Level",
    "LogRegistry",
    "Settings",
    "ShortNameCache",
    "add_handler",
    "colorize",
    "get_formatter",
    "get_global",
    "get_handlers",
    "get_level",
    "get_logger",
    "get_registry",
    "get_settings",
    "init_logger",
    "is_use_console_handler",
    "parse_level",
    "remove_handler",
    "reset_registry",
    "set_as_default_logger",
    "set_formatter",
    "set_level",
    "set_use_console_handler",
    "shorten_qualified_name",
]
