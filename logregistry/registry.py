"""logregistry.registry
======================
Mini-README: The logging facade. ``LogRegistry`` maps tags to configured
``logging.Logger`` handles, owns the shared console handler, and keeps a set of extra
handlers that are attached to every handle it has created or will create. A lazily
built process-wide registry backs the module-level helpers (``get_logger``,
``add_handler``, ...) so applications can simply call ``get_logger("net")``.

Lifecycle: the default registry is created on first use from ``get_settings()`` and
lives for the rest of the process. ``shutdown()`` flushes and detaches every handler
it attached; ``reset_registry()`` does that and forgets the default instance.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Dict, FrozenSet, List, Optional, Set

from .config import Settings, get_settings
from .formatter import ConsoleFormatter
from .levels import LevelLike, parse_level
from .logger import get_logger as get_internal_logger

LOGGER = get_internal_logger(__name__)

ROOT_TAG = ""


class LogRegistry:
    """Process-wide mapping from tag to configured logger, plus the shared handler set."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        formatter: Optional[logging.Formatter] = None,
        console_handler: Optional[logging.Handler] = None,
    ) -> None:
        if settings is None:
            settings = get_settings()

        self._lock = threading.RLock()
        self._loggers: Dict[str, logging.Logger] = {}
        self._handlers: Set[logging.Handler] = set()
        self._level: int = parse_level(settings.level)
        self._use_console_handler: bool = settings.use_console_handler
        self._formatter: logging.Formatter = formatter or ConsoleFormatter()

        if console_handler is None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(parse_level(settings.console_level))
        console_handler.setFormatter(self._formatter)
        self._console_handler = console_handler

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    def get_logger_name(self, tag: str) -> str:
        """Map a tag to the name of the underlying ``logging`` logger."""

        return tag

    def get_logger(self, tag: str, level: Optional[LevelLike] = None) -> logging.Logger:
        """Return the handle for ``tag``, creating and configuring it on first use.

        ``level`` only applies when the handle is created; ``None`` means the current
        default level.
        """

        with self._lock:
            logger = self._loggers.get(tag)
            if logger is None:
                logger = logging.getLogger(self.get_logger_name(tag))
                self.init_logger(logger, level)
                self._loggers[tag] = logger
                LOGGER.debug("Created logger for tag %r at level %s", tag, logger.level)
            return logger

    def get_global(self) -> logging.Logger:
        """Return the handle for the root tag."""

        return self.get_logger(ROOT_TAG)

    def set_as_default_logger(self) -> None:
        """Re-apply the current global settings to the root handle."""

        self.init_logger(self.get_logger(ROOT_TAG))

    def init_logger(self, logger: logging.Logger, level: Optional[LevelLike] = None) -> None:
        """Apply threshold and handler attachment to an existing logger.

        Safe to call repeatedly: ``Logger.addHandler`` ignores handlers that are already
        attached.
        """

        with self._lock:
            resolved = parse_level(level)
            logger.setLevel(self._level if resolved is None else resolved)
            logger.propagate = False

            if self._use_console_handler:
                logger.addHandler(self._console_handler)
            else:
                logger.removeHandler(self._console_handler)

            for handler in self._handlers:
                logger.addHandler(handler)

    def tags(self) -> List[str]:
        """Snapshot of every tag that has a handle."""

        with self._lock:
            return list(self._loggers)

    def __contains__(self, tag: object) -> bool:
        with self._lock:
            return tag in self._loggers

    # ------------------------------------------------------------------
    # Console handler
    # ------------------------------------------------------------------
    @property
    def console_handler(self) -> logging.Handler:
        return self._console_handler

    def is_use_console_handler(self) -> bool:
        with self._lock:
            return self._use_console_handler

    def set_use_console_handler(self, use_console_handler: bool) -> None:
        """Attach or detach the console handler on every handle when the flag changes."""

        use_console_handler = bool(use_console_handler)
        with self._lock:
            if self._use_console_handler == use_console_handler:
                return
            self._use_console_handler = use_console_handler

            for logger in self._loggers.values():
                if use_console_handler:
                    logger.addHandler(self._console_handler)
                else:
                    logger.removeHandler(self._console_handler)

        LOGGER.debug("Console handler %s", "enabled" if use_console_handler else "disabled")

    # ------------------------------------------------------------------
    # Handler set
    # ------------------------------------------------------------------
    def get_handlers(self) -> FrozenSet[logging.Handler]:
        with self._lock:
            return frozenset(self._handlers)

    def add_handler(self, handler: logging.Handler) -> None:
        """Register ``handler`` and attach it to every existing handle."""

        _require_handler(handler)
        with self._lock:
            if handler in self._handlers:
                return
            self._handlers.add(handler)
            for logger in self._loggers.values():
                logger.addHandler(handler)

        LOGGER.debug("Added handler %r", handler)

    def remove_handler(self, handler: logging.Handler) -> None:
        """Unregister ``handler`` and detach it from every existing handle."""

        _require_handler(handler)
        with self._lock:
            if handler not in self._handlers:
                return
            self._handlers.discard(handler)
            for logger in self._loggers.values():
                logger.removeHandler(handler)

        LOGGER.debug("Removed handler %r", handler)

    # ------------------------------------------------------------------
    # Global defaults
    # ------------------------------------------------------------------
    def get_formatter(self) -> logging.Formatter:
        with self._lock:
            return self._formatter

    def set_formatter(self, formatter: logging.Formatter) -> None:
        """Replace the formatter used by the console handler from now on."""

        with self._lock:
            self._formatter = formatter
            self._console_handler.setFormatter(formatter)

    def get_level(self) -> int:
        with self._lock:
            return self._level

    def set_level(self, level: LevelLike) -> None:
        """Change the default level for handles created afterwards.

        Existing handles keep their threshold until ``init_logger`` is called on them.
        """

        resolved = parse_level(level)
        if resolved is None:
            raise ValueError("A default level is required")
        with self._lock:
            self._level = resolved

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def shutdown(self) -> None:
        """Flush and detach every handler this registry attached.

        Handles stay registered; a later ``init_logger`` re-attaches the handlers.
        """

        with self._lock:
            attached = [self._console_handler, *self._handlers]
            for handler in attached:
                handler.flush()
            for logger in self._loggers.values():
                for handler in attached:
                    logger.removeHandler(handler)

        LOGGER.debug("Registry shut down, %d handles detached", len(self._loggers))


def _require_handler(handler: object) -> None:
    if not isinstance(handler, logging.Handler):
        raise TypeError(f"Expected a logging.Handler, got {type(handler).__name__}")


# ----------------------------------------------------------------------
# Process-wide default registry
# ----------------------------------------------------------------------
_default_registry: Optional[LogRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> LogRegistry:
    """Return the process-wide registry, building it on first use."""

    global _default_registry
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = LogRegistry()
            registry = _default_registry
    return registry


def reset_registry() -> None:
    """Shut down and forget the process-wide registry."""

    global _default_registry
    with _default_lock:
        registry, _default_registry = _default_registry, None
    if registry is not None:
        registry.shutdown()


def get_logger(tag: str, level: Optional[LevelLike] = None) -> logging.Logger:
    """Return the handle for ``tag`` from the process-wide registry."""

    return get_registry().get_logger(tag, level)


def get_global() -> logging.Logger:
    return get_registry().get_global()


def set_as_default_logger() -> None:
    get_registry().set_as_default_logger()


def init_logger(logger: logging.Logger, level: Optional[LevelLike] = None) -> None:
    get_registry().init_logger(logger, level)


def is_use_console_handler() -> bool:
    return get_registry().is_use_console_handler()


def set_use_console_handler(use_console_handler: bool) -> None:
    get_registry().set_use_console_handler(use_console_handler)


def get_handlers() -> FrozenSet[logging.Handler]:
    return get_registry().get_handlers()


def add_handler(handler: logging.Handler) -> None:
    get_registry().add_handler(handler)


def remove_handler(handler: logging.Handler) -> None:
    get_registry().remove_handler(handler)


def get_formatter() -> logging.Formatter:
    return get_registry().get_formatter()


def set_formatter(formatter: logging.Formatter) -> None:
    get_registry().set_formatter(formatter)


def get_level() -> int:
    return get_registry().get_level()


def set_level(level: LevelLike) -> None:
    get_registry().set_level(level)
