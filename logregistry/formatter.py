"""logregistry.formatter
========================
Mini-README: Renders log records into coloured console lines of the form
``[timestamp][logger/thread][LEVEL][c.e.SourceClass=>method] message``. Source class
identifiers are abbreviated through a ``ShortNameCache`` so the shortening helper runs
once per distinct name. Records carrying exception information get a trailing
``[With thrown: ...]`` block with the full traceback.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .levels import colorize
from .naming import shorten_qualified_name


class ShortNameCache:
    """Memoises abbreviated source names for the lifetime of the process."""

    def __init__(self, shortener: Callable[[str], str] = shorten_qualified_name) -> None:
        self._shortener = shortener
        self._entries: Dict[str, str] = {}

    def abbreviate(self, name: str) -> str:
        """Return the cached abbreviation of ``name``, computing it on first use."""

        cached = self._entries.get(name)
        if cached is not None:
            return cached
        # setdefault keeps whichever value landed first if two threads race here.
        return self._entries.setdefault(name, self._shortener(name))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class ConsoleFormatter(logging.Formatter):
    """Formatter producing the registry's coloured single-line layout."""

    default_time_format = "%Y-%m-%d %H:%M:%S"
    default_msec_format = "%s.%03d"

    def __init__(self, name_cache: Optional[ShortNameCache] = None) -> None:
        super().__init__()
        self.name_cache = name_cache if name_cache is not None else ShortNameCache()

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` as one line plus an optional trailing traceback block.

        The line terminator is left to the handler (``StreamHandler.terminator``).
        """

        source_class = getattr(record, "source_class", None) or record.module
        return "[{}][{}/{}][{}][{}=>{}] {}{}".format(
            self.formatTime(record),
            colorize(record.name, record.levelno),
            record.thread,
            colorize(record.levelname, record.levelno),
            self.name_cache.abbreviate(source_class),
            record.funcName,
            record.getMessage(),
            self.format_thrown(record),
        )

    def format_thrown(self, record: logging.LogRecord) -> str:
        """Render the attached exception and stack information, if any."""

        blocks = []
        if record.exc_info and record.exc_info[0] is not None:
            exc_type = record.exc_info[0]
            blocks.append(f" [With thrown: {_qualified_type_name(exc_type)}] ")
            blocks.append(self.formatException(record.exc_info))
        if record.stack_info:
            if not blocks:
                blocks.append("")
            blocks.append(self.formatStack(record.stack_info))
        return "\n".join(blocks)


def _qualified_type_name(exc_type: type) -> str:
    module = exc_type.__module__
    if module in (None, "builtins"):
        return exc_type.__qualname__
    return f"{module}.{exc_type.__qualname__}"
