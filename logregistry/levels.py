"""logregistry.levels
=====================
Mini-README: Severity levels and their console colours. ``Level`` extends the numeric
scale of the standard ``logging`` module with the finer grades (FINEST, FINER, CONFIG)
and the ALL/OFF sentinels, so every member can be handed straight to
``Logger.setLevel`` or ``Handler.setLevel``. ``parse_level`` accepts names or numbers
and ``colorize`` wraps text in the ANSI colour assigned to a level.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Optional, Union

ANSI_RESET = "\033[0m"


class Level(enum.IntEnum):
    """Ordered severity scale, from most to least verbose."""

    # 0 means "inherit from parent" on a standard logger, so ALL starts at 1.
    ALL = 1
    FINEST = 3
    FINER = 5
    FINE = logging.DEBUG
    DEBUG = logging.DEBUG
    CONFIG = 15
    INFO = logging.INFO
    WARNING = logging.WARNING
    SEVERE = logging.ERROR
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    OFF = sys.maxsize


for _level in (Level.FINEST, Level.FINER, Level.CONFIG):
    logging.addLevelName(int(_level), _level.name)


LevelLike = Union[Level, int, str]

_COLOR_CODES = {
    Level.FINEST: "\033[32m",
    Level.FINER: "\033[32m",
    Level.FINE: "\033[1;32m",
    Level.INFO: "\033[1;36m",
    Level.CONFIG: "\033[35m",
    Level.WARNING: "\033[1;33m",
    Level.SEVERE: "\033[1;31m",
}


def parse_level(value: Optional[LevelLike]) -> Optional[int]:
    """Normalise a level given as a member, an int, a numeric string or a name.

    ``None`` is passed through so callers can treat it as "use the default". Names are
    case-insensitive and include the aliases (``fine``/``debug``, ``severe``/``error``).
    Numbers at or below ``NOTSET`` become ``ALL`` so a handle never defers to its parent.
    """

    if value is None:
        return None
    if isinstance(value, int):
        return _clamp(int(value))
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return _clamp(int(text))
        try:
            return int(Level[text.upper()])
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None
    raise TypeError(f"Cannot interpret {type(value).__name__} as a log level")


def _clamp(level: int) -> int:
    return max(level, int(Level.ALL))


def colorize(text: str, level: int) -> str:
    """Wrap ``text`` in the ANSI colour for ``level``; unknown levels stay uncoloured."""

    code = _COLOR_CODES.get(level)
    if code is None:
        return text
    return f"{code}{text}{ANSI_RESET}"
