"""
Severity levels, dispatch groups and terminal colors.

Severity follows RFC-5424 ordering: a numerically lower value is more
severe, so a message passes a threshold when ``level <= threshold``.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Severity(IntEnum):
    """
    RFC-5424 syslog severity.

    Used both for the verbosity threshold and for picking the dispatch group.
    """

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Parse a severity from an enum member, an int or a (short) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Invalid severity: {value!r}") from None
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                return cls.parse(int(key))
            key = _SEVERITY_ALIASES.get(key, key)
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Invalid severity: {value!r}") from None
        raise ValueError(f"Invalid severity: {value!r}")


_SEVERITY_ALIASES = {
    "EMERG": "EMERGENCY",
    "CRIT": "CRITICAL",
    "ERR": "ERROR",
    "WARN": "WARNING",
    "INFO": "INFORMATIONAL",
}


def normalize_level(level: object) -> int:
    """
    Lenient level used by log calls: never raises.

    Ints (and integral floats) keep their value, even outside the known
    range; names go through :meth:`Severity.parse`. Anything else is
    INFORMATIONAL.
    """
    if isinstance(level, bool):
        return Severity.INFORMATIONAL
    if isinstance(level, float) and level.is_integer():
        level = int(level)
    if isinstance(level, int):
        try:
            return Severity(level)
        except ValueError:
            return int(level)
    if isinstance(level, str):
        try:
            return Severity.parse(level)
        except ValueError:
            return Severity.INFORMATIONAL
    return Severity.INFORMATIONAL


def severity_label(level: int) -> str:
    """Display name for ``level``; unknown values render as ``LEVEL<n>``."""
    try:
        return Severity(level).name
    except ValueError:
        return f"LEVEL{level}"


class DispatchGroup(str, Enum):
    """Bucket of severities sharing one sink method and one color."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    DEBUG = "debug"
    INFORMATIONAL = "informational"


class Color(str, Enum):
    """ANSI SGR escape prefixes."""

    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    RESET = "\x1b[0m"

    def __str__(self) -> str:
        return self.value
