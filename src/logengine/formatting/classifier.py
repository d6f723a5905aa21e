"""Severity → dispatch group, color and sink method."""

from __future__ import annotations

from ..models.severity import Color, DispatchGroup, Severity

_GROUPS: dict[int, DispatchGroup] = {
    Severity.EMERGENCY: DispatchGroup.ERROR,
    Severity.ALERT: DispatchGroup.ERROR,
    Severity.CRITICAL: DispatchGroup.ERROR,
    Severity.ERROR: DispatchGroup.ERROR,
    Severity.WARNING: DispatchGroup.WARNING,
    Severity.NOTICE: DispatchGroup.NOTICE,
    Severity.INFORMATIONAL: DispatchGroup.INFORMATIONAL,
    Severity.DEBUG: DispatchGroup.DEBUG,
}

_COLORS: dict[DispatchGroup, Color] = {
    DispatchGroup.ERROR: Color.RED,
    DispatchGroup.WARNING: Color.YELLOW,
    DispatchGroup.NOTICE: Color.CYAN,
    DispatchGroup.DEBUG: Color.BLUE,
    DispatchGroup.INFORMATIONAL: Color.BLUE,
}

_METHODS: dict[DispatchGroup, str] = {
    DispatchGroup.ERROR: "error",
    DispatchGroup.WARNING: "warn",
    DispatchGroup.NOTICE: "info",
    DispatchGroup.DEBUG: "debug",
    DispatchGroup.INFORMATIONAL: "log",
}


def classify(level: object) -> DispatchGroup:
    """Dispatch group for ``level``; unrecognized values are informational."""
    if isinstance(level, bool) or not isinstance(level, int):
        return DispatchGroup.INFORMATIONAL
    return _GROUPS.get(level, DispatchGroup.INFORMATIONAL)


def color_for(group: DispatchGroup) -> Color:
    return _COLORS.get(group, Color.BLUE)


def method_for(group: DispatchGroup, verbose: bool = False) -> str:
    """Name of the sink method that receives messages of ``group``."""
    if group is DispatchGroup.DEBUG and verbose:
        return "trace"
    return _METHODS.get(group, "log")
