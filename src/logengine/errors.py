"""Exceptions raised by the log engine."""

from __future__ import annotations


class LogEngineError(Exception):
    """Base exception for all log engine errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(LogEngineError, ValueError):
    """Raised when engine settings or a sink configuration are invalid."""


class ResolutionError(LogEngineError):
    """Raised when a deferred message part fails to produce its value."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message, details={"position": position})
        self.position = position


class SinkWriteError(LogEngineError):
    """
    Raised after dispatch when one or more sinks failed to write.

    Sinks that did not fail have already received the message. ``failures``
    holds one ``(sink name, exception)`` pair per failing sink in dispatch
    order; the default sink and a user sink may share a name.
    """

    def __init__(self, failures: list[tuple[str, BaseException]]) -> None:
        names = [name for name, _ in failures]
        super().__init__(
            "Failed to write to sink(s): " + ", ".join(names),
            details={"sinks": names},
        )
        self.failures = failures
