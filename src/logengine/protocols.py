"""Capability interfaces the engine depends on."""

from __future__ import annotations

from typing import Any, Awaitable, Protocol

from .models.severity import Color


class SinkHandler(Protocol):
    """Output methods a sink exposes, one per dispatch route."""

    def log(self, *parts: str) -> None: ...

    def info(self, *parts: str) -> None: ...

    def warn(self, *parts: str) -> None: ...

    def error(self, *parts: str) -> None: ...

    def debug(self, *parts: str) -> None: ...

    def trace(self, *parts: str) -> None: ...


class Colorizer(Protocol):
    def colorize(self, color: Color, message: Any) -> str: ...

    def red(self, message: Any) -> str: ...

    def yellow(self, message: Any) -> str: ...

    def cyan(self, message: Any) -> str: ...

    def white(self, message: Any) -> str: ...

    def green(self, message: Any) -> str: ...

    def blue(self, message: Any) -> str: ...

    def magenta(self, message: Any) -> str: ...


class Prompter(Protocol):
    def ask(self, question: str) -> Awaitable[str]: ...

