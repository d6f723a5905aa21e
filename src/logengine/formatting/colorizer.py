"""ANSI color wrapping and stripping."""

from __future__ import annotations

import re
from typing import Any

from ..models.severity import Color

# CSI sequences (ESC [ params intermediates final) and two-byte escapes.
ANSI_PATTERN = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|[@-Z\\-_])")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    if "\x1b" not in text:
        return text
    return ANSI_PATTERN.sub("", text)


class Colorize:
    """Stateless colorizer handed to deferred producers."""

    @staticmethod
    def colorize(color: Color, message: Any) -> str:
        return f"{Color(color).value}{message}{Color.RESET.value}"

    @staticmethod
    def red(message: Any) -> str:
        return Colorize.colorize(Color.RED, message)

    @staticmethod
    def yellow(message: Any) -> str:
        return Colorize.colorize(Color.YELLOW, message)

    @staticmethod
    def cyan(message: Any) -> str:
        return Colorize.colorize(Color.CYAN, message)

    @staticmethod
    def white(message: Any) -> str:
        return Colorize.colorize(Color.WHITE, message)

    @staticmethod
    def green(message: Any) -> str:
        return Colorize.colorize(Color.GREEN, message)

    @staticmethod
    def blue(message: Any) -> str:
        return Colorize.colorize(Color.BLUE, message)

    @staticmethod
    def magenta(message: Any) -> str:
        return Colorize.colorize(Color.MAGENTA, message)
