"""Formatting pipeline: severity classification, coloring and part resolution."""

from .classifier import classify, color_for, method_for
from .colorizer import ANSI_PATTERN, Colorize, strip_ansi
from .resolver import aresolve, resolve

__all__ = [
    "ANSI_PATTERN",
    "Colorize",
    "aresolve",
    "classify",
    "color_for",
    "method_for",
    "resolve",
    "strip_ansi",
]
