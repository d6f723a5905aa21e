"""
Public API for the logengine package.
"""

from .engine import Engine
from .errors import ConfigurationError, LogEngineError, ResolutionError, SinkWriteError
from .formatting import Colorize, strip_ansi
from .models import (
    Color,
    ColorMode,
    Deferred,
    DispatchGroup,
    Elapsed,
    EngineSettings,
    FormatterContext,
    Literal,
    Severity,
    SinkConfig,
    SinkKind,
)
from .prompt import Prompt

__all__ = [
    "Engine",
    "Color",
    "ColorMode",
    "Colorize",
    "ConfigurationError",
    "Deferred",
    "DispatchGroup",
    "Elapsed",
    "EngineSettings",
    "FormatterContext",
    "Literal",
    "LogEngineError",
    "Prompt",
    "ResolutionError",
    "Severity",
    "SinkConfig",
    "SinkKind",
    "SinkWriteError",
    "strip_ansi",
]
