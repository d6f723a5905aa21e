from .messages import (
    Deferred,
    Elapsed,
    FormatterContext,
    Literal,
    MessagePart,
    as_part,
)
from .settings import (
    ColorMode,
    EngineSettings,
    SinkConfig,
    SinkKind,
)
from .severity import (
    Color,
    DispatchGroup,
    Severity,
    severity_label,
)

__all__ = [
    "Color",
    "ColorMode",
    "Deferred",
    "DispatchGroup",
    "Elapsed",
    "EngineSettings",
    "FormatterContext",
    "Literal",
    "MessagePart",
    "Severity",
    "SinkConfig",
    "SinkKind",
    "as_part",
    "severity_label",
]
