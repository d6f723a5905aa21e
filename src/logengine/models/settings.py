"""
Engine and sink configuration models.
"""

from __future__ import annotations

from enum import Enum
from os import PathLike
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .severity import Severity


class ColorMode(str, Enum):
    """
    How the dispatcher treats color escapes.

    ALWAYS wraps parts for color-capable sinks, SINK_DEFAULT leaves the
    decision to each sink handler, NEVER strips escapes before dispatch.
    """

    ALWAYS = "always"
    SINK_DEFAULT = "sink-default"
    NEVER = "never"

    @classmethod
    def parse(cls, value: object) -> "ColorMode":
        if isinstance(value, cls):
            return value
        if value is True:
            return cls.ALWAYS
        if value is False:
            return cls.NEVER
        if isinstance(value, str):
            key = value.strip().lower()
            key = _COLOR_MODE_ALIASES.get(key, key)
            try:
                return cls(key)
            except ValueError:
                raise ValueError(f"Invalid color mode: {value!r}") from None
        raise ValueError(f"Invalid color mode: {value!r}")


# Values accepted by earlier configuration files.
_COLOR_MODE_ALIASES = {
    "true": "always",
    "default": "sink-default",
    "false": "never",
}


class SinkKind(str, Enum):
    CONSOLE = "console"
    FILE = "file"


class SinkConfig(BaseModel):
    """
    Registration payload for one named sink.
    """

    kind: SinkKind = Field(default=SinkKind.CONSOLE, description="Sink kind (console or file).")
    stdout: Any = Field(
        default=None,
        description="Standard target: a writable stream (console) or a path (file).",
    )
    stderr: Any = Field(
        default=None,
        description="Error target; falls back to the process stderr or to the stdout file.",
    )
    color: Optional[bool] = Field(
        default=None,
        description="Override the color capability implied by the kind.",
    )
    handler: Any = Field(
        default=None,
        description="Prebuilt handler exposing log/info/warn/error/debug/trace.",
    )

    model_config = {
        "extra": "forbid",
        "arbitrary_types_allowed": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _flatten_legacy_shape(cls, data: Any) -> Any:
        # {"type": ..., "options": {"stdout": ..., "stderr": ...}}
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "type" in data and "kind" not in data:
            data["kind"] = data.pop("type")
        options = data.pop("options", None)
        if isinstance(options, dict):
            for key, value in options.items():
                data.setdefault(key, value)
        return data

    @model_validator(mode="after")
    def _check_targets(self) -> "SinkConfig":
        if self.handler is not None:
            return self
        for field_name in ("stdout", "stderr"):
            target = getattr(self, field_name)
            if target is None:
                continue
            if self.kind is SinkKind.FILE and not isinstance(target, (str, PathLike)):
                raise ValueError(f"File sink {field_name} must be a path, got {type(target).__name__}")
            if self.kind is SinkKind.CONSOLE and not callable(getattr(target, "write", None)):
                raise ValueError(f"Console sink {field_name} must be a writable stream, got {type(target).__name__}")
        if self.kind is SinkKind.FILE and self.stdout is None:
            raise ValueError("File sink requires a stdout path")
        return self


class EngineSettings(BaseModel):
    """
    Per-engine configuration. Defaults match the historical engine defaults.
    """

    default_sink: bool = Field(
        default=True,
        description="Register a console sink on the process standard streams.",
    )
    color_mode: ColorMode = Field(default=ColorMode.ALWAYS, description="Color handling mode.")
    level: Severity = Field(
        default=Severity.INFORMATIONAL,
        description="Verbosity threshold; messages at or above this severity pass.",
    )
    verbose: bool = Field(
        default=True,
        description="Route DEBUG messages to the trace method instead of debug.",
    )
    header: bool = Field(
        default=True,
        description="Prefix each line with '[<elapsed>] <SEVERITY>:'.",
    )
    sinks: dict[str, SinkConfig] = Field(
        default_factory=dict,
        description="Named sinks registered at construction.",
    )

    model_config = {
        "extra": "forbid",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Severity:
        return Severity.parse(value)

    @field_validator("color_mode", mode="before")
    @classmethod
    def _parse_color_mode(cls, value: Any) -> ColorMode:
        return ColorMode.parse(value)
