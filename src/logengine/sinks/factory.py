"""Build sink descriptors from validated sink configurations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..logging import logger
from ..models.settings import ColorMode, SinkConfig, SinkKind
from ..protocols import SinkHandler
from .handler import StreamHandler

_HANDLER_METHODS = ("log", "info", "warn", "error", "debug", "trace")


@dataclass
class SinkDescriptor:
    """A registered sink: its configuration and the handler that writes."""

    name: str
    kind: SinkKind
    config: SinkConfig
    handler: SinkHandler
    color_capable: bool

    def close(self) -> None:
        close = getattr(self.handler, "close", None)
        if callable(close):
            close()


def coerce_sink_config(config: SinkConfig | dict | Any) -> SinkConfig:
    """Validate a caller sink payload, failing loudly on unknown kinds."""
    if isinstance(config, SinkConfig):
        return config
    try:
        return SinkConfig.model_validate(config)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid sink configuration: {exc}") from exc


def keep_color_for(color_mode: ColorMode) -> Optional[bool]:
    """Handler color policy: decide per target in sink-default mode, else write as given."""
    return None if color_mode is ColorMode.SINK_DEFAULT else True


def create_sink(
    name: str,
    config: SinkConfig | dict,
    *,
    color_mode: ColorMode = ColorMode.ALWAYS,
) -> SinkDescriptor:
    """Create the descriptor for sink ``name``.

    In sink-default color mode, handlers built here strip escapes unless
    their target is a TTY. In the other modes the dispatcher has already
    decided and handlers write parts as given.
    """
    config = coerce_sink_config(config)
    keep_color = keep_color_for(color_mode)

    if config.handler is not None:
        missing = [method for method in _HANDLER_METHODS if not callable(getattr(config.handler, method, None))]
        if missing:
            raise ConfigurationError(
                f"Sink {name!r} handler is missing methods: {', '.join(missing)}",
                details={"sink": name, "missing": missing},
            )
        handler = config.handler
    elif config.kind is SinkKind.FILE:
        handler = _file_handler(name, config, keep_color)
    else:
        handler = StreamHandler(config.stdout, config.stderr, keep_color=keep_color)

    color_capable = config.color if config.color is not None else config.kind is SinkKind.CONSOLE
    logger.debug(f"Created {config.kind.value} sink {name!r} (color_capable={color_capable})")
    return SinkDescriptor(
        name=name,
        kind=config.kind,
        config=config,
        handler=handler,
        color_capable=color_capable,
    )


def _file_handler(name: str, config: SinkConfig, keep_color: Optional[bool]) -> StreamHandler:
    stdout_path = os.fspath(config.stdout)
    stderr_path = os.fspath(config.stderr) if config.stderr is not None else stdout_path
    try:
        stdout = open(stdout_path, "a", encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot open sink {name!r} file {stdout_path}: {exc}",
            details={"sink": name, "path": stdout_path},
        ) from exc

    if os.path.abspath(stderr_path) == os.path.abspath(stdout_path):
        return StreamHandler(stdout, stdout, keep_color=keep_color, owned=[stdout])

    try:
        stderr = open(stderr_path, "a", encoding="utf-8")
    except OSError as exc:
        stdout.close()
        raise ConfigurationError(
            f"Cannot open sink {name!r} file {stderr_path}: {exc}",
            details={"sink": name, "path": stderr_path},
        ) from exc
    return StreamHandler(stdout, stderr, keep_color=keep_color, owned=[stdout, stderr])
