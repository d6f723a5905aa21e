"""
Log engine: the threshold gate, message resolution, coloring and routing.

Each log call runs through four steps:

1. Gate: the call is dropped unless ``level <= threshold`` (RFC-5424 order,
   lower is more severe). Deferred parts of a dropped call never run. The
   level is normalized once with ``normalize_level``; names and integral
   floats are accepted, anything unrecognized counts as INFORMATIONAL.
2. Resolve: parts are resolved exactly once per call; all sinks share the
   result.
3. Color: per sink. ALWAYS wraps every part of a color-capable sink with the
   group color, SINK_DEFAULT leaves parts untouched for the sink handler to
   decide, NEVER strips escapes already embedded in the parts.
4. Route: the group picks the sink method (error, warn, info, trace/debug,
   log) and every sink receives the parts as positional arguments.

A failing sink does not stop delivery to the others; failures are raised
together as ``SinkWriteError`` once every sink has been tried. Writes that
already happened are not rolled back.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Iterator, Optional

from pydantic import ValidationError

from .errors import ConfigurationError, SinkWriteError
from .formatting.classifier import classify, color_for, method_for
from .formatting.colorizer import Colorize, strip_ansi
from .formatting.resolver import aresolve, resolve
from .logging import logger
from .models.messages import Elapsed, FormatterContext
from .models.settings import ColorMode, EngineSettings, SinkConfig, SinkKind
from .models.severity import DispatchGroup, Severity, normalize_level, severity_label
from .protocols import Colorizer, Prompter
from .prompt import Prompt
from .sinks.factory import SinkDescriptor, create_sink, keep_color_for
from .sinks.handler import StreamHandler

DEFAULT_SINK_NAME = "default"


class Engine:
    """
    Leveled logger dispatching to named sinks.

    Each engine owns its settings and its sink registry; nothing is shared
    between instances. Registry mutation is not thread-safe.
    """

    def __init__(
        self,
        settings: EngineSettings | dict | None = None,
        *,
        clock: Callable[[], int] = time.perf_counter_ns,
        colorizer: Colorizer = Colorize,
        prompter: Optional[Prompter] = None,
    ):
        self._settings = self._coerce_settings(settings)
        self._clock = clock
        self._started = clock()
        self._colorizer = colorizer
        self._prompter = prompter if prompter is not None else Prompt()
        self._default_sink: Optional[SinkDescriptor] = None
        self._sinks: dict[str, SinkDescriptor] = {}

        try:
            if self._settings.default_sink:
                self._default_sink = self._create_default_sink()
            for name, config in self._settings.sinks.items():
                self.register_exporter(name, config)
        except Exception:
            self.close()
            raise

    # -- leveled calls -------------------------------------------------

    def emergency(self, *message: Any) -> None:
        self.log(Severity.EMERGENCY, *message)

    def alert(self, *message: Any) -> None:
        self.log(Severity.ALERT, *message)

    def critical(self, *message: Any) -> None:
        self.log(Severity.CRITICAL, *message)

    def error(self, *message: Any) -> None:
        self.log(Severity.ERROR, *message)

    def warning(self, *message: Any) -> None:
        self.log(Severity.WARNING, *message)

    def notice(self, *message: Any) -> None:
        self.log(Severity.NOTICE, *message)

    def info(self, *message: Any) -> None:
        self.log(Severity.INFORMATIONAL, *message)

    def debug(self, *message: Any) -> None:
        self.log(Severity.DEBUG, *message)

    def log(self, level: Severity | int, *message: Any) -> None:
        """Log ``message`` parts at ``level`` to every registered sink."""
        level = normalize_level(level)
        if not self.is_enabled_for(level):
            return
        resolved = resolve(message, lambda: self._context(level))
        self._dispatch(level, resolved)

    async def alog(self, level: Severity | int, *message: Any) -> None:
        """Like :meth:`log`, awaiting deferred parts that return awaitables."""
        level = normalize_level(level)
        if not self.is_enabled_for(level):
            return
        resolved = await aresolve(message, lambda: self._context(level))
        self._dispatch(level, resolved)

    def is_enabled_for(self, level: Severity | int | str) -> bool:
        return normalize_level(level) <= int(self._settings.level)

    # -- registry ------------------------------------------------------

    def register_exporter(self, name: str, exporter: SinkConfig | dict) -> None:
        """Register sink ``name``, replacing any sink already under that name."""
        descriptor = create_sink(name, exporter, color_mode=self._settings.color_mode)
        previous = self._sinks.pop(name, None)
        if previous is not None:
            logger.warning(f"Replacing sink {name!r}")
            previous.close()
        self._sinks[name] = descriptor
        logger.debug(f"Registered sink {name!r} ({descriptor.kind.value})")

    def unregister_exporter(self, name: str) -> None:
        """Remove sink ``name``; unknown names are ignored."""
        descriptor = self._sinks.pop(name, None)
        if descriptor is None:
            return
        descriptor.close()
        logger.debug(f"Unregistered sink {name!r}")

    def set_default_sink(self, enabled: bool) -> None:
        if enabled and self._default_sink is None:
            self._default_sink = self._create_default_sink()
        elif not enabled and self._default_sink is not None:
            self._default_sink.close()
            self._default_sink = None
        self._settings.default_sink = enabled

    @property
    def sinks(self) -> list[str]:
        """Registered sink names in registration order (the default sink excluded)."""
        return list(self._sinks)

    @property
    def has_default_sink(self) -> bool:
        return self._default_sink is not None

    def get_sink(self, name: str) -> Optional[SinkDescriptor]:
        return self._sinks.get(name)

    # -- settings ------------------------------------------------------

    @property
    def settings(self) -> EngineSettings:
        """Copy of the current settings; ``sinks`` mirrors the live registry."""
        sinks = {name: descriptor.config for name, descriptor in self._sinks.items()}
        return self._settings.model_copy(update={"sinks": sinks})

    @property
    def started(self) -> int:
        return self._started

    def elapsed(self) -> Elapsed:
        return Elapsed.since(self._started, self._clock())

    def set_level(self, level: Severity | int | str) -> None:
        try:
            self._settings.level = Severity.parse(level)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    def set_verbose(self, verbose: bool) -> None:
        self._settings.verbose = bool(verbose)

    def set_color_mode(self, mode: ColorMode | str | bool) -> None:
        try:
            self._settings.color_mode = ColorMode.parse(mode)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        keep_color = keep_color_for(self._settings.color_mode)
        for descriptor in self._iter_sinks():
            if isinstance(descriptor.handler, StreamHandler):
                descriptor.handler.keep_color = keep_color

    # -- teardown ------------------------------------------------------

    def close(self) -> None:
        """Close every sink and empty the registry."""
        for descriptor in list(self._iter_sinks()):
            descriptor.close()
        self._default_sink = None
        self._sinks.clear()
        logger.debug("Engine closed")

    def __enter__(self) -> "Engine":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- internals -----------------------------------------------------

    def _dispatch(self, level: int, resolved: list[str]) -> None:
        group = classify(level)
        method_name = method_for(group, self._settings.verbose)
        output = [self._header(level), *resolved] if self._settings.header else list(resolved)

        failures: list[tuple[str, BaseException]] = []
        for descriptor in list(self._iter_sinks()):
            parts = self._apply_color(descriptor, group, output)
            try:
                getattr(descriptor.handler, method_name)(*parts)
            except Exception as exc:
                failures.append((descriptor.name, exc))
        if failures:
            raise SinkWriteError(failures) from failures[0][1]

    def _apply_color(self, descriptor: SinkDescriptor, group: DispatchGroup, parts: list[str]) -> list[str]:
        mode = self._settings.color_mode
        if mode is ColorMode.NEVER:
            return [strip_ansi(part) for part in parts]
        if mode is ColorMode.ALWAYS and descriptor.color_capable:
            color = color_for(group)
            return [self._colorizer.colorize(color, part) for part in parts]
        return parts

    def _header(self, level: Severity | int) -> str:
        return f"[{self.elapsed()}] {severity_label(level)}:"

    def _context(self, level: Severity | int) -> FormatterContext:
        return FormatterContext(
            level=level,
            elapsed=self.elapsed(),
            started=self._started,
            colorizer=self._colorizer,
            prompter=self._prompter,
        )

    def _iter_sinks(self) -> Iterator[SinkDescriptor]:
        if self._default_sink is not None:
            yield self._default_sink
        yield from self._sinks.values()

    def _create_default_sink(self) -> SinkDescriptor:
        return create_sink(
            DEFAULT_SINK_NAME,
            SinkConfig(kind=SinkKind.CONSOLE),
            color_mode=self._settings.color_mode,
        )

    @staticmethod
    def _coerce_settings(settings: EngineSettings | dict | None) -> EngineSettings:
        if settings is None:
            return EngineSettings()
        if isinstance(settings, EngineSettings):
            return settings.model_copy()
        try:
            return EngineSettings.model_validate(settings)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid engine settings: {exc}") from exc
