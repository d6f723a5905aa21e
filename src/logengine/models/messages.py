"""
Message parts and the context handed to deferred producers.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional, Union

if TYPE_CHECKING:
    from ..protocols import Colorizer, Prompter

_NANOS_PER_SECOND = 1_000_000_000


class Elapsed(NamedTuple):
    """Duration split into whole seconds and the nanosecond remainder."""

    seconds: int
    nanoseconds: int

    @classmethod
    def since(cls, started_ns: int, now_ns: int) -> "Elapsed":
        seconds, nanoseconds = divmod(max(now_ns - started_ns, 0), _NANOS_PER_SECOND)
        return cls(seconds, nanoseconds)

    def total_seconds(self) -> float:
        return self.seconds + self.nanoseconds / _NANOS_PER_SECOND

    def __str__(self) -> str:
        return f"{self.seconds}.{self.nanoseconds:09d}"


@dataclass(frozen=True)
class FormatterContext:
    """
    Read-only view passed to a deferred producer at resolution time.

    ``started`` is the engine start reading of its clock in nanoseconds.
    """

    level: int
    elapsed: Elapsed
    started: int
    colorizer: "Colorizer"
    prompter: Optional["Prompter"] = None


@dataclass(frozen=True)
class Literal:
    value: Any

    def render(self) -> str:
        return self.value if isinstance(self.value, str) else str(self.value)


@dataclass(frozen=True)
class Deferred:
    """
    Part computed when the message is resolved, never at call time.

    The producer takes either no argument or a single ``FormatterContext``
    and may return an awaitable.
    """

    producer: Callable[..., Any]
    takes_context: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.takes_context is None:
            object.__setattr__(self, "takes_context", _accepts_argument(self.producer))

    @classmethod
    def of(cls, producer: Callable[..., Any]) -> "Deferred":
        return cls(producer=producer, takes_context=_accepts_argument(producer))

    def invoke(self, context: Optional[FormatterContext]) -> Any:
        if self.takes_context:
            return self.producer(context)
        return self.producer()


MessagePart = Union[Literal, Deferred]


def as_part(value: Any) -> MessagePart:
    """Tag a raw caller value: callables become deferred, the rest literal."""
    if isinstance(value, (Literal, Deferred)):
        return value
    if callable(value):
        return Deferred.of(value)
    return Literal(value)


def _accepts_argument(producer: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(producer)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures get the context.
        return True
    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.VAR_POSITIONAL,
    )
    return any(parameter.kind in positional for parameter in signature.parameters.values())
