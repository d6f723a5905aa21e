"""
Message resolution: turn tagged message parts into strings.

Literal parts are coerced with ``str()``. Deferred parts are invoked exactly
once, in order, each with a freshly built ``FormatterContext``. Callers must
apply the threshold gate before resolving; resolution is never speculative.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Iterable

from ..errors import ResolutionError
from ..models.messages import Deferred, FormatterContext, Literal, MessagePart, as_part

ContextFactory = Callable[[], FormatterContext]


def resolve(parts: Iterable[Any], context_factory: ContextFactory) -> list[str]:
    """Resolve ``parts`` synchronously.

    Awaitable producer results are driven to completion when no event loop is
    running in this thread. Inside a running loop, use :func:`aresolve`.
    """
    resolved: list[str] = []
    for position, raw in enumerate(parts):
        part = as_part(raw)
        if isinstance(part, Literal):
            resolved.append(part.render())
            continue
        value = _invoke(part, position, context_factory)
        if inspect.isawaitable(value):
            value = _run_awaitable(value, position)
        resolved.append(_render(value))
    return resolved


async def aresolve(parts: Iterable[Any], context_factory: ContextFactory) -> list[str]:
    """Resolve ``parts``, awaiting producers that return awaitables."""
    resolved: list[str] = []
    for position, raw in enumerate(parts):
        part = as_part(raw)
        if isinstance(part, Literal):
            resolved.append(part.render())
            continue
        value = _invoke(part, position, context_factory)
        if inspect.isawaitable(value):
            try:
                value = await value
            except Exception as exc:
                raise _failed(position, exc) from exc
        resolved.append(_render(value))
    return resolved


def _invoke(part: Deferred, position: int, context_factory: ContextFactory) -> Any:
    context = context_factory() if part.takes_context else None
    try:
        return part.invoke(context)
    except Exception as exc:
        raise _failed(position, exc) from exc


def _run_awaitable(value: Awaitable[Any], position: int) -> Any:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        if inspect.iscoroutine(value):
            value.close()
        raise ResolutionError(
            f"Message part {position} is asynchronous; use alog() inside a running event loop",
            position=position,
        )

    async def _wait() -> Any:
        return await value

    try:
        return asyncio.run(_wait())
    except Exception as exc:
        raise _failed(position, exc) from exc


def _render(value: Any) -> str:
    if isinstance(value, Literal):
        return value.render()
    return value if isinstance(value, str) else str(value)


def _failed(position: int, exc: Exception) -> ResolutionError:
    return ResolutionError(
        f"Message part {position} failed to resolve: {exc}",
        position=position,
    )


__all__ = [
    "ContextFactory",
    "MessagePart",
    "aresolve",
    "resolve",
]
