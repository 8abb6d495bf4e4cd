"""Value-or-thunk resolution shared by the sync and async combinators.

Every combinator that takes "a value or a callable producing it" goes
through these helpers, so the eager/lazy rule lives in one place:
callables are invoked, anything else is used as is.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import Any

__all__ = ['MISSING', 'discard', 'force', 'force_async', 'settle']


class _Missing:
    """Sentinel for optional arguments where None is a legal value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return '<missing>'


MISSING: Any = _Missing()


def force(x: Any, *args: Any) -> Any:
    """Return x(*args) if x is callable, else x itself."""
    if callable(x):
        return x(*args)
    return x


async def settle[T](value: T | Awaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def force_async(x: Any, *args: Any) -> Any:
    """Async counterpart of force(): the outcome is awaited if awaitable.

    Covers plain values, awaitables passed as values, sync callables and
    async callables with the same call.
    """
    return await settle(force(x, *args))


def discard(x: Any) -> None:
    """Close x if it is a bare coroutine that a short-circuit will never await.

    Tasks and futures are left alone: they are already scheduled and
    belong to the caller.
    """
    from ferrous._config import get_config

    if inspect.iscoroutine(x) and get_config().close_discarded:
        x.close()
