"""AsyncOption type for chaining Option combinators over async callbacks."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from ferrous.async_.result import AsyncResult
from ferrous.types.option import Nothing, Option, Some

__all__ = ['AsyncOption']


class AsyncOption[T]:
    """Deferred Option whose combinators accept sync or async callbacks.

    The Option counterpart of AsyncResult: chaining methods return new
    AsyncOption instances, terminal methods return coroutines, and
    ``await`` yields the underlying Some/Nothing. Single-shot when
    wrapping a coroutine object.

    Example:
        ```python
        async def lookup(key: str) -> Option[str]:
            ...

        port = await (
            AsyncOption(lookup('port'))
            .map(int)
            .unwrap_or(8080)
        )
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Option[T]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        return self._awaitable.__await__()

    @classmethod
    def from_some(cls, value: T) -> AsyncOption[T]:
        """Create an AsyncOption containing Some(value)."""

        async def _some() -> Option[T]:
            return Some(value)

        return cls(_some())

    @classmethod
    def nothing(cls) -> AsyncOption[T]:
        """Create an AsyncOption containing Nothing."""

        async def _nothing() -> Option[T]:
            return Nothing

        return cls(_nothing())

    @classmethod
    def from_option(cls, option: Option[T]) -> AsyncOption[T]:
        """Create an AsyncOption from a synchronous Option."""

        async def _option() -> Option[T]:
            return option

        return cls(_option())

    def map[U](self, op: Callable[[T], U | Awaitable[U]]) -> AsyncOption[U]:
        """Transform the Some value with a sync or async function."""

        async def _mapped() -> Option[U]:
            option = await self._awaitable
            return await option.map_async(op)

        return AsyncOption(_mapped())

    def and_[U](self, x: Any) -> AsyncOption[U]:
        """Chain with an Option, or a function of the value returning one."""

        async def _chained() -> Option[U]:
            option = await self._awaitable
            return await option.and_async(x)

        return AsyncOption(_chained())

    def or_(self, x: Any) -> AsyncOption[T]:
        """Fall back to an Option, or a thunk producing one, when Nothing."""

        async def _recovered() -> Option[T]:
            option = await self._awaitable
            return await option.or_async(x)

        return AsyncOption(_recovered())

    def ok_or[E](self, err: Any) -> AsyncResult[T, E]:
        """Convert to an AsyncResult, materializing `err` only for Nothing."""

        async def _converted() -> Any:
            option = await self._awaitable
            return await option.ok_or_async(err)

        return AsyncResult(_converted())

    def map_or[U](self, default: Any, op: Callable[[T], U | Awaitable[U]]) -> Coroutine[Any, Any, U]:
        async def _map_or() -> U:
            option = await self._awaitable
            return await option.map_or_async(default, op)

        return _map_or()

    def unwrap_or(self, x: Any) -> Coroutine[Any, Any, T]:
        async def _unwrap() -> T:
            option = await self._awaitable
            return await option.unwrap_or_async(x)

        return _unwrap()

    def unwrap(self) -> Coroutine[Any, Any, T]:
        """Resolve to the value; raises UnwrapError for Nothing."""

        async def _unwrap() -> T:
            option = await self._awaitable
            return option.unwrap()

        return _unwrap()

    def expect(self, msg: str) -> Coroutine[Any, Any, T]:
        async def _expect() -> T:
            option = await self._awaitable
            return option.expect(msg)

        return _expect()

    def match[R](
        self,
        pattern: Any = None,
        /,
        *,
        some: Callable[[T], R | Awaitable[R]] | None = None,
        none: Callable[[], R | Awaitable[R]] | None = None,
    ) -> Coroutine[Any, Any, R]:
        """Resolve the chain and dispatch to the ``some`` or ``none`` arm."""

        async def _match() -> R:
            option = await self._awaitable
            return await option.match_async(pattern, some=some, none=none)

        return _match()

    def some[U](self, f: Callable[[T], U | Awaitable[U]]) -> Coroutine[Any, Any, Any]:
        """Resolve to f(value) for Some, or Nothing itself."""

        async def _some() -> Any:
            option = await self._awaitable
            return await option.some_async(f)

        return _some()

    def __repr__(self) -> str:
        return f'AsyncOption({self._awaitable!r})'
