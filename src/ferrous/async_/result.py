"""AsyncResult type for chaining Result combinators over async callbacks.

AsyncResult wraps an Awaitable[Result[T, E]] and exposes the Result
combinators as methods returning new AsyncResult instances, so a chain
of async steps reads left to right with a single await at the end.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, str]:
        ...

    name = await (
        AsyncResult(fetch_user(1))
        .and_(validate_user)
        .map(lambda user: user.name)
        .unwrap_or('anonymous')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from ferrous._internal.lazy import MISSING
from ferrous.types.result import Err, Ok, Result

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Deferred Result whose combinators accept sync or async callbacks.

    Each step awaits the previous one and then applies the matching
    ``*_async`` mirror of the underlying Ok/Err, so steps run strictly in
    the order they were written and short-circuit exactly like the sync
    combinators. Nothing runs until the chain is awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Wrap a Task/Future for multi-await use.

    Example:
        ```python
        async def double(x: int) -> int:
            return x * 2

        async def main():
            result = await AsyncResult.from_ok(21).map(double)
            assert result == Ok(42)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    # --- Chaining: each returns a new AsyncResult ---

    def map[U](self, op: Callable[[T], U | Awaitable[U]]) -> AsyncResult[U, E]:
        """Transform the Ok value with a sync or async function.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_ok(5).map(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            return await result.map_async(op)

        return AsyncResult(_mapped())

    def map_err[F](
        self, op: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]]
    ) -> AsyncResult[T, F]:
        """Hand the error to op, which returns a whole Result (see Err.map_err)."""

        async def _mapped() -> Result[T, F]:
            result = await self._awaitable
            return await result.map_err_async(op)

        return AsyncResult(_mapped())

    def and_[U](self, x: Any) -> AsyncResult[U, E]:
        """Chain with a Result, or a function of the Ok value returning one.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err('not positive')

            async def example():
                result = await AsyncResult.from_ok(5).and_(validate)
                assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            return await result.and_async(x)

        return AsyncResult(_chained())

    def or_[U, F](self, x: Any) -> AsyncResult[T | U, F]:
        """Recover from an Err with a Result, or a function of the error returning one."""

        async def _recovered() -> Result[T | U, F]:
            result = await self._awaitable
            return await result.or_async(x)

        return AsyncResult(_recovered())

    # --- Terminals: each returns a coroutine ---

    def map_or[U](self, default: Any, op: Callable[[T], U | Awaitable[U]]) -> Coroutine[Any, Any, U]:
        """Resolve to op(value) for Ok, or the (possibly lazy) default for Err."""

        async def _map_or() -> U:
            result = await self._awaitable
            return await result.map_or_async(default, op)

        return _map_or()

    def unwrap_or(self, x: Any) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value, or x / x(error) for Err."""

        async def _unwrap() -> T:
            result = await self._awaitable
            return await result.unwrap_or_async(x)

        return _unwrap()

    def unwrap(self) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value; raises UnwrapError for Err."""

        async def _unwrap() -> T:
            result = await self._awaitable
            return result.unwrap()

        return _unwrap()

    def unwrap_err(self) -> Coroutine[Any, Any, E]:
        """Resolve to the error; raises UnwrapError for Ok."""

        async def _unwrap_err() -> E:
            result = await self._awaitable
            return result.unwrap_err()

        return _unwrap_err()

    def expect(self, msg: str) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value; raises UnwrapError(msg) for Err."""

        async def _expect() -> T:
            result = await self._awaitable
            return result.expect(msg)

        return _expect()

    def match[R](
        self,
        pattern: Any = None,
        /,
        *,
        ok: Callable[[T], R | Awaitable[R]] | None = None,
        err: Callable[[E], R | Awaitable[R]] | None = None,
    ) -> Coroutine[Any, Any, R]:
        """Resolve the chain and dispatch to the ``ok`` or ``err`` arm."""

        async def _match() -> R:
            result = await self._awaitable
            return await result.match_async(pattern, ok=ok, err=err)

        return _match()

    def ok[U](self, f: Callable[[T], U | Awaitable[U]], fallback: Any = MISSING) -> Coroutine[Any, Any, Any]:
        """Resolve to f(value) for Ok; for Err, the fallback or the Err itself."""

        async def _ok() -> Any:
            result = await self._awaitable
            return await result.ok_async(f, fallback)

        return _ok()

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
