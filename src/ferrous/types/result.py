"""Result type: Ok[T] | Err[E] for explicit error handling.

The error payload E is unconstrained: a string, a struct, an exception
instance, anything. Combinators short-circuit on the variant that
decides the outcome and never evaluate the operand they skip.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, NoReturn, TypedDict, TypeIs

import msgspec

from ferrous._internal.lazy import MISSING, discard, force, force_async, settle
from ferrous._internal.patterns import find_arm, pick_arm
from ferrous.errors import raise_unwrap

__all__ = [
    'Err',
    'Ok',
    'Result',
    'ResultPattern',
    'is_result',
]


class ResultPattern[T, E, R](TypedDict):
    """Pattern object for ``Result.match``: one arm per variant."""

    ok: Callable[[T], R]
    err: Callable[[E], R]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or chained through a sequence of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.and_(lambda x: Err('too big') if x > 10 else Ok(x))
        Err(error='too big')
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, op: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            op: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying op to the value.
        """
        return Ok(op(self.value))

    async def map_async[U](self, op: Callable[[T], U | Awaitable[U]]) -> Ok[U]:
        """Async version of map(); op may be a coroutine function."""
        return Ok(await settle(op(self.value)))

    def map_err(self, op: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged; op is never called for Ok."""
        return self

    async def map_err_async(self, op: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Async version of map_err()."""
        return self

    def map_or[U](self, default: U | Callable[[], U], op: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return op(value); the default is never evaluated for Ok."""
        return op(self.value)

    async def map_or_async[U](
        self,
        default: U | Awaitable[U] | Callable[[], U | Awaitable[U]],
        op: Callable[[T], U | Awaitable[U]],
    ) -> U:
        """Async version of map_or()."""
        discard(default)
        return await settle(op(self.value))

    def and_[U, E](self, x: Ok[U] | Err[E] | Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Return x, or x(value) if x is callable.

        Also known as flatmap or bind when given a function.

        Args:
            x: Result to return, or function taking T and returning a Result.

        Returns:
            The Result given or computed.
        """
        return force(x, self.value)

    async def and_async[U, E](
        self,
        x: Result[U, E] | Awaitable[Result[U, E]] | Callable[[T], Result[U, E] | Awaitable[Result[U, E]]],
    ) -> Result[U, E]:
        """Async version of and_()."""
        return await force_async(x, self.value)

    def or_(self, x: Any) -> Ok[T]:  # noqa: ARG002
        """Return self; x is never evaluated for Ok."""
        return self

    async def or_async(self, x: Any) -> Ok[T]:
        """Async version of or_()."""
        discard(x)
        return self

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_or(self, x: T | Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    async def unwrap_or_async(self, x: Any) -> T:
        """Async version of unwrap_or()."""
        discard(x)
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to return.

        Raises:
            UnwrapError: Always, with the Ok value in the message.
        """
        raise_unwrap(
            f'called `unwrap_err()` on an `Ok` value: {self.value!r}', self, method='unwrap_err'
        )

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with `msg` as the exact message.

        Raises:
            UnwrapError: Always.
        """
        raise_unwrap(msg, self, method='expect_err')

    def match[R](
        self,
        pattern: ResultPattern[T, Any, R] | Mapping[str, Callable[..., R]] | None = None,
        /,
        *,
        ok: Callable[[T], R] | None = None,
        err: Callable[[Any], R] | None = None,
    ) -> R:
        """Dispatch on the variant: call the ``ok`` arm with the value.

        Arms can be given as keywords or as a pattern mapping/object;
        only the arm that runs is required.

        Raises:
            TypeError: If the ``ok`` arm is missing.
        """
        return pick_arm(pattern, 'ok', ok)(self.value)

    async def match_async[R](
        self,
        pattern: Any = None,
        /,
        *,
        ok: Callable[[T], R | Awaitable[R]] | None = None,
        err: Callable[[Any], R | Awaitable[R]] | None = None,
    ) -> R:
        """Async version of match(); arms may be coroutine functions."""
        return await settle(pick_arm(pattern, 'ok', ok)(self.value))

    def ok[U](self, f: Callable[[T], U], fallback: Any = MISSING) -> U:  # noqa: ARG002
        """Return f(value) directly, unwrapped (an "if let Ok(x)" shorthand)."""
        return f(self.value)

    async def ok_async[U](self, f: Callable[[T], U | Awaitable[U]], fallback: Any = MISSING) -> U:
        """Async version of ok(); a skipped fallback coroutine is closed."""
        discard(fallback)
        return await settle(f(self.value))

    def if_let[R](
        self,
        pattern: Any = None,
        /,
        *,
        ok: Callable[[T], R] | None = None,
        else_: Callable[[], R] | None = None,
    ) -> R:
        """Call the ``ok`` arm with the value; ``else_`` is only used for Err."""
        return pick_arm(pattern, 'ok', ok)(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or passed along.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
        >>> err.unwrap_or(len)
        20
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def map(self, op: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    async def map_async(self, op: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[T, F](self, op: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Hand the error to op and return the Result it builds.

        op returns a whole Result, so it can rewrite the error
        (``lambda e: Err(f'code {e}')``) or recover (``lambda e: Ok(0)``).

        Args:
            op: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by op.
        """
        return op(self.error)

    async def map_err_async[T, F](
        self, op: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]]
    ) -> Result[T, F]:
        return await settle(op(self.error))

    def map_or[U](self, default: U | Callable[[], U], op: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return the default, calling it first if it is callable."""
        return force(default)

    async def map_or_async[U](self, default: Any, op: Any) -> U:  # noqa: ARG002
        return await force_async(default)

    def and_(self, x: Any) -> Err[E]:  # noqa: ARG002
        """Return self; x is never evaluated for Err."""
        return self

    async def and_async(self, x: Any) -> Err[E]:
        discard(x)
        return self

    def or_[U, F](self, x: Ok[U] | Err[F] | Callable[[E], Ok[U] | Err[F]]) -> Ok[U] | Err[F]:
        """Return x, or x(error) if it is callable.

        Args:
            x: Result to fall back to, or recovery function taking the error.

        Returns:
            The Result given or computed.
        """
        return force(x, self.error)

    async def or_async[U, F](self, x: Any) -> Result[U, F]:
        return await force_async(x, self.error)

    def unwrap(self) -> NoReturn:
        """Raise since there is no Ok value.

        Raises:
            UnwrapError: Always, with the error payload in the message.
        """
        raise_unwrap(f'called `unwrap()` on an `Err` value: {self.error!r}', self, method='unwrap')

    def unwrap_or[T](self, x: T | Callable[[E], T]) -> T:
        """Return x, or x(error) if it is callable."""
        return force(x, self.error)

    async def unwrap_or_async[T](self, x: Any) -> T:
        return await force_async(x, self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with `msg` as the exact message.

        Raises:
            UnwrapError: Always.
        """
        raise_unwrap(msg, self, method='expect')

    def expect_err(self, msg: str) -> E:  # noqa: ARG002
        """Return the contained error, ignoring the message."""
        return self.error

    def match[R](
        self,
        pattern: Any = None,
        /,
        *,
        ok: Callable[..., R] | None = None,
        err: Callable[[E], R] | None = None,
    ) -> R:
        """Dispatch on the variant: call the ``err`` arm with the error."""
        return pick_arm(pattern, 'err', err)(self.error)

    async def match_async[R](
        self,
        pattern: Any = None,
        /,
        *,
        ok: Callable[..., Any] | None = None,
        err: Callable[[E], R | Awaitable[R]] | None = None,
    ) -> R:
        return await settle(pick_arm(pattern, 'err', err)(self.error))

    def ok[U](self, f: Callable[..., U], fallback: Any = MISSING) -> Any:  # noqa: ARG002
        """Return `fallback` if one was supplied, otherwise this Err unchanged."""
        if fallback is MISSING:
            return self
        return fallback

    async def ok_async(self, f: Callable[..., Any], fallback: Any = MISSING) -> Any:  # noqa: ARG002
        if fallback is MISSING:
            return self
        return await settle(fallback)

    def if_let[R](
        self,
        pattern: Any = None,
        /,
        *,
        ok: Callable[..., R] | None = None,
        else_: Callable[[], R] | None = None,
    ) -> R | None:
        """Call the ``else`` arm if one was given, otherwise return None."""
        arm = find_arm(pattern, 'else', else_)
        if arm is None:
            return None
        return arm()


type Result[T, E = Exception] = Ok[T] | Err[E]


def is_result(x: object) -> TypeIs[Result[Any, Any]]:
    """Return True if x behaves like a Result.

    Ok and Err instances qualify directly. Anything else must expose a
    *callable* ``is_ok``: a plain ``is_ok`` attribute (a flag, a field)
    is not enough, since dispatch calls it.
    """
    if isinstance(x, Ok | Err):
        return True
    return callable(getattr(x, 'is_ok', None))
