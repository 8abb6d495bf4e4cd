"""Option type: Some[T] | Nothing for optional values.

Every parameter documented as "value or callable" follows one rule: a
callable is invoked (only on the path that needs it), anything else is
used as is. The ``*_async`` mirrors accept sync or async callables and
awaitable values; they await at the callback boundary and nowhere else.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, NoReturn, TypedDict, TypeIs

import msgspec

from ferrous._internal.lazy import discard, force, force_async, settle
from ferrous._internal.patterns import find_arm, pick_arm
from ferrous.errors import raise_unwrap
from ferrous.types.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'OptionPattern',
    'Some',
    'is_option',
]


class OptionPattern[T, R](TypedDict):
    """Pattern object for ``Option.match``: one arm per variant."""

    some: Callable[[T], R]
    none: Callable[[], R]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or chained through Option-returning operations.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.match(some=str, none=lambda: 'empty')
        '42'
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def map[U](self, op: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        ``opt.map(f).map(g)`` is the same as ``opt.map(lambda x: g(f(x)))``.

        Args:
            op: Function to apply to the Some value.

        Returns:
            Some containing the result of applying op to the value.
        """
        return Some(op(self.value))

    async def map_async[U](self, op: Callable[[T], U | Awaitable[U]]) -> Some[U]:
        """Async version of map(); op may be a coroutine function."""
        return Some(await settle(op(self.value)))

    def map_or[U](self, default: U | Callable[[], U], op: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return op(value); the default is never evaluated for Some."""
        return op(self.value)

    async def map_or_async[U](
        self,
        default: U | Awaitable[U] | Callable[[], U | Awaitable[U]],
        op: Callable[[T], U | Awaitable[U]],
    ) -> U:
        """Async version of map_or()."""
        discard(default)
        return await settle(op(self.value))

    def ok_or[E](self, err: E | Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value).

        Args:
            err: Error value or factory, ignored for Some.

        Returns:
            Ok containing the value.
        """
        return Ok(self.value)

    def ok_or_else[E](self, f: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value). The factory is not called."""
        return Ok(self.value)

    async def ok_or_async[E](
        self, err: E | Awaitable[E] | Callable[[], E | Awaitable[E]]
    ) -> Ok[T]:
        """Async version of ok_or()."""
        discard(err)
        return Ok(self.value)

    def and_[U](
        self, x: Some[U] | NothingType | Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Return x, or x(value) if x is callable.

        This is monadic bind: ``opt.and_(Some)`` is ``opt``, and
        ``opt.and_(f).and_(g)`` is ``opt.and_(lambda v: f(v).and_(g))``.

        Args:
            x: Option to return, or function taking the value and returning an Option.

        Returns:
            The Option given or computed.
        """
        return force(x, self.value)

    async def and_async[U](
        self,
        x: Option[U] | Awaitable[Option[U]] | Callable[[T], Option[U] | Awaitable[Option[U]]],
    ) -> Option[U]:
        """Async version of and_()."""
        return await force_async(x, self.value)

    def or_(self, x: Some[T] | NothingType | Callable[[], Some[T] | NothingType]) -> Some[T]:  # noqa: ARG002
        """Return self; x is never evaluated for Some."""
        return self

    async def or_async(self, x: Any) -> Some[T]:
        """Async version of or_()."""
        discard(x)
        return self

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, x: T | Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    async def unwrap_or_async(self, x: Any) -> T:
        """Async version of unwrap_or()."""
        discard(x)
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the message."""
        return self.value

    def match[R](
        self,
        pattern: OptionPattern[T, R] | Mapping[str, Callable[..., R]] | None = None,
        /,
        *,
        some: Callable[[T], R] | None = None,
        none: Callable[[], R] | None = None,
    ) -> R:
        """Dispatch on the variant: call the ``some`` arm with the value.

        Arms can be given as keywords or as a pattern mapping/object;
        only the arm that runs is required.

        Raises:
            TypeError: If the ``some`` arm is missing.
        """
        return pick_arm(pattern, 'some', some)(self.value)

    async def match_async[R](
        self,
        pattern: Any = None,
        /,
        *,
        some: Callable[[T], R | Awaitable[R]] | None = None,
        none: Callable[[], R | Awaitable[R]] | None = None,
    ) -> R:
        """Async version of match(); arms may be coroutine functions."""
        return await settle(pick_arm(pattern, 'some', some)(self.value))

    def some[U](self, f: Callable[[T], U]) -> U:
        """Return f(value) directly, unwrapped (an "if let Some(x)" shorthand)."""
        return f(self.value)

    async def some_async[U](self, f: Callable[[T], U | Awaitable[U]]) -> U:
        """Async version of some()."""
        return await settle(f(self.value))

    def if_let[R](
        self,
        pattern: Any = None,
        /,
        *,
        some: Callable[[T], R] | None = None,
        else_: Callable[[], R] | None = None,
    ) -> R:
        """Call the ``some`` arm with the value; ``else_`` is only used for Nothing."""
        return pick_arm(pattern, 'some', some)(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. Other instances compare equal to it.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def map[T, U](self, op: Callable[[T], U]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map."""
        return self

    async def map_async(self, op: Any) -> NothingType:  # noqa: ARG002
        return self

    def map_or[T, U](self, default: U | Callable[[], U], op: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return the default, calling it first if it is callable."""
        return force(default)

    async def map_or_async[U](self, default: Any, op: Any) -> U:  # noqa: ARG002
        return await force_async(default)

    def ok_or[E](self, err: E | Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: Error value, or a factory called only now.

        Returns:
            Err containing the error.
        """
        return Err(force(err))

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error with f."""
        return Err(force(f))

    async def ok_or_async[E](self, err: Any) -> Err[E]:
        return Err(await force_async(err))

    def and_(self, x: Any) -> NothingType:  # noqa: ARG002
        """Return Nothing; x is never evaluated."""
        return self

    async def and_async(self, x: Any) -> NothingType:
        discard(x)
        return self

    def or_[T](self, x: Some[T] | NothingType | Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return x, or x() if it is callable."""
        return force(x)

    async def or_async[T](self, x: Any) -> Option[T]:
        return await force_async(x)

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            UnwrapError: Always.
        """
        raise_unwrap('called `unwrap()` on a `Nothing` value', self, method='unwrap')

    def unwrap_or[T](self, x: T | Callable[[], T]) -> T:
        """Return x, or x() if it is callable."""
        return force(x)

    async def unwrap_or_async[T](self, x: Any) -> T:
        return await force_async(x)

    def expect(self, msg: str) -> NoReturn:
        """Raise with `msg` as the exact message.

        Raises:
            UnwrapError: Always.
        """
        raise_unwrap(msg, self, method='expect')

    def match[R](
        self,
        pattern: Any = None,
        /,
        *,
        some: Callable[..., R] | None = None,
        none: Callable[[], R] | None = None,
    ) -> R:
        """Dispatch on the variant: call the ``none`` arm."""
        return pick_arm(pattern, 'none', none)()

    async def match_async[R](
        self,
        pattern: Any = None,
        /,
        *,
        some: Callable[..., Any] | None = None,
        none: Callable[[], R | Awaitable[R]] | None = None,
    ) -> R:
        return await settle(pick_arm(pattern, 'none', none)())

    def some(self, f: Callable[..., Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing itself so the caller can keep chaining."""
        return self

    async def some_async(self, f: Callable[..., Any]) -> NothingType:  # noqa: ARG002
        return self

    def if_let[R](
        self,
        pattern: Any = None,
        /,
        *,
        some: Callable[..., R] | None = None,
        else_: Callable[[], R] | None = None,
    ) -> R | None:
        """Call the ``else`` arm if one was given, otherwise return None."""
        arm = find_arm(pattern, 'else', else_)
        if arm is None:
            return None
        return arm()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def is_option(x: object) -> TypeIs[Option[Any]]:
    """Return True if x behaves like an Option.

    Some and Nothing qualify directly. Anything else must expose a
    *callable* ``is_some``; a non-callable attribute of that name does not count.
    """
    if isinstance(x, Some | NothingType):
        return True
    return callable(getattr(x, 'is_some', None))
