"""Free-function pattern dispatch over Option and Result.

These are conveniences for callers who prefer ``match(value, ...)`` to
``value.match(...)``. The only rule of their own is how they tell the two
container kinds apart: anything exposing a callable ``is_ok`` is a Result,
everything else is treated as an Option.

Example:
    ```python
    from ferrous import Err, Ok, match

    def divide(a: int, b: int):
        return Err("Can't divide by zero") if b == 0 else Ok(a // b)

    match(divide(10, 5), ok=lambda v: v, err=lambda e: 0)  # 2
    match(divide(10, 0), {'ok': str, 'err': str.upper})     # "CAN'T DIVIDE BY ZERO"
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ferrous._internal.lazy import settle
from ferrous._internal.patterns import find_arm, pick_arm
from ferrous._logging import get_logger
from ferrous.types.option import NothingType, Some
from ferrous.types.result import Err, Ok, is_result

__all__ = ['if_let', 'match', 'match_async']

log = get_logger(__name__)


def _select(
    value: Any,
    pattern: Any,
    arms: dict[str, Callable[..., Any] | None],
) -> tuple[Callable[..., Any], tuple[Any, ...]]:
    """Pick the arm to run for `value` and the arguments to call it with."""
    probed = not isinstance(value, Ok | Err | Some | NothingType)
    if is_result(value):
        if probed:
            log.debug('match_dispatch', kind='result', type=type(value).__name__)
        if value.is_ok():
            return pick_arm(pattern, 'ok', arms['ok']), (value.unwrap(),)
        return pick_arm(pattern, 'err', arms['err']), (value.unwrap_err(),)

    if probed:
        log.debug('match_dispatch', kind='option', type=type(value).__name__)
    if value.is_some():
        return pick_arm(pattern, 'some', arms['some']), (value.unwrap(),)
    return pick_arm(pattern, 'none', arms['none']), ()


def match(
    value: Any,
    pattern: Any = None,
    /,
    *,
    some: Callable[..., Any] | None = None,
    none: Callable[[], Any] | None = None,
    ok: Callable[..., Any] | None = None,
    err: Callable[..., Any] | None = None,
) -> Any:
    """Pattern match over the variants of a Result or an Option.

    Prefer calling ``.match()`` on the value; this form exists for
    functional-style call sites and for duck-typed containers.

    Args:
        value: A Result, an Option, or any object shaped like one.
        pattern: Optional mapping (or object) holding the arms.
        some: Arm for Some, called with the value.
        none: Arm for Nothing, called with no arguments.
        ok: Arm for Ok, called with the value.
        err: Arm for Err, called with the error.

    Returns:
        Whatever the selected arm returns.

    Raises:
        TypeError: If the arm needed for `value` was not supplied.
    """
    arm, args = _select(value, pattern, {'some': some, 'none': none, 'ok': ok, 'err': err})
    return arm(*args)


async def match_async(
    value: Any,
    pattern: Any = None,
    /,
    *,
    some: Callable[..., Any] | None = None,
    none: Callable[[], Any] | None = None,
    ok: Callable[..., Any] | None = None,
    err: Callable[..., Any] | None = None,
) -> Any:
    """Async version of match(); the selected arm is awaited if it returns an awaitable."""
    arm, args = _select(value, pattern, {'some': some, 'none': none, 'ok': ok, 'err': err})
    return await settle(arm(*args))


def if_let(
    value: Any,
    pattern: Any = None,
    /,
    *,
    some: Callable[..., Any] | None = None,
    ok: Callable[..., Any] | None = None,
    else_: Callable[[], Any] | None = None,
) -> Any:
    """Run the success arm if `value` holds a value, else the optional ``else`` arm.

    Without an ``else`` arm the miss path returns None. In a pattern
    mapping the arm is spelled ``'else'``.

    Example:
        ```python
        if_let(Some(2), some=lambda x: x * 2)                # 4
        if_let(Nothing, {'some': str, 'else': lambda: '-'})  # '-'
        if_let(Err('boom'), ok=str)                          # None
        ```
    """
    if is_result(value):
        if value.is_ok():
            return pick_arm(pattern, 'ok', ok)(value.unwrap())
    elif value.is_some():
        return pick_arm(pattern, 'some', some)(value.unwrap())

    arm = find_arm(pattern, 'else', else_)
    if arm is None:
        return None
    return arm()
