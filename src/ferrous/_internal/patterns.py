"""Arm lookup for match/if_let pattern objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

__all__ = ['find_arm', 'pick_arm']


def find_arm(pattern: Any, name: str, given: Callable[..., Any] | None) -> Callable[..., Any] | None:
    """Return the arm called `name`, or None if neither source provides it.

    A keyword arm wins over the pattern. The pattern may be a mapping
    ({'some': ..., 'none': ...}) or any object exposing the arms as
    attributes.
    """
    if given is not None:
        return given
    if pattern is None:
        return None
    if isinstance(pattern, Mapping):
        return pattern.get(name)
    return getattr(pattern, name, None)


def pick_arm(pattern: Any, name: str, given: Callable[..., Any] | None) -> Callable[..., Any]:
    """Like find_arm(), but the arm is required.

    Raises:
        TypeError: If no arm called `name` was supplied.
    """
    arm = find_arm(pattern, name, given)
    if arm is None:
        msg = f"match pattern is missing the '{name}' arm"
        raise TypeError(msg)
    return arm
