"""Misuse failures raised when a container is unwrapped as the wrong variant."""

from __future__ import annotations

from typing import Any, NoReturn

from ferrous._logging import get_logger

__all__ = ['UnwrapError', 'raise_unwrap']

log = get_logger(__name__)


class UnwrapError(RuntimeError):
    """A container was asserted to hold a variant it does not hold.

    Raised by ``unwrap``, ``unwrap_err``, ``expect`` and ``expect_err``.
    It subclasses RuntimeError so ``except RuntimeError`` keeps working.

    Attributes:
        container: The Option or Result that was unwrapped.
    """

    def __init__(self, message: str, container: Any) -> None:
        self.container = container
        super().__init__(message)


def raise_unwrap(message: str, container: Any, *, method: str) -> NoReturn:
    """Log and raise an UnwrapError for `container`.

    Args:
        message: Exact text of the failure.
        container: The offending Option or Result.
        method: Name of the unwrap-family method that failed.

    Raises:
        UnwrapError: Always.
    """
    log.debug('unwrap_failed', variant=type(container).__name__, method=method)
    raise UnwrapError(message, container)
