"""Deferred Option/Result chains for async callbacks.

    from ferrous.async_ import AsyncOption, AsyncResult
"""

from ferrous.async_.option import AsyncOption
from ferrous.async_.result import AsyncResult

__all__ = ['AsyncOption', 'AsyncResult']
