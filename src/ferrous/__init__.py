"""ferrous: Option and Result containers for Python 3.13+.

Explicit, inspectable alternatives to None checks and exception-driven
error flow, with a combinator algebra (map, and_, or_, unwrap_or, match)
and an async mirror of every combinator.

Flat imports (preferred):
    from ferrous import Option, Some, Nothing, Result, Ok, Err, match

Submodule imports (for organization):
    from ferrous.types import Option, Result
    from ferrous.async_ import AsyncOption, AsyncResult
    from ferrous.dispatch import match, if_let
"""

# Configuration
from ferrous._config import FerrousConfig, get_config, init

# Async chains
from ferrous.async_ import AsyncOption, AsyncResult

# Dispatch
from ferrous.dispatch import if_let, match, match_async

# Errors
from ferrous.errors import UnwrapError

# Types
from ferrous.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    OptionPattern,
    Result,
    ResultPattern,
    Some,
    is_option,
    is_result,
)

__all__ = [
    # Async
    'AsyncOption',
    'AsyncResult',
    # Result types
    'Err',
    # Configuration
    'FerrousConfig',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionPattern',
    'Result',
    'ResultPattern',
    'Some',
    # Errors
    'UnwrapError',
    'get_config',
    # Dispatch
    'if_let',
    'init',
    # Type guards
    'is_option',
    'is_result',
    'match',
    'match_async',
]
