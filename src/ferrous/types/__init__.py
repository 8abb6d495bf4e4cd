"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from ferrous.types.option import Nothing, NothingType, Option, OptionPattern, Some, is_option
from ferrous.types.result import Err, Ok, Result, ResultPattern, is_result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionPattern',
    'Result',
    'ResultPattern',
    'Some',
    'is_option',
    'is_result',
]
