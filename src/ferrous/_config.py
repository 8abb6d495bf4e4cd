"""Library configuration: FerrousConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cache

from ferrous._logging import configure_logging, get_logger

__all__ = [
    'FerrousConfig',
    'get_config',
    'init',
    'reset_config',
]

log = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})
_LOG_FORMATS = {'json': True, 'console': False}


@dataclass(frozen=True)
class FerrousConfig:
    """Configuration for ferrous.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or colored console lines (False).
        close_discarded: Close bare coroutines that an async combinator
            short-circuits past, so they never warn about not being awaited.
    """

    log_level: str | None = None
    json_output: bool = True
    close_discarded: bool = True


# Global configuration (set by init())
_config: FerrousConfig | None = None


def _detect_log_level() -> str | None:
    """Read FERROUS_LOG_LEVEL; unknown level names fall back to None."""
    level = os.environ.get('FERROUS_LOG_LEVEL', '').strip().upper()
    if not level:
        return None
    if not isinstance(logging.getLevelName(level), int):
        logging.warning("Unknown FERROUS_LOG_LEVEL value '%s', ignoring", level)
        return None
    return level


def _detect_json_output() -> bool:
    """Read FERROUS_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get('FERROUS_LOG_FORMAT', '').strip().lower()
    if not fmt:
        return True
    if fmt not in _LOG_FORMATS:
        logging.warning("Unknown FERROUS_LOG_FORMAT value '%s', defaulting to json", fmt)
        return True
    return _LOG_FORMATS[fmt]


def _detect_close_discarded() -> bool:
    """Read FERROUS_CLOSE_DISCARDED as a boolean flag, defaulting to True."""
    flag = os.environ.get('FERROUS_CLOSE_DISCARDED', '').strip().lower()
    if not flag:
        return True
    if flag in _TRUTHY:
        return True
    if flag in _FALSY:
        return False
    logging.warning("Unknown FERROUS_CLOSE_DISCARDED value '%s', defaulting to true", flag)
    return True


@cache
def _from_env() -> FerrousConfig:
    """Resolve the environment once; reset_config() forgets the result."""
    return FerrousConfig(
        log_level=_detect_log_level(),
        json_output=_detect_json_output(),
        close_discarded=_detect_close_discarded(),
    )


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    close_discarded: bool | None = None,
) -> FerrousConfig:
    """Initialize ferrous with the given configuration.

    Every argument left as None is read from the environment
    (FERROUS_LOG_LEVEL, FERROUS_LOG_FORMAT, FERROUS_CLOSE_DISCARDED).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_output: JSON (True) or console (False) log rendering.
        close_discarded: Close coroutines discarded by async short-circuits.

    Returns:
        The FerrousConfig that was set.

    Example:
        ```python
        import ferrous

        ferrous.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = FerrousConfig(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
        close_discarded=(
            close_discarded if close_discarded is not None else _detect_close_discarded()
        ),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)
        log.info(
            'ferrous_configured',
            log_level=_config.log_level,
            json_output=_config.json_output,
            close_discarded=_config.close_discarded,
        )

    return _config


def get_config() -> FerrousConfig:
    """Get the current configuration.

    Falls back to a configuration read from the environment when init()
    has not been called. The environment is read on first use only.

    Returns:
        The current FerrousConfig.
    """
    if _config is None:
        return _from_env()
    return _config


def reset_config() -> None:
    """Forget the configuration set by init() and the cached environment."""
    global _config  # noqa: PLW0603
    _config = None
    _from_env.cache_clear()
