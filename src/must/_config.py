"""Configuration: MustConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from must._logging import configure_logging

__all__ = [
    'MustConfig',
    'get_config',
    'init',
]

_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})
_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class MustConfig:
    """Configuration for must.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs if True, console logs otherwise.
        log_recovered: Log every failure recovered by ``@recover`` at DEBUG.
    """

    log_level: str | None = None
    json_output: bool = True
    log_recovered: bool = True


# Global configuration (set by init())
_config: MustConfig | None = None


def _detect_log_level() -> str | None:
    """Read MUST_LOG_LEVEL. Empty or unknown values mean silent."""
    env_level = os.environ.get('MUST_LOG_LEVEL', '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown MUST_LOG_LEVEL value '%s', logging stays disabled", env_level)
        return None
    return env_level


def _detect_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, falling back to default."""
    env_value = os.environ.get(name, '').strip().lower()
    if not env_value:
        return default
    if env_value in _TRUE_VALUES:
        return True
    if env_value in _FALSE_VALUES:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, env_value, default)
    return default


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    log_recovered: bool | None = None,
) -> MustConfig:
    """Initialize must with the given configuration.

    Arguments left as None are read from the environment:
    MUST_LOG_LEVEL, MUST_LOG_JSON and MUST_LOG_RECOVERED.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs if True, console logs otherwise.
        log_recovered: Log failures recovered by ``@recover``.

    Returns:
        The MustConfig that was set.

    Raises:
        ValueError: If log_level is not a known level name.

    Example:
        ```python
        import must

        must.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    else:
        resolved_level = log_level.upper()
        if resolved_level not in _LEVELS:
            msg = f'Unknown log level: {log_level!r}'
            raise ValueError(msg)

    _config = MustConfig(
        log_level=resolved_level,
        json_output=_detect_flag('MUST_LOG_JSON', True) if json_output is None else json_output,
        log_recovered=_detect_flag('MUST_LOG_RECOVERED', True) if log_recovered is None else log_recovered,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=_config.json_output)

    return _config


def get_config() -> MustConfig:
    """Get the current configuration.

    Returns:
        The MustConfig set by ``init()``, or the silent defaults if
        ``init()`` has not been called.
    """
    if _config is None:
        return MustConfig()
    return _config
