"""Library configuration: Config, init and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

LOG_LEVEL_ENV = 'FALLIBLE_LOG_LEVEL'
LOG_FORMAT_ENV = 'FALLIBLE_LOG_FORMAT'
VIOLATION_LEVEL_ENV = 'FALLIBLE_VIOLATION_LEVEL'

VIOLATION_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass(frozen=True)
class Config:
    """Configuration for fallible.

    Attributes:
        log_level: Root level installed by ``init``. None leaves logging alone.
        json_output: Render log records as JSON (True) or for the console.
        violation_level: Level at which unwrap/expect misuse and ``Some(None)``
            are logged before the error is raised.
    """

    log_level: str | None = None
    json_output: bool = True
    violation_level: str = 'DEBUG'


_config: Config | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    return level or None


def _detect_json_output() -> bool:
    """Read FALLIBLE_LOG_FORMAT: "console" or "json" (default, also for unknown values)."""
    fmt = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def _resolve_violation_level(level: str | None) -> str:
    """Normalise a violation level, falling back to DEBUG for unknown names."""
    if level is None:
        level = os.environ.get(VIOLATION_LEVEL_ENV, '')
    level = level.strip().upper()
    if not level:
        return 'DEBUG'
    if level not in VIOLATION_LEVELS:
        logging.warning('Unknown violation level %r, defaulting to DEBUG', level)
        return 'DEBUG'
    return level


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
    violation_level: str | None = None,
) -> Config:
    """Initialize fallible with the given configuration.

    Unspecified values are taken from the environment. When a log level is
    known, ``configure_logging`` replaces the root handlers; leave it unset
    if the application manages logging itself.

    Args:
        log_level: Root logging level. None = read FALLIBLE_LOG_LEVEL,
            do not touch logging if that is unset too.
        json_output: JSON or console rendering. None = read FALLIBLE_LOG_FORMAT.
        violation_level: Level for contract-violation events. None = read
            FALLIBLE_VIOLATION_LEVEL, default DEBUG.

    Returns:
        The Config that was set.

    Example:
        ```python
        import fallible

        fallible.init(log_level='INFO', violation_level='WARNING')
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
        violation_level=_resolve_violation_level(violation_level),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Before ``init`` runs, the configuration is read from the environment
    once and stored, without configuring logging.
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config(
            log_level=_detect_log_level(),
            json_output=_detect_json_output(),
            violation_level=_resolve_violation_level(None),
        )
    return _config


def reset() -> None:
    """Forget the current configuration. Logging handlers are left as they are."""
    global _config  # noqa: PLW0603
    _config = None
