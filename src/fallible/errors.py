"""Contract-violation errors raised by Option and Result extraction."""

from __future__ import annotations

from fallible._config import get_config
from fallible._logging import get_logger

__all__ = [
    'FallibleError',
    'IllegalStateError',
    'InvalidArgumentError',
    'violation',
]

_logger = get_logger('fallible.errors')


class FallibleError(Exception):
    """Base class for every error raised by fallible itself.

    These signal programmer errors (a contract was broken by the caller),
    not recoverable conditions. Failures of the wrapped computation travel
    inside ``Err``/``Nothing`` instead.
    """


class InvalidArgumentError(FallibleError, ValueError):
    """A present-variant was constructed from an absent value.

    Raised by ``Some(None)``.
    """

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        self.argument = argument
        super().__init__(message)


class IllegalStateError(FallibleError, RuntimeError):
    """A value or error was extracted from the wrong variant.

    Raised by ``unwrap`` on ``Nothing``/``Err``, ``unwrap_err`` on ``Ok``
    and the ``expect`` family.
    """

    def __init__(self, message: str, *, operation: str, variant: str) -> None:
        self.operation = operation
        self.variant = variant
        super().__init__(message)


def violation(
    error: FallibleError,
    *,
    event: str,
    operation: str,
    variant: str,
) -> FallibleError:
    """Log a contract violation and hand the error back for raising.

    The event is logged at ``Config.violation_level``.

    Args:
        error: The error about to be raised.
        event: Structured log event name, e.g. ``'option.contract_violation'``.
        operation: The method that was misused.
        variant: The variant the method was called on.

    Returns:
        ``error`` unchanged, so callers can write ``raise violation(...)``.
    """
    log = getattr(_logger, get_config().violation_level.lower())
    log(event, operation=operation, variant=variant, error=str(error))
    return error
