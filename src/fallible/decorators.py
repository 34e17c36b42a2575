"""@safe: run raising code and get a Result back."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from fallible._logging import get_logger
from fallible.result import Err, Ok, Result

__all__ = ['safe']

_logger = get_logger('fallible.decorators')


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
    map_err: Callable[[Any], BaseException] | None = None,
) -> Any:
    """Turn a raising callable into one returning ``Ok(value)`` or ``Err(exc)``.

    Only ``exceptions`` are captured; anything else propagates. Each
    captured exception is logged as a ``safe.caught`` DEBUG event naming
    the function. ``map_err`` translates the captured exception into a
    domain error, the same as calling ``.map_err`` on the returned Err.

    Usable bare or with arguments::

        @safe
        def load(path): ...

        @safe(exceptions=(KeyError,), map_err=lambda e: ConfigError(str(e)))
        def lookup(key): ...

    Example:
        >>> @safe
        ... def divide(a: int, b: int) -> float:
        ...     return a / b
        >>> divide(10, 2)
        Ok(value=5.0)
        >>> divide(10, 0)
        Err(error=ZeroDivisionError('division by zero'))
    """

    @wrapt.decorator
    def wrapper(wrapped: Callable[P, T], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Result[T, Any]:
        try:
            value = wrapped(*args, **kwargs)
        except exceptions as exc:
            _logger.debug(
                'safe.caught',
                function=getattr(wrapped, '__qualname__', repr(wrapped)),
                exc_type=type(exc).__name__,
                error=str(exc),
            )
            err = Err(exc)
            return err.map_err(map_err) if map_err is not None else err
        return Ok(value)

    if func is None:
        return wrapper
    return wrapper(func)
