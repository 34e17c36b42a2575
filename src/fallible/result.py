"""Result type: Ok[T] | Err[E] for explicit error handling.

The variant class is the only source of truth: ``Ok`` and ``Err`` each
implement every method, so no query or extraction ever looks at whether a
payload happens to be None. ``Ok(None)`` is a valid success.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from fallible.errors import IllegalStateError, violation

if TYPE_CHECKING:
    from fallible.option import Option

__all__ = ['Err', 'Ok', 'Result', 'collect']

_EVENT = 'result.contract_violation'


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    @property
    def success(self) -> bool:
        """True, since this is Ok."""
        return True

    @property
    def failure(self) -> bool:
        """False, since this is Ok."""
        return False

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[BaseException]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Ok.

        Raises:
            IllegalStateError: Always, since Ok carries no error.
        """
        raise violation(
            IllegalStateError(
                f'Called unwrap_err on Ok: {self.value!r}',
                operation='unwrap_err',
                variant='Ok',
            ),
            event=_EVENT,
            operation='unwrap_err',
            variant='Ok',
        )

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            IllegalStateError: Always, with the custom message.
        """
        raise violation(
            IllegalStateError(f'{msg}: {self.value!r}', operation='expect_err', variant='Ok'),
            event=_EVENT,
            operation='expect_err',
            variant='Ok',
        )

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[BaseException], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_or_default(self, default_factory: Callable[[], T] | None = None) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the factory."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F: BaseException](self, _f: Callable[[BaseException], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E: BaseException](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F: BaseException](self, _f: Callable[[BaseException], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[BaseException], R]) -> R:  # noqa: ARG002
        """Apply ``on_ok`` to the contained value."""
        return on_ok(self.value)

    def to_option(self) -> Option[T]:
        """Convert to Option: Some(value), or Nothing if the value is None."""
        from fallible.option import from_nullable

        return from_nullable(self.value)

    def ok(self) -> Option[T]:
        """Alias for to_option()."""
        return self.to_option()

    def err(self) -> Option[BaseException]:
        """Convert the error to Option, returning Nothing since this is Ok."""
        from fallible.option import Nothing

        return Nothing

    def and_[U, E: BaseException](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def or_[F: BaseException](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def flatten[U, E: BaseException](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value


class Err[E: BaseException](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. The error is an
    exception instance, so it carries a message and a cause chain.

    Examples:
        >>> err = Err(ValueError('something went wrong'))
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    @property
    def success(self) -> bool:
        """False, since this is Err."""
        return False

    @property
    def failure(self) -> bool:
        """True, since this is Err."""
        return True

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        The stored error becomes the ``__cause__`` of the raised exception.

        Raises:
            IllegalStateError: Always, since Err has no Ok value to unwrap.
        """
        raise violation(
            IllegalStateError(
                f'Called unwrap on Err: {self.error!r}',
                operation='unwrap',
                variant='Err',
            ),
            event=_EVENT,
            operation='unwrap',
            variant='Err',
        ) from self._cause()

    def unwrap_err(self) -> E:
        """Return the contained error.

        Since this is Err, this always succeeds.
        """
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            IllegalStateError: Always, with the custom message.
        """
        raise violation(
            IllegalStateError(f'{msg}: {self.error!r}', operation='expect', variant='Err'),
            event=_EVENT,
            operation='expect',
            variant='Err',
        ) from self._cause()

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error since this is Err."""
        return f(self.error)

    def unwrap_or_default[T](self, default_factory: Callable[[], T] | None = None) -> T | None:
        """Return ``default_factory()``, or None when no factory is given."""
        if default_factory is None:
            return None
        return default_factory()

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F: BaseException](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err. ``_f`` is not called."""
        return self

    def or_else[T, F: BaseException](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def match[T, R](self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:  # noqa: ARG002
        """Apply ``on_err`` to the contained error."""
        return on_err(self.error)

    def to_option(self) -> Option[object]:
        """Convert to Option, returning Nothing. The error is discarded."""
        from fallible.option import Nothing

        return Nothing

    def ok(self) -> Option[object]:
        """Alias for to_option()."""
        return self.to_option()

    def err(self) -> Option[E]:
        """Convert the error to Option: Some(error), or Nothing if the error is None."""
        from fallible.option import from_nullable

        return from_nullable(self.error)

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F: BaseException](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def _cause(self) -> BaseException | None:
        return self.error if isinstance(self.error, BaseException) else None


type Result[T, E: BaseException = Exception] = Ok[T] | Err[E]


def collect[T, E: BaseException](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; later items are not
    consumed.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
