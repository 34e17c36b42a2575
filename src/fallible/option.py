"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from fallible.errors import IllegalStateError, InvalidArgumentError, violation

if TYPE_CHECKING:
    from fallible.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'from_nullable',
    'nothing',
    'some',
]

_EVENT = 'option.contract_violation'


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value is never ``None``;
    use ``from_nullable`` to lift a value that may be absent.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> Some(None)
        Traceback (most recent call last):
            ...
        fallible.errors.InvalidArgumentError: Cannot create Some with None. Use Nothing instead.
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise violation(
                InvalidArgumentError(
                    'Cannot create Some with None. Use Nothing instead.',
                    argument='value',
                ),
                event=_EVENT,
                operation='Some',
                variant='Some',
            )

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def unwrap_or_default(self, default_factory: Callable[[], T] | None = None) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the factory."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U] | NothingType:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing f(value), or Nothing when f returns None.
        """
        return from_nullable(f(self.value))

    def and_then[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Apply ``on_some`` to the contained value."""
        return on_some(self.value)

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some. ``_f`` is not called."""
        return self

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def to_result[E: BaseException](self, _error: E | Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _error: Ignored error value or producer; a producer is not called.

        Returns:
            Ok containing the value.
        """
        from fallible.result import Ok

        return Ok(self.value)

    def ok_or[E: BaseException](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from fallible.result import Ok

        return Ok(self.value)

    def ok_or_else[E: BaseException](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value). ``_f`` is not called."""
        from fallible.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing, a default value or the result of
    a fallback function. Extraction raises IllegalStateError.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. Any two instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            IllegalStateError: Always, since Nothing has no value to unwrap.
        """
        raise violation(
            IllegalStateError('Called unwrap on Nothing', operation='unwrap', variant='Nothing'),
            event=_EVENT,
            operation='unwrap',
            variant='Nothing',
        )

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            IllegalStateError: Always, with the custom message.
        """
        raise violation(
            IllegalStateError(msg, operation='expect', variant='Nothing'),
            event=_EVENT,
            operation='expect',
            variant='Nothing',
        )

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def unwrap_or_default[T](self, default_factory: Callable[[], T] | None = None) -> T | None:
        """Return ``default_factory()``, or None when no factory is given.

        Python has no per-type zero value, so the caller names it:
        ``Nothing.unwrap_or_default(int)`` is ``0``, ``list`` gives ``[]``.
        """
        if default_factory is None:
            return None
        return default_factory()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def match[T, R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Call ``on_none``."""
        return on_none()

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](
        self, f: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option. Called exactly once.

        Returns:
            The Option returned by f.
        """
        return f()

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def to_result[E: BaseException](self, error: E | Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err.

        Args:
            error: The error value, or a zero-argument callable producing it.
                Any callable (an exception class included) is treated as a
                producer and called once.

        Returns:
            Err containing the error.
        """
        from fallible.result import Err

        if callable(error):
            return Err(error())
        return Err(error)

    def ok_or[E: BaseException](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from fallible.result import Err

        return Err(err)

    def ok_or_else[E: BaseException](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from fallible.result import Err

        return Err(f())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Option[T]:
    """Wrap a value in Some.

    Raises:
        InvalidArgumentError: If value is None.
    """
    return Some(value)


def nothing() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable value to Option.

    Args:
        value: The value that may be None.

    Returns:
        Some(value) if value is not None, otherwise Nothing.

    Examples:
        >>> from_nullable(3)
        Some(value=3)
        >>> from_nullable(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)
