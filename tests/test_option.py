"""Tests for Option type (Some and Nothing)."""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st
from strategies import present_values

from fallible import (
    IllegalStateError,
    InvalidArgumentError,
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    nothing,
    some,
)


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        assert Some(42).value == 42

    def test_some_with_falsy_value(self):
        """Falsy values other than None are present values."""
        assert Some(0).unwrap() == 0
        assert Some('').unwrap() == ''
        assert Some(False).unwrap() is False
        assert Some([]).unwrap() == []

    def test_some_with_none_raises(self):
        """Some(None) is rejected at construction."""
        with pytest.raises(InvalidArgumentError, match='Cannot create Some with None'):
            Some(None)

    def test_some_with_none_is_value_error(self):
        """InvalidArgumentError is catchable as ValueError."""
        with pytest.raises(ValueError):
            Some(None)

    def test_some_factory(self):
        """some() builds Some and shares the None check."""
        assert some(3) == Some(3)
        with pytest.raises(InvalidArgumentError) as exc_info:
            some(None)
        assert exc_info.value.argument == 'value'

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        s = Some(42)
        with pytest.raises(AttributeError):
            s.value = 100  # type: ignore[misc]


class TestNothingCreation:
    """Tests for Nothing singleton."""

    def test_nothing_is_singleton(self):
        """Nothing is a singleton and nothing() returns it."""
        assert nothing() is Nothing
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Multiple NothingType instances are equal."""
        assert NothingType() == Nothing

    def test_nothing_is_frozen(self):
        """Nothing is immutable."""
        with pytest.raises(AttributeError):
            Nothing.value = 42  # type: ignore[attr-defined]


class TestFromNullable:
    """Tests for from_nullable lifting."""

    def test_none_becomes_nothing(self):
        assert from_nullable(None) == Nothing

    def test_value_becomes_some(self):
        assert from_nullable(5) == Some(5)

    def test_falsy_value_becomes_some(self):
        assert from_nullable(0) == Some(0)

    @given(present_values)
    def test_present_values_lift_to_some(self, value):
        assert from_nullable(value) == Some(value)


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        assert Some(42) == Some(42)
        assert Some(42) != Some(43)

    def test_some_not_equal_to_nothing(self):
        assert Some(42) != Nothing

    def test_hashable(self):
        assert hash(Some(42)) == hash(Some(42))
        assert {Nothing: 'value'}[NothingType()] == 'value'


class TestOptionQuerying:
    """Tests for is_some() and is_none() methods."""

    def test_some(self):
        assert Some(42).is_some() is True
        assert Some(42).is_none() is False

    def test_nothing(self):
        assert Nothing.is_some() is False
        assert Nothing.is_none() is True


class TestOptionUnwrap:
    """Tests for unwrap and its non-failing variants."""

    def test_some_unwrap(self):
        assert Some(42).unwrap() == 42

    def test_nothing_unwrap_raises(self):
        """Nothing.unwrap() raises IllegalStateError."""
        with pytest.raises(IllegalStateError, match='Called unwrap on Nothing') as exc_info:
            Nothing.unwrap()
        assert exc_info.value.operation == 'unwrap'
        assert exc_info.value.variant == 'Nothing'

    def test_nothing_unwrap_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Nothing.unwrap()

    def test_some_expect(self):
        assert Some(42).expect('should not fail') == 42

    def test_nothing_expect_raises(self):
        with pytest.raises(IllegalStateError, match='custom message'):
            Nothing.expect('custom message')

    def test_some_unwrap_or(self):
        assert Some(42).unwrap_or(0) == 42

    def test_nothing_unwrap_or(self):
        """Nothing.unwrap_or(42) returns 42."""
        assert Nothing.unwrap_or(42) == 42

    def test_some_unwrap_or_else_does_not_call(self):
        called = False

        def factory():
            nonlocal called
            called = True
            return 0

        assert Some(42).unwrap_or_else(factory) == 42
        assert called is False

    def test_nothing_unwrap_or_else(self):
        assert Nothing.unwrap_or_else(lambda: 7) == 7

    def test_some_unwrap_or_default(self):
        assert Some(42).unwrap_or_default(int) == 42
        assert Some(42).unwrap_or_default() == 42

    def test_nothing_unwrap_or_default(self):
        assert Nothing.unwrap_or_default(int) == 0
        assert Nothing.unwrap_or_default(list) == []
        assert Nothing.unwrap_or_default() is None


class TestOptionMap:
    """Tests for map."""

    def test_some_map(self):
        """Some(5).map(x * 2).unwrap() is 10."""
        assert Some(5).map(lambda x: x * 2).unwrap() == 10

    def test_some_map_chain(self):
        assert Some(5).map(lambda x: x * 2).map(str) == Some('10')

    def test_nothing_map_does_not_call(self):
        def boom(_x):
            raise AssertionError('must not be called')

        assert Nothing.map(boom).is_none()

    def test_some_map_to_none_gives_nothing(self):
        """A mapper returning None yields Nothing instead of raising."""
        assert Some({'a': 1}).map(lambda d: d.get('b')) == Nothing


class TestOptionAndThen:
    """Tests for and_then."""

    def test_some_and_then_some(self):
        assert Some(5).and_then(lambda x: Some(x + 1)) == Some(6)

    def test_some_and_then_nothing(self):
        assert Some(5).and_then(lambda _x: Nothing) == Nothing

    def test_nothing_and_then(self):
        assert Nothing.and_then(lambda x: Some(x + 1)) == Nothing

    def test_and_then_chain_short_circuits(self):
        def parse(s: str) -> Option[int]:
            return Some(int(s)) if s.isdigit() else Nothing

        def positive(n: int) -> Option[int]:
            return Some(n) if n > 0 else Nothing

        assert Some('12').and_then(parse).and_then(positive) == Some(12)
        assert Some('0').and_then(parse).and_then(positive) == Nothing
        assert Some('x').and_then(parse).and_then(positive) == Nothing


class TestOptionMatch:
    """Tests for match(on_some, on_none)."""

    def test_some_match(self):
        assert Some(3).match(lambda x: f'some {x}', lambda: 'none') == 'some 3'

    def test_nothing_match(self):
        assert Nothing.match(lambda x: f'some {x}', lambda: 'none') == 'none'


class TestOptionOr:
    """Tests for or_ and or_else."""

    def test_some_or(self):
        assert Some(1).or_(Some(2)) == Some(1)

    def test_nothing_or(self):
        assert Nothing.or_(Some(2)) == Some(2)
        assert Nothing.or_(Nothing) == Nothing

    def test_some_or_else_never_calls_producer(self):
        calls = []

        def producer():
            calls.append(1)
            return Some(2)

        assert Some(1).or_else(producer) == Some(1)
        assert calls == []

    def test_nothing_or_else_calls_producer_once(self):
        calls = []

        def producer():
            calls.append(1)
            return Some(2)

        assert Nothing.or_else(producer) == Some(2)
        assert calls == [1]

    def test_and(self):
        assert Some(1).and_(Some('x')) == Some('x')
        assert Some(1).and_(Nothing) == Nothing
        assert Nothing.and_(Some('x')) == Nothing


class TestOptionFilter:
    """Tests for filter."""

    def test_some_filter_true(self):
        assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)

    def test_some_filter_false(self):
        assert Some(3).filter(lambda x: x % 2 == 0) == Nothing

    def test_nothing_filter(self):
        assert Nothing.filter(lambda _x: True) == Nothing

    @given(st.integers())
    def test_filter_matches_predicate(self, value: int):
        """Some(v).filter(p) is Some(v) iff p(v)."""

        def pred(x: int) -> bool:
            return x > 0

        expected = Some(value) if pred(value) else Nothing
        assert Some(value).filter(pred) == expected


class TestOptionZipFlatten:
    """Tests for zip and flatten."""

    def test_zip(self):
        assert Some(1).zip(Some('a')) == Some((1, 'a'))
        assert Some(1).zip(Nothing) == Nothing
        assert Nothing.zip(Some('a')) == Nothing

    def test_flatten(self):
        assert Some(Some(1)).flatten() == Some(1)
        assert Some(Nothing).flatten() == Nothing
        assert Nothing.flatten() == Nothing


class TestOptionPatternMatching:
    """Tests for pattern matching support."""

    def test_match_some(self):
        option: Option[int] = Some(42)
        match option:
            case Some(value):
                assert value == 42
            case NothingType():
                pytest.fail('Should not match Nothing')

    def test_match_nothing(self):
        option: Option[int] = Nothing
        match option:
            case Some(_):
                pytest.fail('Should not match Some')
            case NothingType():
                pass


class TestOptionRepr:
    """Tests for __repr__ (provided by msgspec.Struct)."""

    def test_some_repr(self):
        assert repr(Some(42)) == 'Some(value=42)'

    def test_nothing_repr(self):
        assert repr(Nothing) == 'NothingType()'


class TestOptionCopy:
    """Tests for copy behavior."""

    def test_some_copy(self):
        s = Some(42)
        copied = copy.copy(s)
        assert copied == s

    def test_nothing_copy(self):
        assert copy.copy(Nothing) == Nothing


class TestOptionLaws:
    """Property-based tests for functor and monad laws."""

    @given(present_values)
    def test_some_unwrap_roundtrip(self, value):
        assert Some(value).is_some()
        assert Some(value).unwrap() == value

    @given(st.integers())
    def test_functor_map(self, value: int):
        """Some(v).map(f).unwrap() == f(v)."""

        def f(x: int) -> int:
            return x * 3 - 1

        assert Some(value).map(f).unwrap() == f(value)

    @given(st.integers())
    def test_functor_identity(self, value: int):
        assert Some(value).map(lambda x: x) == Some(value)

    @given(st.integers())
    def test_left_identity(self, value: int):
        """Left identity: Some(a).and_then(f) == f(a)."""

        def f(x: int) -> Option[int]:
            return Some(x * 2) if x % 3 else Nothing

        assert Some(value).and_then(f) == f(value)

    @given(st.integers())
    def test_right_identity(self, value: int):
        assert Some(value).and_then(Some) == Some(value)

    @given(st.integers())
    def test_associativity(self, value: int):
        def f(x: int) -> Option[int]:
            return Some(x + 1)

        def g(x: int) -> Option[str]:
            return Some(str(x))

        m = Some(value)
        assert m.and_then(f).and_then(g) == m.and_then(lambda x: f(x).and_then(g))
