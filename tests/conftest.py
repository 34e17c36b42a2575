"""Pytest configuration and shared fixtures for fallible tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fallible import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fallible import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fallible import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fallible import Nothing

    return Nothing
