"""Tests for the Result outcome type."""

import pytest

from cronos import NegativeDurationError, Result


def test_ok():
    result = Result.ok(5)
    assert result.success is True
    assert result.value == 5
    assert result.error is None
    assert result.unwrap() == 5


def test_err():
    error = NegativeDurationError("too short")
    result: Result[int] = Result.err(error)
    assert result.success is False
    assert result.value is None
    assert result.error is error
    with pytest.raises(NegativeDurationError, match="too short"):
        result.unwrap()


def test_needs_exactly_one_side():
    with pytest.raises(ValueError):
        Result(value=None, error=None)
    with pytest.raises(ValueError):
        Result(value=1, error=NegativeDurationError())
