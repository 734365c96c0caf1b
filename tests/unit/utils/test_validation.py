from __future__ import annotations

import math

import pytest

from aretrier.core import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from aretrier.exceptions import InvalidIntegerError, InvalidRangeError, RetrierValidationError
from aretrier.utils.validation import (
    is_non_negative,
    is_safe_integer,
    require_non_negative,
    require_non_negative_safe_integer,
    require_safe_integer,
)

SAFE_INTEGERS = [0, 1, -1, 42, 3.0, -7.0, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER]
NOT_SAFE_INTEGERS = [
    1.5,
    -0.1,
    MAX_SAFE_INTEGER + 1,
    MIN_SAFE_INTEGER - 1,
    float(2**60),
    math.nan,
    math.inf,
    -math.inf,
    True,
    False,
    None,
    "3",
    [3],
    {"n": 3},
    object(),
]

#####################################
#     Tests for is_safe_integer     #
#####################################


@pytest.mark.parametrize("value", SAFE_INTEGERS)
def test_is_safe_integer_true(value: float) -> None:
    assert is_safe_integer(value)


@pytest.mark.parametrize("value", NOT_SAFE_INTEGERS)
def test_is_safe_integer_false(value: object) -> None:
    assert not is_safe_integer(value)


#####################################
#     Tests for is_non_negative     #
#####################################


@pytest.mark.parametrize("value", [0, 1, 0.5, MAX_SAFE_INTEGER])
def test_is_non_negative_true(value: float) -> None:
    assert is_non_negative(value)


@pytest.mark.parametrize("value", [-1, -0.5, MIN_SAFE_INTEGER])
def test_is_non_negative_false(value: float) -> None:
    assert not is_non_negative(value)


##########################################
#     Tests for require_safe_integer     #
##########################################


@pytest.mark.parametrize("value", SAFE_INTEGERS)
def test_require_safe_integer_returns_input(value: float) -> None:
    assert require_safe_integer(value) is value


@pytest.mark.parametrize("value", NOT_SAFE_INTEGERS)
def test_require_safe_integer_raises(value: object) -> None:
    with pytest.raises(InvalidIntegerError):
        require_safe_integer(value)


def test_require_safe_integer_message() -> None:
    with pytest.raises(InvalidIntegerError, match=r"max_retries must be a safe integer, got 1.5"):
        require_safe_integer(1.5, name="max_retries")


##########################################
#     Tests for require_non_negative     #
##########################################


@pytest.mark.parametrize("value", [0, 2, 0.5])
def test_require_non_negative_returns_input(value: float) -> None:
    assert require_non_negative(value) == value


def test_require_non_negative_raises() -> None:
    with pytest.raises(InvalidRangeError, match=r"delay must be >= 0, got -1") as exc_info:
        require_non_negative(-1, name="delay")
    assert exc_info.value.name == "delay"
    assert exc_info.value.value == -1


#######################################################
#     Tests for require_non_negative_safe_integer     #
#######################################################


@pytest.mark.parametrize("value", [0, 1, 100, MAX_SAFE_INTEGER])
def test_require_non_negative_safe_integer_returns_input(value: int) -> None:
    assert require_non_negative_safe_integer(value) == value


def test_require_non_negative_safe_integer_negative() -> None:
    with pytest.raises(InvalidRangeError, match=r"max_retries must be >= 0, got -1"):
        require_non_negative_safe_integer(-1, name="max_retries")


def test_require_non_negative_safe_integer_fraction() -> None:
    with pytest.raises(InvalidIntegerError, match=r"max_retries must be a safe integer"):
        require_non_negative_safe_integer(1.5, name="max_retries")


def test_require_non_negative_safe_integer_checks_integer_first() -> None:
    with pytest.raises(InvalidIntegerError):
        require_non_negative_safe_integer(-1.5)


@pytest.mark.parametrize("value", [-1, 1.5, "2", None])
def test_require_non_negative_safe_integer_errors_are_value_errors(value: object) -> None:
    with pytest.raises(RetrierValidationError):
        require_non_negative_safe_integer(value)
    with pytest.raises(ValueError):  # noqa: PT011
        require_non_negative_safe_integer(value)
