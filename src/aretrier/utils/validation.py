r"""Numeric validation utilities for retry parameters.

This module provides the predicates and validating accessors used to
check retry counts and delays before they are stored in a retry policy
or used by a retry executor.
"""

from __future__ import annotations

__all__ = [
    "is_non_negative",
    "is_safe_integer",
    "require_non_negative",
    "require_non_negative_safe_integer",
    "require_safe_integer",
]

import math
from typing import Any

from aretrier.core.config import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from aretrier.exceptions import InvalidIntegerError, InvalidRangeError


def is_safe_integer(value: Any) -> bool:
    """Indicate if a value is a safe integer.

    A safe integer is a number without fractional part that lies in
    ``[MIN_SAFE_INTEGER, MAX_SAFE_INTEGER]``. Integral floats such as
    ``3.0`` are accepted. Booleans are rejected.

    Args:
        value: The value to check.

    Returns:
        ``True`` if the value is a safe integer, otherwise ``False``.

    Example:
        ```pycon
        >>> from aretrier.utils.validation import is_safe_integer
        >>> is_safe_integer(3)
        True
        >>> is_safe_integer(3.0)
        True
        >>> is_safe_integer(1.5)
        False
        >>> is_safe_integer("3")
        False
        >>> is_safe_integer(True)
        False
        >>> is_safe_integer(2**53)
        False

        ```
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def is_non_negative(n: float) -> bool:
    """Indicate if a number is greater than or equal to zero.

    Example:
        ```pycon
        >>> from aretrier.utils.validation import is_non_negative
        >>> is_non_negative(0)
        True
        >>> is_non_negative(-1)
        False

        ```
    """
    return n >= 0


def require_safe_integer(n: Any, name: str = "value") -> Any:
    """Return the input unchanged if it is a safe integer.

    Args:
        n: The value to validate.
        name: The parameter name used in the error message.

    Returns:
        The input value.

    Raises:
        InvalidIntegerError: If the value is not a safe integer.
    """
    if not is_safe_integer(n):
        raise InvalidIntegerError(name, n)
    return n


def require_non_negative(n: float, name: str = "value") -> float:
    """Return the input unchanged if it is greater than or equal to zero.

    Args:
        n: The number to validate.
        name: The parameter name used in the error message.

    Returns:
        The input number.

    Raises:
        InvalidRangeError: If the number is negative.
    """
    if not is_non_negative(n):
        raise InvalidRangeError(name, n)
    return n


def require_non_negative_safe_integer(n: Any, name: str = "value") -> int:
    """Return the input unchanged if it is a non-negative safe integer.

    The integer check runs first, so ``-1.5`` raises
    ``InvalidIntegerError``.

    Args:
        n: The value to validate.
        name: The parameter name used in the error message.

    Returns:
        The input value.

    Raises:
        InvalidIntegerError: If the value is not a safe integer.
        InvalidRangeError: If the value is negative.

    Example:
        ```pycon
        >>> from aretrier.utils.validation import require_non_negative_safe_integer
        >>> require_non_negative_safe_integer(3, name="max_retries")
        3
        >>> require_non_negative_safe_integer(-1, name="max_retries")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretrier.exceptions.InvalidRangeError: max_retries must be >= 0, got -1

        ```
    """
    return require_non_negative(require_safe_integer(n, name=name), name=name)
