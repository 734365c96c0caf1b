r"""Exceptions raised by the aretrier library.

Only configuration problems are reported with library-specific
exceptions. Errors raised by the retried callback or by the hooks are
always propagated unchanged.
"""

from __future__ import annotations

__all__ = ["InvalidIntegerError", "InvalidRangeError", "RetrierValidationError"]

from typing import Any


class RetrierValidationError(ValueError):
    """Base class for invalid retry configuration values.

    Args:
        name: The name of the parameter that failed validation.
        value: The rejected value.
        message: A descriptive error message.

    Attributes:
        name: The name of the parameter that failed validation.
        value: The rejected value.
    """

    def __init__(self, name: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.value = value


class InvalidIntegerError(RetrierValidationError):
    """Raised when a value is not a safe integer.

    Example:
        ```pycon
        >>> from aretrier.exceptions import InvalidIntegerError
        >>> raise InvalidIntegerError("max_retries", 1.5)
        Traceback (most recent call last):
            ...
        aretrier.exceptions.InvalidIntegerError: max_retries must be a safe integer, got 1.5

        ```
    """

    def __init__(self, name: str, value: Any) -> None:
        super().__init__(name, value, f"{name} must be a safe integer, got {value!r}")


class InvalidRangeError(RetrierValidationError):
    """Raised when a value is negative.

    Example:
        ```pycon
        >>> from aretrier.exceptions import InvalidRangeError
        >>> raise InvalidRangeError("delay", -1)
        Traceback (most recent call last):
            ...
        aretrier.exceptions.InvalidRangeError: delay must be >= 0, got -1

        ```
    """

    def __init__(self, name: str, value: Any) -> None:
        super().__init__(name, value, f"{name} must be >= 0, got {value!r}")
