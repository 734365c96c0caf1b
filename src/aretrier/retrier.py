r"""Retry policy holding default options shared by several calls.

This module provides the Retrier class. A retrier stores a default
retry count, a default delay and default hooks, and resolves the
options of each call by overlaying the per-call overrides on top of
these defaults.

Example:
    ```pycon
    >>> from aretrier import Hook, Retrier
    >>> retrier = Retrier(max_retries=4)
    >>> calls = []
    >>> def flaky():
    ...     calls.append(1)
    ...     if len(calls) < 5:
    ...         raise ConnectionError("unreachable")
    ...     return "success"
    ...
    >>> retrier.retry_sync(flaky)
    'success'
    >>> len(calls)
    5

    ```
"""

from __future__ import annotations

__all__ = ["Retrier"]

import logging
import threading
from typing import TYPE_CHECKING, Any

from aretrier.core.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES
from aretrier.retry.config import RetryOptions, check_hook
from aretrier.retry.executor import RetryExecutor
from aretrier.retry.executor_async import AsyncRetryExecutor
from aretrier.utils.validation import require_non_negative_safe_integer

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from aretrier.retry.config import Hook, RetryOverrides

logger: logging.Logger = logging.getLogger(__name__)


class Retrier:
    r"""Retry policy with default options and per-call overrides.

    The defaults are protected by a lock. Each call takes a snapshot of
    the defaults when it resolves its options, so changing a default
    only affects the calls that start afterwards.

    Args:
        max_retries: Number of additional attempts after the first
            failure. Must be a non-negative safe integer. ``None`` uses
            the default of 2.
        delay: Delay in milliseconds before each retried asynchronous
            attempt. Must be a non-negative safe integer. ``None`` uses
            the default of 0.
        on_success: Optional default hook run once the callback
            succeeds.
        on_failure: Optional default hook run once all the attempts
            failed.

    Raises:
        InvalidIntegerError: If ``max_retries`` or ``delay`` is not a
            safe integer.
        InvalidRangeError: If ``max_retries`` or ``delay`` is negative.
        TypeError: If a hook is not a ``Hook``.

    Example:
        ```pycon
        >>> from aretrier import Hook, Retrier
        >>> def always_fails():
        ...     raise RuntimeError("boom")
        ...
        >>> retrier = Retrier(
        ...     max_retries=4,
        ...     on_failure=Hook(lambda err, a, b: b - a, args=[5, 90], override=True),
        ... )
        >>> retrier.retry_sync(always_fails)
        85
        >>> retrier.retry_sync(always_fails, options={"on_failure": Hook(print)})  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        RuntimeError: boom

        ```
    """

    def __init__(
        self,
        *,
        max_retries: int | None = None,
        delay: int | None = None,
        on_success: Hook | None = None,
        on_failure: Hook | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._max_retries: int = DEFAULT_MAX_RETRIES
        self._delay: int = DEFAULT_DELAY
        self._on_success: Hook | None = None
        self._on_failure: Hook | None = None

        if max_retries is not None:
            self.set_max_retries(max_retries)
        if delay is not None:
            self.set_delay(delay)
        self.set_on_success(on_success)
        self.set_on_failure(on_failure)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_retries={self._max_retries}, "
            f"delay={self._delay}, on_success={self._on_success!r}, "
            f"on_failure={self._on_failure!r})"
        )

    @property
    def max_retries(self) -> int:
        """The default number of retries."""
        return self.get_max_retries()

    @property
    def delay(self) -> int:
        """The default delay in milliseconds between async attempts."""
        return self.get_delay()

    @property
    def on_success(self) -> Hook | None:
        """The default success hook."""
        return self.get_on_success()

    @property
    def on_failure(self) -> Hook | None:
        """The default failure hook."""
        return self.get_on_failure()

    def get_max_retries(self) -> int:
        """Get the default number of retries.

        Returns:
            The number of additional attempts after the first failure.
        """
        return self._max_retries

    def get_delay(self) -> int:
        """Get the default delay between two async attempts.

        Returns:
            The delay in milliseconds.
        """
        return self._delay

    def get_on_success(self) -> Hook | None:
        """Get the default success hook, or ``None`` if unset."""
        return self._on_success

    def get_on_failure(self) -> Hook | None:
        """Get the default failure hook, or ``None`` if unset."""
        return self._on_failure

    def set_max_retries(self, n: int) -> None:
        """Set the default number of retries.

        Args:
            n: The number of retries. Must be a non-negative safe
                integer.

        Raises:
            InvalidIntegerError: If ``n`` is not a safe integer.
            InvalidRangeError: If ``n`` is negative.
        """
        value = int(require_non_negative_safe_integer(n, name="max_retries"))
        with self._lock:
            self._max_retries = value
        logger.debug(f"Default max_retries set to {value}")

    def set_delay(self, delay: int) -> None:
        """Set the default delay between two async attempts.

        Args:
            delay: The delay in milliseconds. Must be a non-negative
                safe integer.

        Raises:
            InvalidIntegerError: If ``delay`` is not a safe integer.
            InvalidRangeError: If ``delay`` is negative.
        """
        value = int(require_non_negative_safe_integer(delay, name="delay"))
        with self._lock:
            self._delay = value
        logger.debug(f"Default delay set to {value}ms")

    def set_on_success(self, on_success: Hook | None) -> None:
        """Set the default success hook. ``None`` removes it."""
        hook = check_hook(on_success, name="on_success")
        with self._lock:
            self._on_success = hook

    def set_on_failure(self, on_failure: Hook | None) -> None:
        """Set the default failure hook. ``None`` removes it."""
        hook = check_hook(on_failure, name="on_failure")
        with self._lock:
            self._on_failure = hook

    def get_options(self) -> RetryOptions:
        """Return a snapshot of the default options."""
        with self._lock:
            return RetryOptions(
                max_retries=self._max_retries,
                delay=self._delay,
                on_success=self._on_success,
                on_failure=self._on_failure,
            )

    def resolve_options(
        self, overrides: RetryOverrides | Mapping[str, Any] | None = None
    ) -> RetryOptions:
        """Resolve the options of a synchronous call.

        The synchronous path never waits between attempts, so a
        ``delay`` override is ignored and the resolved delay is 0.

        Args:
            overrides: Optional per-call overrides. Missing keys and
                ``None`` values fall back to the defaults.

        Returns:
            The resolved options. The retrier is not modified.

        Raises:
            InvalidIntegerError: If ``max_retries`` is not a safe
                integer.
            InvalidRangeError: If ``max_retries`` is negative.
            TypeError: If an unknown option is given.
        """
        overrides = dict(overrides or {})
        overrides.pop("delay", None)
        return self.get_options().merge(delay=0, **overrides)

    def resolve_options_async(
        self, overrides: RetryOverrides | Mapping[str, Any] | None = None
    ) -> RetryOptions:
        """Resolve the options of an asynchronous call.

        Args:
            overrides: Optional per-call overrides. Missing keys and
                ``None`` values fall back to the defaults.

        Returns:
            The resolved options. The retrier is not modified.

        Raises:
            InvalidIntegerError: If ``max_retries`` or ``delay`` is not
                a safe integer.
            InvalidRangeError: If ``max_retries`` or ``delay`` is
                negative.
            TypeError: If an unknown option is given.
        """
        return self.get_options().merge(**dict(overrides or {}))

    def retry_sync(
        self,
        callback: Callable[..., Any],
        args: Sequence[Any] | None = None,
        options: RetryOverrides | Mapping[str, Any] | None = None,
    ) -> Any:
        """Call a synchronous function until it succeeds or the retry
        budget is exhausted.

        Args:
            callback: The function to retry.
            args: Optional positional arguments passed to every attempt.
            options: Optional per-call overrides of ``max_retries``,
                ``on_success`` and ``on_failure``. They only apply to
                this call.

        Returns:
            The callback result, or the value of an overriding hook.

        Raises:
            InvalidIntegerError: If an override is not a safe integer.
                Raised before any attempt.
            InvalidRangeError: If an override is negative. Raised
                before any attempt.
            Exception: The exception of the last attempt when all the
                attempts failed and no overriding failure hook is set,
                or any exception raised by a hook.
        """
        resolved = self.resolve_options(options)
        return RetryExecutor(resolved).execute(callback, args)

    async def retry_async(
        self,
        callback: Callable[..., Any],
        args: Sequence[Any] | None = None,
        options: RetryOverrides | Mapping[str, Any] | None = None,
    ) -> Any:
        """Call an async function until it succeeds or the retry budget
        is exhausted, sleeping ``delay`` milliseconds between attempts.

        Args:
            callback: The function to retry.
            args: Optional positional arguments passed to every attempt.
            options: Optional per-call overrides of ``max_retries``,
                ``delay``, ``on_success`` and ``on_failure``. They only
                apply to this call.

        Returns:
            The callback result, or the value of an overriding hook.

        Raises:
            InvalidIntegerError: If an override is not a safe integer.
                Raised before any attempt.
            InvalidRangeError: If an override is negative. Raised
                before any attempt.
            Exception: The exception of the last attempt when all the
                attempts failed and no overriding failure hook is set,
                or any exception raised by a hook.
        """
        resolved = self.resolve_options_async(options)
        return await AsyncRetryExecutor(resolved).execute(callback, args)
