r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a synchronous
callback with automatic retry logic and the success/failure hook
protocol.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any

from aretrier.retry.manager import HookManager
from aretrier.utils.callbacks import invoke_sync

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretrier.retry.config import RetryOptions

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a synchronous callback with automatic retry logic.

    The callback is attempted up to ``max_retries + 1`` times. Attempts
    follow each other immediately: the ``delay`` option only applies to
    the asynchronous executor.

    Attributes:
        options: The resolved retry options.
        hooks: Manager running the success and failure hooks.

    Example:
        ```pycon
        >>> from aretrier.retry import RetryExecutor, RetryOptions
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise RuntimeError("not yet")
        ...     return "ok"
        ...
        >>> RetryExecutor(RetryOptions(max_retries=2)).execute(flaky)
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(self, options: RetryOptions) -> None:
        """Initialize retry executor.

        Args:
            options: The resolved retry options. The hooks they carry
                are handed to a ``HookManager``.
        """
        self.options = options
        self.hooks: HookManager = HookManager(options.on_success, options.on_failure)

    def execute(self, callback: Callable[..., Any], args: Sequence[Any] | None = None) -> Any:
        """Execute the callback with automatic retry logic.

        Args:
            callback: The function to retry.
            args: Optional positional arguments passed to every attempt.

        Returns:
            The callback result, or the value of an overriding hook.

        Raises:
            TypeError: If ``callback`` is not callable.
            Exception: The exception of the last attempt when all the
                attempts failed and no overriding failure hook is set,
                or any exception raised by a hook.
        """
        if not callable(callback):
            msg = f"callback must be callable, got {callback!r}"
            raise TypeError(msg)

        total_attempts = self.options.total_attempts
        last_error: Exception | None = None
        for attempt in range(total_attempts):
            try:
                result = invoke_sync(callback, args)
            except Exception as exc:
                last_error = exc
                logger.debug(
                    "Attempt %d/%d failed with %s: %s",
                    attempt + 1,
                    total_attempts,
                    type(exc).__name__,
                    exc,
                )
                continue
            if attempt > 0:
                logger.debug(f"Callback succeeded on attempt {attempt + 1}/{total_attempts}")
            return self.hooks.on_success(result)

        logger.debug(f"Callback failed after {total_attempts} attempts")
        return self.hooks.on_failure(last_error)
