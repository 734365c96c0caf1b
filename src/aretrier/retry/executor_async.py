r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an async
callback with automatic retry logic, a fixed delay between attempts,
and the success/failure hook protocol.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from aretrier.retry.manager import HookManager
from aretrier.utils.callbacks import invoke_async

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretrier.retry.config import RetryOptions

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async callback with automatic retry logic.

    The callback is attempted up to ``max_retries + 1`` times. When
    ``delay`` is positive, the executor sleeps ``delay`` milliseconds
    before each retry. It never sleeps before the first attempt nor
    after the last one.

    Attributes:
        options: The resolved retry options.
        hooks: Manager running the success and failure hooks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretrier.retry import AsyncRetryExecutor, RetryOptions
        >>> async def fetch():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(RetryOptions(max_retries=3, delay=10))
        >>> asyncio.run(executor.execute(fetch))
        42

        ```
    """

    def __init__(self, options: RetryOptions) -> None:
        """Initialize async retry executor.

        Args:
            options: The resolved retry options, including the delay
                in milliseconds between two attempts.
        """
        self.options = options
        self.hooks: HookManager = HookManager(options.on_success, options.on_failure)

    @property
    def sleep_time(self) -> float:
        """The wait before each retry, in seconds."""
        return self.options.delay / 1000

    async def execute(self, callback: Callable[..., Any], args: Sequence[Any] | None = None) -> Any:
        """Execute the callback with automatic retry logic.

        Args:
            callback: The function to retry. Usually a coroutine
                function; a plain function is called and its result is
                used as is.
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
                result = await invoke_async(callback, args)
            except Exception as exc:
                last_error = exc
                logger.debug(
                    "Attempt %d/%d failed with %s: %s",
                    attempt + 1,
                    total_attempts,
                    type(exc).__name__,
                    exc,
                )
                if attempt < total_attempts - 1 and self.options.delay > 0:
                    logger.debug(f"Waiting {self.sleep_time:.3f}s before retry")
                    await asyncio.sleep(self.sleep_time)
                continue
            if attempt > 0:
                logger.debug(f"Callback succeeded on attempt {attempt + 1}/{total_attempts}")
            return await self.hooks.on_success_async(result)

        logger.debug(f"Callback failed after {total_attempts} attempts")
        return await self.hooks.on_failure_async(last_error)
