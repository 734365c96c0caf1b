r"""One-shot asynchronous retry without a retained policy."""

from __future__ import annotations

__all__ = ["retry_once_async"]

from typing import TYPE_CHECKING, Any

from aretrier.retrier import Retrier
from aretrier.retry_once import _check_options

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence


async def retry_once_async(
    max_retries: int,
    callback: Callable[..., Any],
    args: Sequence[Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Call an async function until it succeeds, retrying at most
    ``max_retries`` times.

    This is equivalent to ``Retrier(max_retries=max_retries).retry_async``
    on a throwaway retrier.

    Args:
        max_retries: Number of additional attempts after the first
            failure. Must be a non-negative safe integer.
        callback: The function to retry.
        args: Optional positional arguments passed to every attempt.
        options: Optional ``delay`` in milliseconds, ``on_success``
            and ``on_failure`` hooks.

    Returns:
        The callback result, or the value of an overriding hook.

    Raises:
        InvalidIntegerError: If ``max_retries`` or ``delay`` is not a
            safe integer.
        InvalidRangeError: If ``max_retries`` or ``delay`` is negative.
        TypeError: If ``options`` contains ``max_retries``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretrier import retry_once_async
        >>> async def ping(host):
        ...     return f"pong from {host}"
        ...
        >>> asyncio.run(retry_once_async(3, ping, ["db"], {"delay": 50}))
        'pong from db'

        ```
    """
    _check_options(options)
    return await Retrier(max_retries=max_retries).retry_async(callback, args, options)
