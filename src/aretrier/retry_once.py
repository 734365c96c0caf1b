r"""One-shot synchronous retry without a retained policy."""

from __future__ import annotations

__all__ = ["retry_once_sync"]

from typing import TYPE_CHECKING, Any

from aretrier.retrier import Retrier

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence


def retry_once_sync(
    max_retries: int,
    callback: Callable[..., Any],
    args: Sequence[Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Call a synchronous function until it succeeds, retrying at most
    ``max_retries`` times.

    This is equivalent to ``Retrier(max_retries=max_retries).retry_sync``
    on a throwaway retrier.

    Args:
        max_retries: Number of additional attempts after the first
            failure. Must be a non-negative safe integer.
        callback: The function to retry.
        args: Optional positional arguments passed to every attempt.
        options: Optional ``on_success`` and ``on_failure`` hooks.

    Returns:
        The callback result, or the value of an overriding hook.

    Raises:
        InvalidIntegerError: If ``max_retries`` is not a safe integer.
        InvalidRangeError: If ``max_retries`` is negative.
        TypeError: If ``options`` contains ``max_retries``.

    Example:
        ```pycon
        >>> from aretrier import Hook, retry_once_sync
        >>> retry_once_sync(0, int, ["12"])
        12
        >>> retry_once_sync(
        ...     1, int, ["twelve"], {"on_failure": Hook(lambda err: -1, override=True)}
        ... )
        -1

        ```
    """
    _check_options(options)
    return Retrier(max_retries=max_retries).retry_sync(callback, args, options)


def _check_options(options: Mapping[str, Any] | None) -> None:
    if options is not None and "max_retries" in options:
        msg = "max_retries must be given as positional argument, not in options"
        raise TypeError(msg)
