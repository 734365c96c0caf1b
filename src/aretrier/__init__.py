r"""aretrier - Small retry policy for synchronous and asynchronous
callables.

This package wraps a single operation and re-invokes it on failure up
to a bounded number of times. Asynchronous attempts can be separated by
a fixed delay, and optional hooks run on final success or final
failure, with the ability to override the outcome of the call.

Key Features:
    - Bounded retries: ``max_retries`` additional attempts after the first
    - Sync and async variants sharing the same semantics
    - Fixed delay in milliseconds between asynchronous attempts
    - Success and failure hooks, optionally overriding the result
    - Reusable ``Retrier`` policy with per-call overrides
    - One-shot ``retry_once_sync`` and ``retry_once_async`` functions

Example:
    ```pycon
    >>> from aretrier import Hook, Retrier, retry_once_sync
    >>> retrier = Retrier(max_retries=3, delay=100)
    >>> retrier.retry_sync(int, ["42"])
    42
    >>> retry_once_sync(2, int, ["x"], {"on_failure": Hook(lambda err: 0, override=True)})
    0

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "Hook",
    "InvalidIntegerError",
    "InvalidRangeError",
    "Retrier",
    "RetrierValidationError",
    "RetryOptions",
    "__version__",
    "retry_once_async",
    "retry_once_sync",
]

from importlib.metadata import PackageNotFoundError, version

from aretrier.core.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES
from aretrier.exceptions import (
    InvalidIntegerError,
    InvalidRangeError,
    RetrierValidationError,
)
from aretrier.retrier import Retrier
from aretrier.retry.config import Hook, RetryOptions
from aretrier.retry_once import retry_once_sync
from aretrier.retry_once_async import retry_once_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
