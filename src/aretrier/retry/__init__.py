r"""Retry package implementing the attempt loop and the hook protocol.

Public API:
    - Hook: Side effect run on final success or final failure
    - RetryOptions: Resolved options for one retry call
    - RetryOverrides: Partial per-call overrides
    - HookManager: Runs the hooks and applies their override flag
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Hook",
    "HookManager",
    "RetryExecutor",
    "RetryOptions",
    "RetryOverrides",
]

from aretrier.retry.config import Hook, RetryOptions, RetryOverrides
from aretrier.retry.executor import RetryExecutor
from aretrier.retry.executor_async import AsyncRetryExecutor
from aretrier.retry.manager import HookManager
