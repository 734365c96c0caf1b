r"""Invocation helpers for user-supplied callables.

The retried callback and the hooks are all called through these two
functions, so the sync and async executors share one calling
convention: positional arguments only, exceptions propagated unchanged.
"""

from __future__ import annotations

__all__ = ["invoke_async", "invoke_sync"]

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def invoke_sync(fn: Callable[..., Any], args: Sequence[Any] | None = None) -> Any:
    """Call ``fn`` with the elements of ``args`` as positional arguments.

    Args:
        fn: The function to call.
        args: Optional positional arguments. ``None`` means no argument.

    Returns:
        The value returned by ``fn``.

    Example:
        ```pycon
        >>> from aretrier.utils.callbacks import invoke_sync
        >>> invoke_sync(max, [1, 5, 3])
        5
        >>> invoke_sync(lambda: "done")
        'done'

        ```
    """
    if args:
        return fn(*args)
    return fn()


async def invoke_async(fn: Callable[..., Any], args: Sequence[Any] | None = None) -> Any:
    """Call ``fn`` and wait for its result.

    ``fn`` may be a coroutine function or a plain function. If the call
    returns an awaitable, it is awaited and its result is returned.

    Args:
        fn: The function to call.
        args: Optional positional arguments. ``None`` means no argument.

    Returns:
        The resolved value returned by ``fn``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretrier.utils.callbacks import invoke_async
        >>> async def add(a, b):
        ...     return a + b
        ...
        >>> asyncio.run(invoke_async(add, [1, 2]))
        3

        ```
    """
    result = invoke_sync(fn, args)
    if inspect.isawaitable(result):
        return await result
    return result
