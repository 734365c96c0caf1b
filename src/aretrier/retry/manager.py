r"""Hook manager applying the success and failure hook protocol.

This module provides the HookManager class used by both retry
executors to run the optional hooks and to decide the final outcome of
a retry call.
"""

from __future__ import annotations

__all__ = ["HookManager"]

import logging
from typing import TYPE_CHECKING, Any, NoReturn

from aretrier.utils.callbacks import invoke_async, invoke_sync

if TYPE_CHECKING:
    from aretrier.retry.config import Hook

logger: logging.Logger = logging.getLogger(__name__)


class HookManager:
    """Runs the hooks at the end of a retry sequence.

    Exceptions raised by a hook are never caught: they replace the
    result or the error of the retried callback.

    Attributes:
        success_hook: Optional hook run after a successful attempt.
        failure_hook: Optional hook run after the last failed attempt.
    """

    def __init__(self, success_hook: Hook | None = None, failure_hook: Hook | None = None) -> None:
        """Initialize hook manager.

        Args:
            success_hook: Optional hook run after a successful attempt.
            failure_hook: Optional hook run after the last failed attempt.
        """
        self.success_hook = success_hook
        self.failure_hook = failure_hook

    def on_success(self, result: Any) -> Any:
        """Run the success hook and return the outcome of the call.

        Args:
            result: The value returned by the retried callback.

        Returns:
            The hook value if the hook overrides, otherwise ``result``.
        """
        hook = self.success_hook
        if hook is None:
            return result
        logger.debug("Invoking success hook %r", hook.callback)
        value = invoke_sync(hook.callback, hook.build_args(result))
        return value if hook.override else result

    def on_failure(self, error: Exception) -> Any:
        """Run the failure hook and return or raise the outcome of the
        call.

        Args:
            error: The exception raised by the last attempt.

        Returns:
            The hook value if the hook overrides.

        Raises:
            Exception: ``error`` itself when there is no hook or when
                the hook does not override.
        """
        hook = self.failure_hook
        if hook is None:
            self._reraise(error)
        logger.debug("Invoking failure hook %r", hook.callback)
        value = invoke_sync(hook.callback, hook.build_args(error))
        if hook.override:
            return value
        self._reraise(error)

    async def on_success_async(self, result: Any) -> Any:
        """Async version of ``on_success``: the hook result is awaited."""
        hook = self.success_hook
        if hook is None:
            return result
        logger.debug("Invoking success hook %r", hook.callback)
        value = await invoke_async(hook.callback, hook.build_args(result))
        return value if hook.override else result

    async def on_failure_async(self, error: Exception) -> Any:
        """Async version of ``on_failure``: the hook result is awaited."""
        hook = self.failure_hook
        if hook is None:
            self._reraise(error)
        logger.debug("Invoking failure hook %r", hook.callback)
        value = await invoke_async(hook.callback, hook.build_args(error))
        if hook.override:
            return value
        self._reraise(error)

    @staticmethod
    def _reraise(error: Exception) -> NoReturn:
        raise error
