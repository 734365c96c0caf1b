r"""Configuration dataclasses for retry behavior.

This module provides the hook record run on final success or final
failure, and the resolved options consumed by the retry executors.
"""

from __future__ import annotations

__all__ = ["Hook", "RetryOptions", "RetryOverrides", "check_hook"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, TypedDict

from aretrier.core.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES
from aretrier.utils.validation import require_non_negative_safe_integer

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


@dataclass(frozen=True)
class Hook:
    """Side effect run when the retried operation finally succeeds or
    finally fails.

    The hook callback always receives the triggering value as first
    positional argument (the result on success, the raised exception on
    failure), followed by ``args``.

    Args:
        callback: The function to call. On the async path it may be a
            coroutine function.
        args: Additional positional arguments appended after the
            triggering value. ``None`` means no additional argument.
        override: If ``True``, the value returned by the hook replaces
            the outcome of the retry call. On failure this means the
            call returns the hook value instead of raising.

    Raises:
        TypeError: If ``callback`` is not callable.

    Example:
        ```pycon
        >>> from aretrier.retry import Hook
        >>> hook = Hook(lambda err, a, b: b - a, args=[5, 90], override=True)
        >>> hook.args
        (5, 90)
        >>> hook.override
        True

        ```
    """

    callback: Callable[..., Any]
    args: Sequence[Any] | None = ()
    override: bool = False

    def __post_init__(self) -> None:
        if not callable(self.callback):
            msg = f"hook callback must be callable, got {self.callback!r}"
            raise TypeError(msg)
        object.__setattr__(self, "args", tuple(self.args or ()))

    def build_args(self, value: Any) -> list[Any]:
        """Return the positional arguments for the hook callback.

        Args:
            value: The triggering value, always placed first.

        Returns:
            The list ``[value, *args]``.
        """
        return [value, *self.args]


def check_hook(hook: Hook | None, name: str) -> Hook | None:
    """Return the hook unchanged if it is a ``Hook`` or ``None``.

    Raises:
        TypeError: If ``hook`` has another type.
    """
    if hook is not None and not isinstance(hook, Hook):
        msg = f"{name} must be a Hook or None, got {hook!r}"
        raise TypeError(msg)
    return hook


class RetryOverrides(TypedDict, total=False):
    """Per-call overrides accepted by the retry methods.

    Every key is optional. A missing key, or a key set to ``None``,
    falls back to the policy default.
    """

    max_retries: int | None
    delay: int | None
    on_success: Hook | None
    on_failure: Hook | None


@dataclass(frozen=True)
class RetryOptions:
    """Fully resolved options for one retry call.

    Args:
        max_retries: Number of additional attempts after the first
            failure. Must be a non-negative safe integer.
        delay: Delay in milliseconds before each retried asynchronous
            attempt. Must be a non-negative safe integer. Ignored by
            the synchronous executor.
        on_success: Optional hook run once the callback succeeds.
        on_failure: Optional hook run once all the attempts failed.

    Raises:
        InvalidIntegerError: If ``max_retries`` or ``delay`` is not a
            safe integer.
        InvalidRangeError: If ``max_retries`` or ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretrier.retry import RetryOptions
        >>> options = RetryOptions(max_retries=4)
        >>> options.max_retries, options.delay
        (4, 0)
        >>> options.merge(max_retries=0, delay=None).max_retries
        0

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    delay: int = DEFAULT_DELAY
    on_success: Hook | None = None
    on_failure: Hook | None = None

    def __post_init__(self) -> None:
        require_non_negative_safe_integer(self.max_retries, name="max_retries")
        require_non_negative_safe_integer(self.delay, name="delay")
        check_hook(self.on_success, name="on_success")
        check_hook(self.on_failure, name="on_failure")

    @property
    def total_attempts(self) -> int:
        """The maximum number of times the callback is invoked."""
        return int(self.max_retries) + 1

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create new options with the given fields overridden.

        Only non-``None`` values are applied, so ``0`` is a valid
        override. The merged values are validated.

        Args:
            **overrides: Fields to override.

        Returns:
            A new ``RetryOptions``. The current instance is unchanged.

        Raises:
            TypeError: If an unknown field is given.
            InvalidIntegerError: If a numeric override is not a safe
                integer.
            InvalidRangeError: If a numeric override is negative.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the options to a dictionary.

        Example:
            ```pycon
            >>> from aretrier.retry import RetryOptions
            >>> RetryOptions(max_retries=1).to_dict()
            {'max_retries': 1, 'delay': 0, 'on_success': None, 'on_failure': None}

            ```
        """
        return {
            "max_retries": self.max_retries,
            "delay": self.delay,
            "on_success": self.on_success,
            "on_failure": self.on_failure,
        }
