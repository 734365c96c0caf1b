r"""Utility functions for validation and callback invocation."""

from __future__ import annotations

__all__ = [
    "invoke_async",
    "invoke_sync",
    "is_non_negative",
    "is_safe_integer",
    "require_non_negative",
    "require_non_negative_safe_integer",
    "require_safe_integer",
]

from aretrier.utils.callbacks import invoke_async, invoke_sync
from aretrier.utils.validation import (
    is_non_negative,
    is_safe_integer,
    require_non_negative,
    require_non_negative_safe_integer,
    require_safe_integer,
)
