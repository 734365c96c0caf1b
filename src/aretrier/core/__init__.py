r"""Core constants shared by the sync and async retry paths."""

from __future__ import annotations

__all__ = ["DEFAULT_DELAY", "DEFAULT_MAX_RETRIES", "MAX_SAFE_INTEGER", "MIN_SAFE_INTEGER"]

from aretrier.core.config import (
    DEFAULT_DELAY,
    DEFAULT_MAX_RETRIES,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
)
