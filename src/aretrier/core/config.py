r"""Default values shared by the retry policy and the retry executors."""

from __future__ import annotations

__all__ = ["DEFAULT_DELAY", "DEFAULT_MAX_RETRIES", "MAX_SAFE_INTEGER", "MIN_SAFE_INTEGER"]

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 2

# Default delay in milliseconds between two asynchronous attempts
DEFAULT_DELAY = 0

# Largest integer that survives a round trip through a float
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER
