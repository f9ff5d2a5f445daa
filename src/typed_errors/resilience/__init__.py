"""
Resilience layer - bounded retry with exponential backoff.

- Backoff: exponential delay counter with optional jitter
- RetryPolicy / do_with_retries: retry driven by error classification
"""

from typed_errors.resilience.backoff import Backoff
from typed_errors.resilience.retry import (
    MAX_ATTEMPTS,
    RetryConfig,
    RetryPolicy,
    RetrySettings,
    do_with_retries,
)

__all__ = [
    "MAX_ATTEMPTS",
    "Backoff",
    "RetryConfig",
    "RetryPolicy",
    "RetrySettings",
    "do_with_retries",
]
