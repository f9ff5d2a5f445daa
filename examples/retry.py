#!/usr/bin/env python3
"""
Retry example.

Retries a flaky operation that fails with retryable errors, then shows
what happens when attempts run out.

Usage:
    python examples/retry.py
"""

from typed_errors.errors import TooManyRetriesError, new_retryablef
from typed_errors.resilience import RetryConfig, do_with_retries
from typed_errors.telemetry import LogLevel, TypedErrorsLogger


def flaky(failures: int):
    """Build an operation failing ``failures`` times before succeeding."""
    calls = {"n": 0}

    def operation() -> str:
        calls["n"] += 1
        if calls["n"] <= failures:
            raise new_retryablef("upstream unavailable (call %d)", calls["n"])
        return f"succeeded after {calls['n']} calls"

    return operation


def main() -> None:
    TypedErrorsLogger.configure(level=LogLevel.DEBUG, format="text")
    config = RetryConfig(min_delay=0.05, max_delay=0.5, jitter=True)

    print(do_with_retries(flaky(3), config))

    try:
        do_with_retries(flaky(10), config)
    except TooManyRetriesError as e:
        print(f"gave up: {e}")
        print(f"last error: {e.last_error!r}")


if __name__ == "__main__":
    main()
