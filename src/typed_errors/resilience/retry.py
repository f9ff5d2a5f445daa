"""
Retry driver with exponential backoff.

Runs a zero-argument operation up to MAX_ATTEMPTS times, retrying only
when the configured checker classifies the raised error as retryable.
The calling thread sleeps between attempts.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from typed_errors.errors import (
    RetryableErrorCheck,
    RetryableErrorChecker,
    TooManyRetriesError,
)
from typed_errors.resilience.backoff import Backoff
from typed_errors.telemetry import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

T = TypeVar("T")

MAX_ATTEMPTS = 5

logger = get_logger("typed_errors.resilience.retry")


class RetrySettings(BaseModel):
    """Retry settings as found in a host service's configuration."""

    model_config = ConfigDict(extra="forbid")

    min_delay_ms: int = Field(default=2000, ge=0, description="Minimum backoff delay")
    max_delay_ms: int = Field(default=300000, ge=0, description="Maximum backoff delay")
    factor: float = Field(default=2.0, gt=0, description="Backoff growth factor")
    jitter: bool = Field(default=False, description="Randomize backoff delays")


@dataclass
class RetryConfig:
    """Configuration for the retry driver.

    Attributes:
        min_delay: Minimum backoff delay in seconds
        max_delay: Maximum backoff delay in seconds
        factor: Backoff growth factor per attempt
        jitter: Whether to randomize backoff delays
        checker: Decides which errors are retried
    """

    min_delay: float = 2.0
    max_delay: float = 300.0
    factor: float = 2.0
    jitter: bool = False
    checker: RetryableErrorChecker = field(default_factory=RetryableErrorCheck)

    def __post_init__(self) -> None:
        if self.min_delay < 0 or self.max_delay < 0:
            raise ValueError("backoff delays must not be negative")

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any] | None,
        checker: RetryableErrorChecker | None = None,
    ) -> RetryConfig:
        """Create config from a settings mapping.

        Args:
            data: Mapping with min_delay_ms, max_delay_ms, factor and jitter
            checker: Optional retryable checker

        Returns:
            RetryConfig instance

        Raises:
            pydantic.ValidationError: If the mapping is invalid
        """
        settings = RetrySettings.model_validate(dict(data or {}))
        config = cls(
            min_delay=settings.min_delay_ms / 1000.0,
            max_delay=settings.max_delay_ms / 1000.0,
            factor=settings.factor,
            jitter=settings.jitter,
        )
        if checker is not None:
            config.checker = checker
        return config

    def new_backoff(self) -> Backoff:
        """Create a fresh backoff counter from this config."""
        return Backoff(
            min_delay=self.min_delay,
            max_delay=self.max_delay,
            factor=self.factor,
            jitter=self.jitter,
        )


class RetryPolicy:
    """Bounded retry with exponential backoff.

    Example:
        >>> policy = RetryPolicy(RetryConfig(min_delay=0.1))
        >>> value = policy.execute(fetch_user)
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        on_retry: Callable[[int, Exception, float], None] | None = None,
    ) -> None:
        """Initialize retry policy.

        Args:
            config: Retry configuration
            sleep: Function used to wait between attempts
            on_retry: Optional callback called before each retry with the
                attempt number (1-based), the error and the delay
        """
        self._config = config or RetryConfig()
        self._sleep = sleep
        self._on_retry = on_retry

    @property
    def config(self) -> RetryConfig:
        return self._config

    def execute(self, operation: Callable[[], T]) -> T:
        """Run ``operation`` until it succeeds or attempts run out.

        Args:
            operation: Zero-argument callable

        Returns:
            The operation's return value

        Raises:
            Exception: The operation's error, unchanged, if it is not
                retryable
            TooManyRetriesError: If every attempt failed with a retryable
                error
        """
        backoff = self._config.new_backoff()
        checker = self._config.checker

        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                return operation()
            except Exception as e:
                if not checker.is_retryable_error(e):
                    raise

                if attempt == MAX_ATTEMPTS:
                    logger.debug("Retries exhausted", attempts=attempt, error=str(e))
                    raise TooManyRetriesError(e) from e

                delay = backoff.duration()
                logger.debug(
                    "Retrying operation", attempt=attempt, delay=delay, error=str(e)
                )
                if self._on_retry:
                    self._on_retry(attempt, e, delay)
                self._sleep(delay)

        # Should never reach here
        raise RuntimeError("retry loop exited without a result")


def do_with_retries(
    operation: Callable[[], T],
    config: RetryConfig | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
    on_retry: Callable[[int, Exception, float], None] | None = None,
) -> T:
    """Execute an operation with retries.

    Args:
        operation: Zero-argument callable
        config: Retry configuration
        sleep: Function used to wait between attempts
        on_retry: Optional callback called before each retry

    Returns:
        Operation result

    Raises:
        The operation's error if it is not retryable, or
        TooManyRetriesError once attempts are exhausted
    """
    return RetryPolicy(config, sleep=sleep, on_retry=on_retry).execute(operation)
