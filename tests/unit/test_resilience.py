"""Tests for resilience module."""

import random

import pytest
from pydantic import ValidationError

from typed_errors.errors import (
    TooManyRetriesError,
    TypedError,
    is_retryable_error,
    new_client,
    new_conflict,
    new_not_found,
    new_retryable,
)
from typed_errors.resilience import (
    MAX_ATTEMPTS,
    Backoff,
    RetryConfig,
    RetryPolicy,
    do_with_retries,
)


class ConflictIsRetryable:
    """Checker treating conflicts as retryable too."""

    def is_retryable_error(self, err: BaseException | None) -> bool:
        return is_retryable_error(err) or (isinstance(err, TypedError) and err.conflict)


class TestBackoff:
    """Tests for Backoff."""

    def test_exponential_growth(self) -> None:
        """Test delays double from the minimum."""
        backoff = Backoff(min_delay=2.0, max_delay=300.0)
        assert [backoff.duration() for _ in range(4)] == [2.0, 4.0, 8.0, 16.0]
        assert backoff.attempt == 4

    def test_respects_max(self) -> None:
        """Test delays are capped at the maximum."""
        backoff = Backoff(min_delay=1.0, max_delay=5.0)
        assert backoff.for_attempt(10) == 5.0

    def test_huge_attempt_does_not_overflow(self) -> None:
        """Test float overflow is capped at the maximum."""
        backoff = Backoff(min_delay=1.0, max_delay=5.0, factor=10.0)
        assert backoff.for_attempt(100_000) == 5.0

    def test_min_not_below_max(self) -> None:
        """Test a minimum at or above the maximum yields the maximum."""
        assert Backoff(min_delay=10.0, max_delay=5.0).for_attempt(0) == 5.0

    def test_custom_factor(self) -> None:
        """Test the growth factor."""
        backoff = Backoff(min_delay=1.0, max_delay=100.0, factor=3.0)
        assert backoff.for_attempt(2) == 9.0

    def test_non_positive_factor_defaults(self) -> None:
        """Test a non-positive factor falls back to 2."""
        assert Backoff(min_delay=1.0, max_delay=100.0, factor=0).for_attempt(3) == 8.0

    def test_jitter_stays_in_range(self) -> None:
        """Test jittered delays stay between min and the exponential bound."""
        backoff = Backoff(
            min_delay=1.0, max_delay=60.0, jitter=True, rng=random.Random(42)
        )
        for attempt in range(6):
            delay = backoff.for_attempt(attempt)
            assert 1.0 <= delay <= min(2.0**attempt, 60.0)

    def test_reset(self) -> None:
        """Test reset restarts the sequence."""
        backoff = Backoff(min_delay=1.0, max_delay=10.0)
        backoff.duration()
        backoff.duration()
        backoff.reset()
        assert backoff.attempt == 0
        assert backoff.duration() == 1.0


class TestRetryConfig:
    """Tests for RetryConfig."""

    def test_defaults(self) -> None:
        """Test default retry configuration."""
        config = RetryConfig()
        assert config.min_delay == 2.0
        assert config.max_delay == 300.0
        assert config.factor == 2.0
        assert config.jitter is False
        assert config.checker.is_retryable_error(new_retryable("x"))

    def test_negative_delay_rejected(self) -> None:
        """Test invalid delays are rejected."""
        with pytest.raises(ValueError):
            RetryConfig(min_delay=-1.0)

    def test_from_mapping(self) -> None:
        """Test creating config from settings."""
        config = RetryConfig.from_mapping(
            {"min_delay_ms": 500, "max_delay_ms": 10000, "factor": 1.5, "jitter": True}
        )
        assert config.min_delay == 0.5
        assert config.max_delay == 10.0
        assert config.factor == 1.5
        assert config.jitter is True

    def test_from_mapping_defaults(self) -> None:
        """Test empty settings give the defaults."""
        assert RetryConfig.from_mapping(None).min_delay == RetryConfig().min_delay
        assert RetryConfig.from_mapping({}).max_delay == RetryConfig().max_delay

    def test_from_mapping_with_checker(self) -> None:
        """Test a checker can be supplied alongside settings."""
        checker = ConflictIsRetryable()
        assert RetryConfig.from_mapping({}, checker=checker).checker is checker

    @pytest.mark.parametrize(
        "settings",
        [{"min_delay_ms": -1}, {"factor": 0}, {"unknown": 1}, {"jitter": "sometimes"}],
    )
    def test_from_mapping_invalid(self, settings: dict[str, object]) -> None:
        """Test invalid settings raise a validation error."""
        with pytest.raises(ValidationError):
            RetryConfig.from_mapping(settings)

    def test_new_backoff_is_fresh(self) -> None:
        """Test each backoff starts from the first attempt."""
        config = RetryConfig(min_delay=1.0)
        first = config.new_backoff()
        first.duration()
        assert config.new_backoff().attempt == 0


class TestRetryPolicy:
    """Tests for RetryPolicy."""

    def test_success_first_try(self, sleep, flaky) -> None:
        """Test a successful call returns immediately."""
        operation = flaky([])
        assert RetryPolicy(sleep=sleep).execute(operation) == "success"
        assert operation.calls == 1
        assert sleep.count == 0

    def test_retry_then_success(self, sleep, flaky) -> None:
        """Test four retryable failures then success on the fifth call."""
        operation = flaky([new_retryable("busy")] * 4, value=42)
        assert RetryPolicy(sleep=sleep).execute(operation) == 42
        assert operation.calls == 5
        assert sleep.count == 4
        assert sleep.delays == [2.0, 4.0, 8.0, 16.0]

    def test_too_many_retries(self, sleep, flaky) -> None:
        """Test exhaustion after five retryable failures."""
        errors = [new_retryable(f"timeout {i}") for i in range(MAX_ATTEMPTS)]
        operation = flaky(errors)

        with pytest.raises(TooManyRetriesError) as exc_info:
            RetryPolicy(sleep=sleep).execute(operation)

        assert operation.calls == MAX_ATTEMPTS
        assert sleep.count == MAX_ATTEMPTS - 1
        assert "too many retries" in str(exc_info.value)
        assert "timeout 4" in str(exc_info.value)

    def test_exhaustion_keeps_last_error(self, sleep, flaky) -> None:
        """Test the last error is attached but its flags are not copied."""
        last = new_retryable("still down")
        operation = flaky([new_retryable("down")] * 4 + [last])

        with pytest.raises(TooManyRetriesError) as exc_info:
            RetryPolicy(sleep=sleep).execute(operation)

        error = exc_info.value
        assert error.last_error is last
        assert error.__cause__ is last
        assert not is_retryable_error(error)

    def test_non_retryable_propagates_unchanged(self, sleep, flaky) -> None:
        """Test a non-retryable error is raised as-is after one call."""
        original = new_not_found("no such user")
        operation = flaky([original])

        with pytest.raises(TypedError) as exc_info:
            RetryPolicy(sleep=sleep).execute(operation)

        assert exc_info.value is original
        assert exc_info.value.not_found
        assert operation.calls == 1
        assert sleep.count == 0

    def test_foreign_error_not_retried(self, sleep, flaky) -> None:
        """Test errors that are not typed errors are never retried."""
        operation = flaky([ValueError("bad input")])
        with pytest.raises(ValueError, match="bad input"):
            RetryPolicy(sleep=sleep).execute(operation)
        assert operation.calls == 1

    def test_non_retryable_after_retries(self, sleep, flaky) -> None:
        """Test a later non-retryable error stops the loop."""
        operation = flaky([new_retryable("busy"), new_client("bad request")])
        with pytest.raises(TypedError, match="bad request"):
            RetryPolicy(sleep=sleep).execute(operation)
        assert operation.calls == 2
        assert sleep.count == 1

    def test_custom_checker(self, sleep, flaky) -> None:
        """Test the retryable predicate is pluggable."""
        operation = flaky([new_conflict("stale")] * 2)
        config = RetryConfig(checker=ConflictIsRetryable())
        assert RetryPolicy(config, sleep=sleep).execute(operation) == "success"
        assert operation.calls == 3

    def test_backoff_respects_config(self, sleep, flaky) -> None:
        """Test delays follow the configured backoff."""
        operation = flaky([new_retryable("busy")] * 4)
        config = RetryConfig(min_delay=1.0, max_delay=5.0, factor=3.0)
        RetryPolicy(config, sleep=sleep).execute(operation)
        assert sleep.delays == [1.0, 3.0, 5.0, 5.0]

    def test_on_retry_callback(self, sleep, flaky) -> None:
        """Test the callback sees each retry."""
        seen: list[tuple[int, str, float]] = []
        operation = flaky([new_retryable("a"), new_retryable("b")])
        policy = RetryPolicy(
            sleep=sleep, on_retry=lambda n, e, d: seen.append((n, str(e), d))
        )
        policy.execute(operation)
        assert seen == [(1, "a", 2.0), (2, "b", 4.0)]

    def test_independent_executions(self, sleep, flaky) -> None:
        """Test every execution starts a fresh backoff."""
        policy = RetryPolicy(sleep=sleep)
        policy.execute(flaky([new_retryable("x")]))
        policy.execute(flaky([new_retryable("x")]))
        assert sleep.delays == [2.0, 2.0]

    def test_base_exceptions_not_caught(self, sleep) -> None:
        """Test interrupts pass straight through."""

        def interrupted() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            RetryPolicy(sleep=sleep).execute(interrupted)
        assert sleep.count == 0


class TestDoWithRetries:
    """Tests for the do_with_retries helper."""

    def test_returns_value(self, sleep, flaky) -> None:
        """Test the helper returns the operation's value."""
        operation = flaky([new_retryable("busy")], value={"id": 1})
        assert do_with_retries(operation, sleep=sleep) == {"id": 1}
        assert operation.calls == 2

    def test_with_config(self, sleep, flaky) -> None:
        """Test the helper honors its config."""
        operation = flaky([new_retryable("busy")] * 2)
        do_with_retries(operation, RetryConfig(min_delay=0.01, max_delay=1.0), sleep=sleep)
        assert sleep.delays == [0.01, 0.02]

    def test_real_sleep(self, flaky) -> None:
        """Test the default sleep with a tiny delay."""
        operation = flaky([new_retryable("busy")])
        config = RetryConfig(min_delay=0.001, max_delay=0.002)
        assert do_with_retries(operation, config) == "success"
