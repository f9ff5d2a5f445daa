"""Root pytest fixtures for typed-errors tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, delay: float) -> None:
        self.delays.append(delay)

    @property
    def count(self) -> int:
        return len(self.delays)


class FlakyOperation:
    """Operation raising the given errors in order, then returning ``value``."""

    def __init__(self, errors: list[Exception], value: object = "success") -> None:
        self._errors = list(errors)
        self._value = value
        self.calls = 0

    def __call__(self) -> object:
        self.calls += 1
        if self._errors:
            raise self._errors.pop(0)
        return self._value


@pytest.fixture
def sleep() -> RecordingSleep:
    """Sleep function that never blocks."""
    return RecordingSleep()


@pytest.fixture
def flaky() -> Callable[..., FlakyOperation]:
    """Factory for operations that fail a fixed number of times."""
    return FlakyOperation
