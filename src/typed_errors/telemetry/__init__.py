"""
Telemetry module for typed-errors.

Provides structured logging used by the retry driver.
"""

from typed_errors.telemetry.logger import (
    JsonFormatter,
    LogLevel,
    TextFormatter,
    TypedErrorsLogger,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "LogLevel",
    "TextFormatter",
    "TypedErrorsLogger",
    "get_logger",
]
