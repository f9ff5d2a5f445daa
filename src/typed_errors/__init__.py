"""分类错误约定库：错误分类、HTTP 状态映射与基于分类的重试。

typed-errors: classified errors for Python services.

Errors carry independent classification flags (client, auth, not found,
retryable, ...). Downstream code inspects them through small capability
checks, renders them as HTTP responses, or retries operations that fail
with retryable errors.
"""
from __future__ import annotations

from typed_errors.errors import (
    AllErrorCheck,
    AllErrorChecker,
    ErrorFlag,
    TooManyRetriesError,
    TypedError,
    is_auth_error,
    is_client_error,
    is_conflict_error,
    is_forbidden_error,
    is_not_found_error,
    is_not_implemented_error,
    is_precondition_failed_error,
    is_retryable_error,
    is_unauthorized_error,
    new,
    new_auth,
    new_client,
    new_conflict,
    new_forbidden,
    new_not_found,
    new_not_implemented,
    new_precondition_failed,
    new_retryable,
    new_unauthorized,
    newf,
)
from typed_errors.resilience import RetryConfig, RetryPolicy, do_with_retries
from typed_errors.transport import BufferedResponseWriter, to_http_response

__version__ = "0.1.0"

__all__ = [
    # Errors
    "AllErrorCheck",
    "AllErrorChecker",
    "ErrorFlag",
    "TooManyRetriesError",
    "TypedError",
    "is_auth_error",
    "is_client_error",
    "is_conflict_error",
    "is_forbidden_error",
    "is_not_found_error",
    "is_not_implemented_error",
    "is_precondition_failed_error",
    "is_retryable_error",
    "is_unauthorized_error",
    # Constructors
    "new",
    "new_auth",
    "new_client",
    "new_conflict",
    "new_forbidden",
    "new_not_found",
    "new_not_implemented",
    "new_precondition_failed",
    "new_retryable",
    "new_unauthorized",
    "newf",
    # Retry
    "RetryConfig",
    "RetryPolicy",
    "do_with_retries",
    # Transport
    "BufferedResponseWriter",
    "to_http_response",
    # Version
    "__version__",
]
