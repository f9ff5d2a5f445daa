"""错误体系：带分类标志的错误值、构造函数与能力检查。

Typed errors: classified error values, constructors and capability checks.
"""

from typed_errors.errors.base import (
    AUTH_FAMILY,
    ErrorFlag,
    TooManyRetriesError,
    TypedError,
)
from typed_errors.errors.checkers import (
    AllErrorCheck,
    AllErrorChecker,
    AuthErrorCheck,
    AuthErrorChecker,
    ClientErrorCheck,
    ClientErrorChecker,
    ConflictErrorCheck,
    ConflictErrorChecker,
    NotFoundErrorCheck,
    NotFoundErrorChecker,
    NotImplementedErrorCheck,
    NotImplementedErrorChecker,
    PreconditionFailedErrorCheck,
    PreconditionFailedErrorChecker,
    RetryableErrorCheck,
    RetryableErrorChecker,
    is_auth_error,
    is_client_error,
    is_conflict_error,
    is_forbidden_error,
    is_not_found_error,
    is_not_implemented_error,
    is_precondition_failed_error,
    is_retryable_error,
    is_unauthorized_error,
)
from typed_errors.errors.constructors import (
    new,
    new_auth,
    new_auth_with_http,
    new_auth_with_httpf,
    new_authf,
    new_client,
    new_client_with_http,
    new_client_with_httpf,
    new_clientf,
    new_conflict,
    new_conflict_with_http,
    new_conflict_with_httpf,
    new_conflictf,
    new_forbidden,
    new_forbidden_with_http,
    new_forbidden_with_httpf,
    new_forbiddenf,
    new_not_found,
    new_not_found_with_http,
    new_not_found_with_httpf,
    new_not_foundf,
    new_not_implemented,
    new_not_implemented_with_http,
    new_not_implemented_with_httpf,
    new_not_implementedf,
    new_precondition_failed,
    new_precondition_failed_with_http,
    new_precondition_failed_with_httpf,
    new_precondition_failedf,
    new_retryable,
    new_retryable_with_http,
    new_retryable_with_httpf,
    new_retryablef,
    new_unauthorized,
    new_unauthorized_with_http,
    new_unauthorized_with_httpf,
    new_unauthorizedf,
    new_with_http,
    new_with_httpf,
    newf,
)

__all__ = [
    # Base
    "AUTH_FAMILY",
    "ErrorFlag",
    "TooManyRetriesError",
    "TypedError",
    # Checkers
    "AllErrorCheck",
    "AllErrorChecker",
    "AuthErrorCheck",
    "AuthErrorChecker",
    "ClientErrorCheck",
    "ClientErrorChecker",
    "ConflictErrorCheck",
    "ConflictErrorChecker",
    "NotFoundErrorCheck",
    "NotFoundErrorChecker",
    "NotImplementedErrorCheck",
    "NotImplementedErrorChecker",
    "PreconditionFailedErrorCheck",
    "PreconditionFailedErrorChecker",
    "RetryableErrorCheck",
    "RetryableErrorChecker",
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
    "new_auth_with_http",
    "new_auth_with_httpf",
    "new_authf",
    "new_client",
    "new_client_with_http",
    "new_client_with_httpf",
    "new_clientf",
    "new_conflict",
    "new_conflict_with_http",
    "new_conflict_with_httpf",
    "new_conflictf",
    "new_forbidden",
    "new_forbidden_with_http",
    "new_forbidden_with_httpf",
    "new_forbiddenf",
    "new_not_found",
    "new_not_found_with_http",
    "new_not_found_with_httpf",
    "new_not_foundf",
    "new_not_implemented",
    "new_not_implemented_with_http",
    "new_not_implemented_with_httpf",
    "new_not_implementedf",
    "new_precondition_failed",
    "new_precondition_failed_with_http",
    "new_precondition_failed_with_httpf",
    "new_precondition_failedf",
    "new_retryable",
    "new_retryable_with_http",
    "new_retryable_with_httpf",
    "new_retryablef",
    "new_unauthorized",
    "new_unauthorized_with_http",
    "new_unauthorized_with_httpf",
    "new_unauthorizedf",
    "new_with_http",
    "new_with_httpf",
    "newf",
]
