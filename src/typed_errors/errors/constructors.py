"""
Constructors for typed errors.

Every error kind gets four constructors:
- ``new_<kind>(data)``: plain payload
- ``new_<kind>f(fmt, *args)``: printf-style formatted payload
- ``new_<kind>_with_http(http_msg, data)``: plain payload plus an HTTP message
- ``new_<kind>_with_httpf(http_msg, fmt, *args)``: both of the above

Forbidden and unauthorized errors also resolve as auth errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typed_errors.errors.base import ErrorFlag, TypedError

if TYPE_CHECKING:
    from collections.abc import Callable

_FORBIDDEN = ErrorFlag.AUTH | ErrorFlag.FORBIDDEN
_UNAUTHORIZED = ErrorFlag.AUTH | ErrorFlag.UNAUTHORIZED


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply %-style formatting.

    A format without args still has ``%%`` expanded; one that is not a
    valid format on its own (e.g. ``"100%"``) is used verbatim.
    """
    if args:
        return fmt % args
    try:
        return fmt % ()
    except (TypeError, ValueError):
        return fmt


def _constructors(
    flags: ErrorFlag, description: str
) -> tuple[
    Callable[[Any], TypedError],
    Callable[..., TypedError],
    Callable[[str, Any], TypedError],
    Callable[..., TypedError],
]:
    """Build the plain, formatted and HTTP-message variants for one kind."""

    def plain(data: Any) -> TypedError:
        return TypedError(data, flags)

    def formatted(fmt: str, *args: Any) -> TypedError:
        return TypedError(_sprintf(fmt, args), flags)

    def with_http(http_msg: str, data: Any) -> TypedError:
        return TypedError(data, flags, http_message=http_msg)

    def with_httpf(http_msg: str, fmt: str, *args: Any) -> TypedError:
        return TypedError(_sprintf(fmt, args), flags, http_message=http_msg)

    plain.__doc__ = f"Create a new {description}."
    formatted.__doc__ = f"Create a new {description} with printf-style formatting."
    with_http.__doc__ = f"Create a new {description} with an HTTP specific message."
    with_httpf.__doc__ = (
        f"Create a new {description} with an HTTP specific message "
        "and printf-style formatting."
    )
    return plain, formatted, with_http, with_httpf


new, newf, new_with_http, new_with_httpf = _constructors(ErrorFlag.NONE, "error")

new_client, new_clientf, new_client_with_http, new_client_with_httpf = _constructors(
    ErrorFlag.CLIENT, "client error"
)

new_auth, new_authf, new_auth_with_http, new_auth_with_httpf = _constructors(
    ErrorFlag.AUTH, "auth error (not specific to the kind of auth failure)"
)

(
    new_forbidden,
    new_forbiddenf,
    new_forbidden_with_http,
    new_forbidden_with_httpf,
) = _constructors(_FORBIDDEN, "forbidden auth error (HTTP 403)")

(
    new_unauthorized,
    new_unauthorizedf,
    new_unauthorized_with_http,
    new_unauthorized_with_httpf,
) = _constructors(_UNAUTHORIZED, "unauthorized auth error (HTTP 401)")

(
    new_not_found,
    new_not_foundf,
    new_not_found_with_http,
    new_not_found_with_httpf,
) = _constructors(ErrorFlag.NOT_FOUND, "not found error")

(
    _new_not_implemented,
    new_not_implementedf,
    new_not_implemented_with_http,
    new_not_implemented_with_httpf,
) = _constructors(ErrorFlag.NOT_IMPLEMENTED, "not implemented error")

(
    new_retryable,
    new_retryablef,
    new_retryable_with_http,
    new_retryable_with_httpf,
) = _constructors(ErrorFlag.RETRYABLE, "retryable error")

(
    new_conflict,
    new_conflictf,
    new_conflict_with_http,
    new_conflict_with_httpf,
) = _constructors(ErrorFlag.CONFLICT, "conflict error")

(
    new_precondition_failed,
    new_precondition_failedf,
    new_precondition_failed_with_http,
    new_precondition_failed_with_httpf,
) = _constructors(ErrorFlag.PRECONDITION_FAILED, "precondition failed error")


def new_not_implemented(data: Any = "not implemented") -> TypedError:
    """Create a new not implemented error."""
    return _new_not_implemented(data)
