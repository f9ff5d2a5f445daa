"""错误基类：携带独立分类标志的不可变错误值。

Typed error value for typed-errors.

A TypedError is an ordinary exception carrying a set of independent
classification flags:
- AUTH / UNAUTHORIZED / FORBIDDEN: authentication and authorization failures
- CLIENT: malformed or invalid input from the caller
- NOT_FOUND: the requested resource does not exist
- NOT_IMPLEMENTED: the requested functionality is not implemented
- RETRYABLE: a transient failure that may succeed if tried again
- CONFLICT: the request conflicts with the current state of a resource
- PRECONDITION_FAILED: a precondition on the resource did not hold
"""

from __future__ import annotations

from enum import Flag, auto
from typing import Any


class ErrorFlag(Flag):
    """Independent classification flags carried by a TypedError."""

    NONE = 0
    AUTH = auto()
    UNAUTHORIZED = auto()
    FORBIDDEN = auto()
    CLIENT = auto()
    NOT_FOUND = auto()
    NOT_IMPLEMENTED = auto()
    RETRYABLE = auto()
    CONFLICT = auto()
    PRECONDITION_FAILED = auto()


# Any of these marks an error as belonging to the auth family
AUTH_FAMILY = ErrorFlag.AUTH | ErrorFlag.UNAUTHORIZED | ErrorFlag.FORBIDDEN

_FROZEN_ATTRS = frozenset(
    {
        "_flags",
        "_payload",
        "_http_message",
        "_last_error",
        "flags",
        "payload",
        "http_message",
        "last_error",
    }
)


class TypedError(Exception):
    """Error carrying classification flags alongside its payload.

    The error message is the stringified payload and never includes the
    flags. Instances are immutable; use ``with_flags`` to derive a new
    error with a different classification.

    Attributes:
        flags: Classification flags set at construction
        payload: Arbitrary error content
        http_message: Optional message used instead of the payload when
            rendering an HTTP response
    """

    _flags: ErrorFlag
    _payload: Any
    _http_message: str | None

    def __init__(
        self,
        payload: Any = None,
        flags: ErrorFlag = ErrorFlag.NONE,
        *,
        http_message: str | None = None,
    ) -> None:
        super().__init__(payload)
        object.__setattr__(self, "_flags", flags)
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(self, "_http_message", http_message)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FROZEN_ATTRS:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return str(self._payload)

    def __repr__(self) -> str:
        parts = [repr(self._payload)]
        if self._flags:
            parts.append(f"flags={self._flags!r}")
        if self._http_message is not None:
            parts.append(f"http_message={self._http_message!r}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedError) or type(other) is not type(self):
            return NotImplemented
        return (
            self._flags == other._flags
            and self._payload == other._payload
            and self._http_message == other._http_message
        )

    def __hash__(self) -> int:
        try:
            payload_hash = hash(self._payload)
        except TypeError:
            # Unhashable payloads only take part in equality
            payload_hash = 0
        return hash((type(self), self._flags, payload_hash, self._http_message))

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (type(self), self._payload, self._flags, self._http_message))

    @property
    def flags(self) -> ErrorFlag:
        """Classification flags set at construction."""
        return self._flags

    @property
    def payload(self) -> Any:
        """The error content."""
        return self._payload

    @property
    def http_message(self) -> str | None:
        """HTTP-specific message, if one was supplied."""
        return self._http_message

    def has(self, flag: ErrorFlag) -> bool:
        """Check whether every bit of ``flag`` is set."""
        return flag in self._flags

    def with_flags(self, flags: ErrorFlag) -> TypedError:
        """Return a copy of this error with ``flags`` added."""
        return TypedError(
            self._payload, self._flags | flags, http_message=self._http_message
        )

    @property
    def client(self) -> bool:
        """True if this is a client error."""
        return ErrorFlag.CLIENT in self._flags

    @property
    def auth(self) -> bool:
        """True if this is an auth error of any kind.

        Unauthorized and forbidden errors resolve as auth errors too.
        """
        return bool(self._flags & AUTH_FAMILY)

    @property
    def unauthorized(self) -> bool:
        """True if this is an unauthorized error."""
        return ErrorFlag.UNAUTHORIZED in self._flags

    @property
    def forbidden(self) -> bool:
        """True if this is a forbidden error."""
        return ErrorFlag.FORBIDDEN in self._flags

    @property
    def not_found(self) -> bool:
        """True if the resource being fetched was not found."""
        return ErrorFlag.NOT_FOUND in self._flags

    @property
    def not_implemented(self) -> bool:
        """True if the functionality requested is not implemented."""
        return ErrorFlag.NOT_IMPLEMENTED in self._flags

    @property
    def retryable(self) -> bool:
        """True if this error is not permanent and should be retried."""
        return ErrorFlag.RETRYABLE in self._flags

    @property
    def conflict(self) -> bool:
        """True if this error denotes a conflict in resources (HTTP 409)."""
        return ErrorFlag.CONFLICT in self._flags

    @property
    def precondition_failed(self) -> bool:
        """True if a precondition on the resource failed (HTTP 412)."""
        return ErrorFlag.PRECONDITION_FAILED in self._flags


class TooManyRetriesError(TypedError):
    """Raised when a retried operation exhausts its attempts.

    Carries no classification flags. The last underlying error is kept in
    ``last_error`` (and as ``__cause__``) so callers can still inspect it.
    """

    _last_error: BaseException

    def __init__(self, last_error: BaseException) -> None:
        super().__init__(f"too many retries: {last_error}")
        object.__setattr__(self, "_last_error", last_error)

    @property
    def last_error(self) -> BaseException:
        """The error raised by the final attempt."""
        return self._last_error

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._last_error,))


def _rebuild(
    cls: type[TypedError], payload: Any, flags: ErrorFlag, http_message: str | None
) -> TypedError:
    return cls(payload, flags, http_message=http_message)
