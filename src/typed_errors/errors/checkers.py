"""
Capability checks for typed errors.

Each error kind has its own small protocol and a mixin implementing it, so a
host type can pick up only the checks it needs:

    >>> class Repository(NotFoundErrorCheck, ConflictErrorCheck):
    ...     ...
    >>> Repository().is_not_found_error(new_not_found("no such user"))
    True

``AllErrorCheck`` composes every mixin. The module-level predicates are the
shared implementation and can be used directly as well.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from typed_errors.errors.base import TypedError


def is_auth_error(err: BaseException | None) -> bool:
    """Check if ``err`` is an authentication/authorization error.

    Unauthorized and forbidden errors count as auth errors.
    """
    return isinstance(err, TypedError) and err.auth


def is_unauthorized_error(err: BaseException | None) -> bool:
    """Check if ``err`` is an unauthorized error."""
    return isinstance(err, TypedError) and err.unauthorized


def is_forbidden_error(err: BaseException | None) -> bool:
    """Check if ``err`` is a forbidden error."""
    return isinstance(err, TypedError) and err.forbidden


def is_client_error(err: BaseException | None) -> bool:
    """Check if ``err`` is a client error."""
    return isinstance(err, TypedError) and err.client


def is_not_found_error(err: BaseException | None) -> bool:
    """Check if ``err`` is a not found error."""
    return isinstance(err, TypedError) and err.not_found


def is_not_implemented_error(err: BaseException | None) -> bool:
    """Check if ``err`` is a not implemented error."""
    return isinstance(err, TypedError) and err.not_implemented


def is_retryable_error(err: BaseException | None) -> bool:
    """Check if ``err`` is retryable."""
    return isinstance(err, TypedError) and err.retryable


def is_conflict_error(err: BaseException | None) -> bool:
    """Check if ``err`` is a conflict error."""
    return isinstance(err, TypedError) and err.conflict


def is_precondition_failed_error(err: BaseException | None) -> bool:
    """Check if ``err`` is a precondition failed error."""
    return isinstance(err, TypedError) and err.precondition_failed


@runtime_checkable
class AuthErrorChecker(Protocol):
    """Recognizes auth, unauthorized and forbidden errors."""

    def is_auth_error(self, err: BaseException | None) -> bool: ...

    def is_unauthorized_error(self, err: BaseException | None) -> bool: ...

    def is_forbidden_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class NotFoundErrorChecker(Protocol):
    """Recognizes not found errors."""

    def is_not_found_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class NotImplementedErrorChecker(Protocol):
    """Recognizes not implemented errors."""

    def is_not_implemented_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class ClientErrorChecker(Protocol):
    """Recognizes client errors."""

    def is_client_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class RetryableErrorChecker(Protocol):
    """Recognizes retryable errors."""

    def is_retryable_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class ConflictErrorChecker(Protocol):
    """Recognizes conflict errors."""

    def is_conflict_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class PreconditionFailedErrorChecker(Protocol):
    """Recognizes precondition failed errors."""

    def is_precondition_failed_error(self, err: BaseException | None) -> bool: ...


@runtime_checkable
class AllErrorChecker(
    AuthErrorChecker,
    NotFoundErrorChecker,
    NotImplementedErrorChecker,
    ClientErrorChecker,
    RetryableErrorChecker,
    ConflictErrorChecker,
    PreconditionFailedErrorChecker,
    Protocol,
):
    """Recognizes every error kind."""


class AuthErrorCheck:
    """Mixin providing ``is_auth_error``, ``is_unauthorized_error`` and
    ``is_forbidden_error``."""

    def is_auth_error(self, err: BaseException | None) -> bool:
        return is_auth_error(err)

    def is_unauthorized_error(self, err: BaseException | None) -> bool:
        return is_unauthorized_error(err)

    def is_forbidden_error(self, err: BaseException | None) -> bool:
        return is_forbidden_error(err)


class NotFoundErrorCheck:
    """Mixin providing ``is_not_found_error``."""

    def is_not_found_error(self, err: BaseException | None) -> bool:
        return is_not_found_error(err)


class NotImplementedErrorCheck:
    """Mixin providing ``is_not_implemented_error``."""

    def is_not_implemented_error(self, err: BaseException | None) -> bool:
        return is_not_implemented_error(err)


class ClientErrorCheck:
    """Mixin providing ``is_client_error``."""

    def is_client_error(self, err: BaseException | None) -> bool:
        return is_client_error(err)


class RetryableErrorCheck:
    """Mixin providing ``is_retryable_error``."""

    def is_retryable_error(self, err: BaseException | None) -> bool:
        return is_retryable_error(err)


class ConflictErrorCheck:
    """Mixin providing ``is_conflict_error``."""

    def is_conflict_error(self, err: BaseException | None) -> bool:
        return is_conflict_error(err)


class PreconditionFailedErrorCheck:
    """Mixin providing ``is_precondition_failed_error``."""

    def is_precondition_failed_error(self, err: BaseException | None) -> bool:
        return is_precondition_failed_error(err)


class AllErrorCheck(
    AuthErrorCheck,
    NotFoundErrorCheck,
    NotImplementedErrorCheck,
    ClientErrorCheck,
    RetryableErrorCheck,
    ConflictErrorCheck,
    PreconditionFailedErrorCheck,
):
    """Mixin providing every ``is_<kind>_error`` check."""
