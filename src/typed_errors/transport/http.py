"""HTTP 传输映射：将错误分类转换为 HTTP 状态码并写入响应。

HTTP rendering for typed errors.

Provides:
- A deterministic flag -> status code mapping
- Writing an error response to any ResponseWriter
- An in-memory writer convertible to an httpx.Response
- Classifying an httpx.Response back into a TypedError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from typed_errors.errors import AUTH_FAMILY, ErrorFlag, TypedError

if TYPE_CHECKING:
    from collections.abc import MutableMapping


# Checked in order after the auth family; first match wins
_STATUS_PRIORITY: tuple[tuple[ErrorFlag, int], ...] = (
    (ErrorFlag.CLIENT, 400),
    (ErrorFlag.NOT_FOUND, 404),
    (ErrorFlag.NOT_IMPLEMENTED, 501),
    (ErrorFlag.RETRYABLE, 503),
    (ErrorFlag.CONFLICT, 409),
    (ErrorFlag.PRECONDITION_FAILED, 412),
)

# Status code to classification for responses received from a server
_DEFAULT_STATUS_FLAGS: dict[int, ErrorFlag] = {
    400: ErrorFlag.CLIENT,
    401: ErrorFlag.AUTH | ErrorFlag.UNAUTHORIZED,
    403: ErrorFlag.AUTH | ErrorFlag.FORBIDDEN,
    404: ErrorFlag.NOT_FOUND,
    409: ErrorFlag.CONFLICT,
    412: ErrorFlag.PRECONDITION_FAILED,
    429: ErrorFlag.RETRYABLE,
    501: ErrorFlag.NOT_IMPLEMENTED,
    502: ErrorFlag.RETRYABLE,
    503: ErrorFlag.RETRYABLE,
    504: ErrorFlag.RETRYABLE,
}

NO_STATUS = -1


@runtime_checkable
class ResponseWriter(Protocol):
    """Minimal response sink an error can be written to."""

    headers: MutableMapping[str, str]

    def write_status(self, status_code: int) -> None:
        """Write the response status line."""
        ...

    def write(self, data: bytes) -> None:
        """Append ``data`` to the response body."""
        ...


class BufferedResponseWriter:
    """In-memory ResponseWriter.

    Records the status, headers and body written to it. Writing the body
    before a status implies 200, as most HTTP servers do.

    Example:
        >>> writer = BufferedResponseWriter()
        >>> to_http_response(new_not_found("no such user"), writer)
        (404, True)
        >>> writer.to_httpx().status_code
        404
    """

    def __init__(self) -> None:
        self.headers: httpx.Headers = httpx.Headers()
        self._status_code: int | None = None
        self._body = bytearray()

    @property
    def status_code(self) -> int | None:
        """Status written so far, or None."""
        return self._status_code

    @property
    def body(self) -> bytes:
        """Body written so far."""
        return bytes(self._body)

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self._body.decode("utf-8")

    def write_status(self, status_code: int) -> None:
        if self._status_code is not None:
            raise RuntimeError(
                f"status already written ({self._status_code}), cannot write {status_code}"
            )
        self._status_code = status_code

    def write(self, data: bytes) -> None:
        if self._status_code is None:
            self._status_code = 200
        self._body.extend(data)

    def to_httpx(self, request: httpx.Request | None = None) -> httpx.Response:
        """Convert what was written into an httpx.Response."""
        return httpx.Response(
            self._status_code or 200,
            headers=self.headers,
            content=self.body,
            request=request,
        )


def http_error(writer: ResponseWriter, message: str, status_code: int) -> None:
    """Write a plain-text error response.

    Sets the content type, writes ``status_code`` and then ``message``
    followed by a newline.
    """
    writer.headers["Content-Type"] = "text/plain; charset=utf-8"
    writer.headers["X-Content-Type-Options"] = "nosniff"
    writer.write_status(status_code)
    writer.write(f"{message}\n".encode())


def status_for(err: BaseException | None) -> int | None:
    """Map an error's flags to an HTTP status code.

    Flags are not mutually exclusive, so the first match wins:
    auth family (403 if forbidden, else 401), client (400), not found (404),
    not implemented (501), retryable (503), conflict (409),
    precondition failed (412).

    Args:
        err: The error to map

    Returns:
        Status code, or None if ``err`` is not a TypedError or carries
        no mapped flag
    """
    if not isinstance(err, TypedError):
        return None

    if err.flags & AUTH_FAMILY:
        return 403 if err.forbidden else 401

    for flag, status in _STATUS_PRIORITY:
        if flag in err.flags:
            return status

    return None


def to_http_response(
    err: BaseException | None, writer: ResponseWriter
) -> tuple[int, bool]:
    """Write ``err`` to ``writer`` with a status code matching its flags.

    The body is the error's HTTP message if one was given, otherwise
    ``str(err)``.

    Args:
        err: The error to render
        writer: Response sink

    Returns:
        The status code written and True, or -1 and False if nothing was
        written
    """
    status = status_for(err)
    if status is None or not isinstance(err, TypedError):
        return NO_STATUS, False

    message = err.http_message or str(err)
    http_error(writer, message, status)
    return status, True


@runtime_checkable
class HTTPResponder(Protocol):
    """Renders errors as HTTP responses."""

    def to_http_response(
        self, err: BaseException | None, writer: ResponseWriter
    ) -> tuple[int, bool]: ...


class ErrorToHTTP:
    """Mixin providing ``to_http_response`` as a method."""

    def to_http_response(
        self, err: BaseException | None, writer: ResponseWriter
    ) -> tuple[int, bool]:
        return to_http_response(err, writer)


def from_http_response(response: httpx.Response) -> TypedError | None:
    """Classify an HTTP response received from a server.

    Args:
        response: Response whose body has been read

    Returns:
        TypedError for 4xx/5xx responses, None otherwise. Unmapped 4xx
        statuses are client errors; unmapped 5xx statuses are generic.
    """
    status = response.status_code
    if status < 400:
        return None

    flags = _DEFAULT_STATUS_FLAGS.get(status)
    if flags is None:
        flags = ErrorFlag.CLIENT if status < 500 else ErrorFlag.NONE

    message = response.text.strip() or f"HTTP {status}"
    return TypedError(message, flags)
