"""
Transport layer - rendering typed errors as HTTP responses.

Provides:
- status_for / to_http_response: flag -> status code mapping and writing
- BufferedResponseWriter: in-memory writer convertible to httpx.Response
- from_http_response: classify received httpx responses
"""

from typed_errors.transport.http import (
    NO_STATUS,
    BufferedResponseWriter,
    ErrorToHTTP,
    HTTPResponder,
    ResponseWriter,
    from_http_response,
    http_error,
    status_for,
    to_http_response,
)

__all__ = [
    "NO_STATUS",
    "BufferedResponseWriter",
    "ErrorToHTTP",
    "HTTPResponder",
    "ResponseWriter",
    "from_http_response",
    "http_error",
    "status_for",
    "to_http_response",
]
