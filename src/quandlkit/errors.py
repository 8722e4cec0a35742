"""
Error types raised by quandlkit.

Runtime failures (network, HTTP status, decoding) derive from QuandlError so
callers can catch them in one place. Invalid arguments are rejected with
plain TypeError/ValueError before any request is sent.
"""

from typing import Optional


class QuandlError(Exception):
    """Base exception for quandlkit runtime errors."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(QuandlError):
    """Raised when the API host cannot be reached (DNS, refused, timeout)."""
    pass


class ApiError(QuandlError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        super().__init__(f"API request failed with status {status_code}: {body}", url)
        self.status_code = status_code
        self.body = body


class DecodeError(QuandlError):
    """Raised when a response body is not valid JSON or does not match the schema."""
    pass


class UnsupportedFormatError(QuandlError, ValueError):
    """Raised when a request would return a format the decoder cannot read."""
    pass
