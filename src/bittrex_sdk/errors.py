"""
errors.py – Exception taxonomy for the Bittrex SDK.

Every failure a call can produce is exactly one of these classes:

    BittrexError
    ├── UnsupportedVersionError   config names an API version we do not speak
    ├── UnknownOperationError     operation missing from the routing table
    ├── MissingCredentialsError   private operation on a public-only config
    ├── RemoteApiError            exchange answered {"success": false, ...}
    ├── MalformedResponseError    body is not a valid {success, message, result} envelope
    └── TransportError            HTTP layer failed (DNS, timeout, non-2xx)

RemoteApiError ("the exchange said no") and MalformedResponseError ("the
response made no sense") share no parent below BittrexError.
"""

from __future__ import annotations

from typing import Any, Optional


class BittrexError(Exception):
    """Base class for all Bittrex SDK errors."""


class UnsupportedVersionError(BittrexError):
    """Raised when a config or resolver call names an unknown API version."""

    def __init__(self, version: Any) -> None:
        self.version = version
        super().__init__(f"supported versions are 'v1.1' and 'v2.0', got {version!r}")


class UnknownOperationError(BittrexError):
    """Raised when an operation name is not part of the Bittrex API surface."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"unknown Bittrex operation {operation!r}")


class MissingCredentialsError(BittrexError):
    """Raised when a private operation is called without an API key and secret."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"operation {operation!r} is private and requires an authenticated ClientConfig"
        )


class RemoteApiError(BittrexError):
    """Raised when Bittrex reports failure in the response envelope."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedResponseError(BittrexError):
    """Raised when the response body is not a valid Bittrex envelope."""

    def __init__(self, reason: str, body: str = "") -> None:
        self.reason = reason
        self.body   = body
        snippet = f": {body[:200]}" if body else ""
        super().__init__(f"malformed Bittrex response ({reason}){snippet}")


class TransportError(BittrexError):
    """Raised when the HTTP request itself fails or returns a non-2xx status."""

    def __init__(self, status_code: Optional[int], body: str, path: str = "") -> None:
        self.status_code = status_code
        self.body        = body
        self.path        = path
        status   = status_code if status_code is not None else "no response"
        location = f" GET {path}" if path else ""
        super().__init__(f"Bittrex transport error [{status}]{location}: {body}")
