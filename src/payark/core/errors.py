"""
Error types raised by the PayArk client.

:class:`PayArkError` covers anything that went wrong with the call itself,
while :class:`PayArkDecodeError` means the server answered successfully with a
body the SDK does not understand.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

__all__ = [
    "ErrorCode",
    "PayArkDecodeError",
    "PayArkError",
    "map_status_to_code",
]


class ErrorCode(str, Enum):
    AUTHENTICATION_ERROR = "authentication_error"
    PERMISSION_ERROR = "permission_error"
    INVALID_REQUEST_ERROR = "invalid_request_error"
    NOT_FOUND_ERROR = "not_found_error"
    RATE_LIMIT_ERROR = "rate_limit_error"
    API_ERROR = "api_error"
    CONNECTION_ERROR = "connection_error"
    UNKNOWN_ERROR = "unknown_error"


class PayArkError(Exception):
    """
    Raised when a request fails before, during or after the HTTP exchange.

    ``status_code`` is ``0`` when no response was received at all.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: ErrorCode,
        raw: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = ErrorCode(code)
        self.raw = raw

    def __str__(self) -> str:
        return f"[PayArkError: {self.code.value}] {self.message} (HTTP {self.status_code})"

    def __repr__(self) -> str:
        return (
            f"PayArkError(message={self.message!r}, status_code={self.status_code}, "
            f"code={self.code.value!r})"
        )


class PayArkDecodeError(Exception):
    """Raised when a successful response does not match the expected schema."""

    def __init__(self, schema: str, errors: List[Dict[str, Any]], payload: Any) -> None:
        self.schema = schema
        self.errors = errors
        self.payload = payload
        super().__init__(self._summary())

    def _summary(self) -> str:
        if not self.errors:
            return f"Response did not match {self.schema}"
        first = self.errors[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        extra = len(self.errors) - 1
        suffix = f" (+{extra} more)" if extra else ""
        return f"Response did not match {self.schema}: {location}: {first.get('msg')}{suffix}"


def map_status_to_code(status: int) -> ErrorCode:
    if status == 401:
        return ErrorCode.AUTHENTICATION_ERROR
    if status == 403:
        return ErrorCode.PERMISSION_ERROR
    if status in (400, 422):
        return ErrorCode.INVALID_REQUEST_ERROR
    if status == 404:
        return ErrorCode.NOT_FOUND_ERROR
    if status == 429:
        return ErrorCode.RATE_LIMIT_ERROR
    if status >= 500:
        return ErrorCode.API_ERROR
    return ErrorCode.UNKNOWN_ERROR
