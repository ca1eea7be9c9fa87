"""Exceptions raised by the Penpoint client."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    API = "api"
    NETWORK = "network"


class PenpointError(Exception):
    """Base exception for Penpoint client errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PenpointValidationError(PenpointError):
    """A required argument was missing or malformed. Raised before any request is sent."""

    kind = ErrorKind.VALIDATION


class PenpointTimeoutError(PenpointError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Request timeout after {timeout_ms}ms")


class PenpointApiError(PenpointError):
    """The API answered with a non-2xx status."""

    kind = ErrorKind.API

    def __init__(self, message: str, status: Optional[int] = None, response: Any = None) -> None:
        self.status = status
        self.response = response
        super().__init__(message)


class PenpointNetworkError(PenpointError):
    """No response could be obtained and retries are exhausted."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


__all__ = [
    "ErrorKind",
    "PenpointError",
    "PenpointValidationError",
    "PenpointTimeoutError",
    "PenpointApiError",
    "PenpointNetworkError",
]
