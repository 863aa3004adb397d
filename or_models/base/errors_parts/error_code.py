"""
Normalized explorer error codes (taxonomy).

Values are lowercase snake_case and are emitted as ``error_code`` in
structured log events.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"
    SERVER_ERROR = "server_error"
    HTTP_ERROR = "http_error"
    TRANSPORT = "transport"
    IO = "io"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
