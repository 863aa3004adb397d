"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping and ``httpx``
exception mapping so that every absorbed failure can be logged with a stable
``error_code``.
"""
from __future__ import annotations

import json
from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .explorer_error import ExplorerError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def code_for_status(status: int) -> ErrorCode:
    """Return the error code for an HTTP status, ``HTTP_ERROR`` when unmapped."""
    return _HTTP_STATUS_MAP.get(status, ErrorCode.HTTP_ERROR)


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ExplorerError passthrough.
        2. Timeout exceptions (``httpx`` and builtin).
        3. HTTP status mapping.
        4. ``httpx`` malformed URLs and transport failures.
        5. JSON decoding and filesystem errors.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ExplorerError):
        return exc.code
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    if isinstance(exc, httpx.InvalidURL):
        return ErrorCode.VALIDATION
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSPORT
    if isinstance(exc, json.JSONDecodeError):
        return ErrorCode.VALIDATION
    if isinstance(exc, FileNotFoundError):
        return ErrorCode.NOT_FOUND
    if isinstance(exc, OSError):
        return ErrorCode.IO
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
