"""Raised when the model listing request fails (status or transport)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .explorer_error import ExplorerError


@dataclass
class NetworkError(ExplorerError):
    """Non-2xx response or transport failure talking to the listing endpoint."""

    code: ErrorCode = ErrorCode.TRANSPORT
    message: str = "request failed"
    raw: Optional[BaseException] = None
    status_code: Optional[int] = None


__all__ = ["NetworkError"]
