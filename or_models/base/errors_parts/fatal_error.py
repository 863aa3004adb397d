"""Raised when no valid catalog data can be obtained by any path."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .explorer_error import ExplorerError


@dataclass
class FatalError(ExplorerError):
    """Network fetch and stale-cache fallback both failed."""

    code: ErrorCode = ErrorCode.UNAVAILABLE
    message: str = "could not read fallback cache"
    raw: Optional[BaseException] = None


__all__ = ["FatalError"]
