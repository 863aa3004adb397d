"""Raised when no cache file exists yet (expected on first run)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .explorer_error import ExplorerError


@dataclass
class CacheMissError(ExplorerError):
    """No cache file at the configured path."""

    code: ErrorCode = ErrorCode.NOT_FOUND
    message: str = "cache file not found"
    raw: Optional[BaseException] = None
    path: Optional[str] = None


__all__ = ["CacheMissError"]
