"""Raised when the cache file exists but cannot be read or validated."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .explorer_error import ExplorerError


@dataclass
class CacheCorruptError(ExplorerError):
    """Cache content is unreadable, not JSON, or fails validation.

    ``raw`` holds the underlying ``OSError``, ``ValueError`` or
    :class:`StructuralValidationError`.
    """

    code: ErrorCode = ErrorCode.CORRUPT
    message: str = "cache file is corrupt"
    raw: Optional[BaseException] = None
    path: Optional[str] = None


__all__ = ["CacheCorruptError"]
