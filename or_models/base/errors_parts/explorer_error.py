"""
Structured explorer error exception type.

Base class of the taxonomy: every failure the catalog pipeline raises carries
a normalized `ErrorCode` for consistent fallback handling and structured
logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ExplorerError(Exception):
    """Represents a structured explorer error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}"


__all__ = ["ExplorerError"]
