"""Structural validation failure raised by the schema validator."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .error_code import ErrorCode
from .explorer_error import ExplorerError


@dataclass(frozen=True)
class Violation:
    """One violated field of the expected record shape.

    Attributes:
        location: Dotted path to the offending value (e.g. ``data.3.pricing.prompt``).
        message: Validator message.
        type: Machine-readable violation kind (pydantic error type).
    """

    location: str
    message: str
    type: str = "value_error"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.location}: {self.message}"


@dataclass
class StructuralValidationError(ExplorerError):
    """Decoded JSON does not match the expected listing shape."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "data structure does not match expected schema"
    raw: Optional[BaseException] = None
    violations: List[Violation] = field(default_factory=list)

    def describe(self, limit: int = 10) -> str:
        """Return a multi-line summary listing at most ``limit`` violations."""
        lines = [str(self)]
        lines.extend(f"  - {v}" for v in self.violations[:limit])
        hidden = len(self.violations) - limit
        if hidden > 0:
            lines.append(f"  ... and {hidden} more")
        return "\n".join(lines)


__all__ = ["StructuralValidationError", "Violation"]
