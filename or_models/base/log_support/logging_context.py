"""Structured logging context object for catalog events.

:class:`LogContext` carries the fields shared by every event of one
invocation (where the catalog comes from and where it is cached) so call sites
do not repeat them.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for catalog logging events."""

    api_url: Optional[str] = None
    cache_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


__all__ = ["LogContext"]
