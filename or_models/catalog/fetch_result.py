"""
Three-branch outcome of a catalog fetch.

``FRESH``
    Records from a young cache or from the network.
``STALE``
    The network path failed; records come from an expired cache.
``UNAVAILABLE``
    Neither the network nor any cache produced valid records.

Callers that need records call :meth:`FetchResult.require`, which turns
``UNAVAILABLE`` into a :class:`~or_models.base.errors.FatalError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..base.dto import ModelRecord
from ..base.errors import ExplorerError, FatalError


class FetchStatus(str, Enum):
    FRESH = "fresh"
    STALE = "stale"
    UNAVAILABLE = "unavailable"


class FetchSource(str, Enum):
    CACHE = "cache"
    NETWORK = "network"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of :func:`~or_models.catalog.fetcher.fetch_models`.

    Attributes:
        status: Which branch produced the result.
        records: Validated records (empty when unavailable).
        source: Where the records came from; ``None`` when unavailable.
        error: Last absorbed error, if any (the network failure for ``STALE``).
    """

    status: FetchStatus
    records: List[ModelRecord] = field(default_factory=list)
    source: Optional[FetchSource] = None
    error: Optional[ExplorerError] = None

    @classmethod
    def fresh(cls, records: List[ModelRecord], source: FetchSource) -> "FetchResult":
        return cls(status=FetchStatus.FRESH, records=list(records), source=source)

    @classmethod
    def stale(cls, records: List[ModelRecord], error: Optional[ExplorerError]) -> "FetchResult":
        return cls(status=FetchStatus.STALE, records=list(records), source=FetchSource.CACHE, error=error)

    @classmethod
    def unavailable(cls, error: Optional[ExplorerError]) -> "FetchResult":
        return cls(status=FetchStatus.UNAVAILABLE, error=error)

    @property
    def ok(self) -> bool:
        return self.status is not FetchStatus.UNAVAILABLE

    def require(self) -> List[ModelRecord]:
        """Return the records or raise :class:`FatalError` when unavailable."""
        if self.ok:
            return self.records
        raise FatalError(raw=self.error)


__all__ = ["FetchResult", "FetchSource", "FetchStatus"]
