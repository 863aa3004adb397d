"""Top-level listing document: ``{"data": [ModelRecord, ...]}``.

This is the shape of both the API response body and the cache file.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, model_validator

from .model_record import ModelRecord


class ModelsListing(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: List[ModelRecord]

    @model_validator(mode="after")
    def _unique_ids(self) -> "ModelsListing":
        """Ids must be unique within one batch."""
        dupes = sorted(mid for mid, n in Counter(m.id for m in self.data).items() if n > 1)
        if dupes:
            raise ValueError(f"duplicate model ids: {', '.join(dupes)}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"data": [m.to_dict() for m in self.data]}

    @classmethod
    def from_records(cls, records: List[ModelRecord]) -> "ModelsListing":
        return cls(data=list(records))
