"""
ModelRecord DTO: one catalog entry describing a model's capabilities and pricing.

Records are immutable once validated (``frozen=True``) and strictly typed:
numbers must be JSON integers, strings must be strings. Unknown keys sent by
the API are dropped.
"""

from __future__ import annotations

from decimal import Decimal
from typing import AbstractSet, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

from ...config.defaults import AUTO_ROUTER_MODEL_ID
from .architecture import ArchitectureDTO
from .pricing import PricingDTO
from .top_provider import TopProviderDTO


class ModelRecord(BaseModel):
    """A single model listing entry.

    Attributes:
        id: Stable model identifier (e.g. ``"anthropic/claude-sonnet-4"``).
        name: Human-friendly display name.
        description: Free-text description.
        context_length: Token capacity, never negative.
        created: Unix timestamp in seconds; ``0`` means unknown.
        pricing: Decimal-string prices.
        supported_parameters: Capability tokens (``tools``, ``reasoning``, ...).
        architecture: Opaque modality metadata.
        top_provider: Opaque provider limits.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    description: StrictStr
    context_length: StrictInt = Field(ge=0)
    created: StrictInt
    architecture: ArchitectureDTO
    pricing: PricingDTO
    top_provider: TopProviderDTO
    supported_parameters: List[StrictStr]
    hugging_face_id: Optional[StrictStr] = None
    canonical_slug: Optional[StrictStr] = None
    per_request_limits: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def _non_negative_prices(self) -> "ModelRecord":
        """Prices are non-negative except for the auto-router's ``-1``."""
        if self.id == AUTO_ROUTER_MODEL_ID:
            return self
        negative = [f for f in ("prompt", "completion") if Decimal(getattr(self.pricing, f).strip()) < 0]
        if negative:
            raise ValueError(f"negative {' and '.join(negative)} price for {self.id}")
        return self

    @property
    def provider(self) -> str:
        """Provider prefix of the id (the part before ``/``)."""
        return self.id.split("/", 1)[0] if "/" in self.id else ""

    def supports_any(self, tokens: AbstractSet[str]) -> bool:
        """Return True when any of ``tokens`` is a supported parameter."""
        return any(p in tokens for p in self.supported_parameters)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the fields that were present."""
        return self.model_dump(mode="json", exclude_unset=True)
