"""
Pricing block of a model record.

Purpose
-------
Prices arrive as decimal strings (USD per token). They are kept as strings on
the DTO so the cache round-trips them byte-for-byte; consumers convert with
``decimal.Decimal`` (see :mod:`or_models.catalog.pricing`), never ``float``.

Validation
----------
``prompt`` and ``completion`` are required and must parse as finite
decimals. Sign is checked by :class:`ModelRecord`, which knows the model id
(only the auto-router may carry ``"-1"``); its special meaning is
applied by the pricing rules, not the schema. The remaining fields are
optional and their absence never fails validation.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class PricingDTO(BaseModel):
    """Per-unit costs as decimal strings."""

    model_config = ConfigDict(frozen=True)

    prompt: StrictStr
    completion: StrictStr
    request: Optional[StrictStr] = None
    image: Optional[StrictStr] = None
    web_search: Optional[StrictStr] = None
    internal_reasoning: Optional[StrictStr] = None
    input_cache_read: Optional[StrictStr] = None
    input_cache_write: Optional[StrictStr] = None

    @field_validator("prompt", "completion")
    @classmethod
    def _require_decimal(cls, value: str) -> str:
        """Reject price strings that are not finite decimal numbers."""
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"not a decimal price: {value!r}") from exc
        if not parsed.is_finite():
            raise ValueError(f"not a finite price: {value!r}")
        return value
