"""Limits advertised by the model's top provider (passed through)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt


class TopProviderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    context_length: Optional[StrictInt]
    max_completion_tokens: Optional[StrictInt]
    is_moderated: StrictBool
