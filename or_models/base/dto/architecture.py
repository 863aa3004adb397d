"""Architecture block of a model record (passed through, never computed on)."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class ArchitectureDTO(BaseModel):
    """Input/output modalities and tokenizer information."""

    model_config = ConfigDict(frozen=True)

    modality: StrictStr
    input_modalities: List[StrictStr]
    output_modalities: List[StrictStr]
    tokenizer: StrictStr
    instruct_type: Optional[StrictStr]
