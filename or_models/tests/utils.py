"""Shared builders for explorer tests.

Exports:
    - NOW: fixed wall clock (epoch seconds) passed as ``now=`` to age-aware code
    - raw_record: one listing entry as the API sends it
    - make_record: the same entry validated into a ``ModelRecord``
    - listing: wrap raw entries in a ``{"data": [...]}`` document
    - write_cache: place a listing document on disk with a chosen mtime
"""
from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from or_models.base.dto import ModelRecord

NOW = 1_750_000_000.0
HOUR = 3600.0


def raw_record(model_id: str = "acme/model-a", **overrides: Any) -> Dict[str, Any]:
    """Return one listing entry; ``pricing`` overrides are merged, others replace."""
    record: Dict[str, Any] = {
        "id": model_id,
        "canonical_slug": model_id,
        "hugging_face_id": None,
        "name": model_id.split("/")[-1].replace("-", " ").title(),
        "description": f"Description of {model_id}",
        "context_length": 8192,
        "created": 1_700_000_000,
        "architecture": {
            "modality": "text->text",
            "input_modalities": ["text"],
            "output_modalities": ["text"],
            "tokenizer": "Other",
            "instruct_type": None,
        },
        "pricing": {"prompt": "0.000001", "completion": "0.000002", "request": "0", "image": "0"},
        "top_provider": {"context_length": 8192, "max_completion_tokens": 4096, "is_moderated": False},
        "per_request_limits": None,
        "supported_parameters": ["max_tokens", "temperature"],
    }
    for key, value in overrides.items():
        if key == "pricing":
            record["pricing"] = {**record["pricing"], **value}
        else:
            record[key] = value
    return record


def make_record(model_id: str = "acme/model-a", **overrides: Any) -> ModelRecord:
    return ModelRecord.model_validate(raw_record(model_id, **overrides))


def listing(*records: Dict[str, Any]) -> Dict[str, Any]:
    return {"data": [copy.deepcopy(r) for r in records]}


def write_cache(path: Path, document: Any, *, mtime: Optional[float] = None) -> None:
    """Write ``document`` (JSON-encoded unless already text) and set its mtime."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = document if isinstance(document, str) else json.dumps(document)
    path.write_text(text, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
