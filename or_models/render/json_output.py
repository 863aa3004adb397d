"""Full records as a pretty-printed JSON array."""

from __future__ import annotations

import json
from typing import Sequence

from ..base.dto import ModelRecord


def render_json(models: Sequence[ModelRecord]) -> str:
    return json.dumps([m.to_dict() for m in models], ensure_ascii=False, indent=2)
