"""
Comma-separated output.

Id and name are always double-quoted (inner quotes doubled); prices, context
length and the creation timestamp are written raw; capability columns are
lowercase ``true``/``false``.
"""

from __future__ import annotations

from typing import List, Sequence

from ..base.dto import ModelRecord
from .columns import capability_flags, completion_price, prompt_price


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _bool(flag: bool) -> str:
    return "true" if flag else "false"


def csv_headers(invert_price: bool) -> List[str]:
    return [
        "id",
        "name",
        "prompt_tokens_per_dollar" if invert_price else "prompt_dollar_per_million",
        "completion_tokens_per_dollar" if invert_price else "completion_dollar_per_million",
        "context_length",
        "created_unix",
        "supports_reasoning",
        "supports_tools",
        "supports_response_format",
        "supports_structured_output",
    ]


def render_csv(models: Sequence[ModelRecord], *, invert_price: bool = False) -> str:
    lines = [",".join(csv_headers(invert_price))]
    for m in models:
        flags = capability_flags(m)
        row = [
            _quote(m.id),
            _quote(m.name),
            prompt_price(m, invert_price),
            completion_price(m, invert_price),
            str(m.context_length),
            str(m.created),
            _bool(flags.reasoning),
            _bool(flags.tools),
            _bool(flags.response_format),
            _bool(flags.structured_output),
        ]
        lines.append(",".join(row))
    return "\n".join(lines)
