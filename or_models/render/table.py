"""Plain-text table for terminals."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..base.dto import ModelRecord
from ..config.defaults import TABLE_ID_WIDTH, TABLE_ID_WIDTH_LONG
from .age import human_age
from .columns import CHECK, capability_flags, completion_header, completion_price, prompt_header, prompt_price

SEPARATOR = " | "
EMPTY_CELL = "  "


def _check(flag: bool) -> str:
    return CHECK if flag else EMPTY_CELL


def render_table(
    models: Sequence[ModelRecord],
    *,
    invert_price: bool = False,
    long_ids: bool = False,
    now: Optional[float] = None,
) -> str:
    """Render one header line plus one line per record.

    Ids are cut at 45 characters (80 with ``long_ids``) and padded to 45.
    """
    id_limit = TABLE_ID_WIDTH_LONG if long_ids else TABLE_ID_WIDTH
    headers = [
        "ID",
        prompt_header(invert_price),
        completion_header(invert_price),
        "Context",
        "Age",
        "Reason",
        "Tools",
        "JSON",
        "Schema",
    ]
    lines: List[str] = [SEPARATOR.join(headers)]
    for m in models:
        flags = capability_flags(m)
        row = [
            m.id[:id_limit].ljust(TABLE_ID_WIDTH),
            prompt_price(m, invert_price).rjust(6),
            completion_price(m, invert_price).rjust(6),
            f"{m.context_length:,}".rjust(10),
            human_age(m.created, now).rjust(7),
            _check(flags.reasoning),
            _check(flags.tools),
            _check(flags.response_format),
            _check(flags.structured_output),
        ]
        lines.append(SEPARATOR.join(row))
    return "\n".join(lines)
