"""Markdown table, optionally verbose (adds name and prompt price)."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..base.dto import ModelRecord
from .age import human_age
from .columns import CHECK, capability_flags, completion_header, completion_price, prompt_header, prompt_price


def _row(cells: Sequence[str]) -> str:
    return f"| {' | '.join(cells)} |"


def _check(flag: bool) -> str:
    return CHECK if flag else " "


def render_markdown(
    models: Sequence[ModelRecord],
    *,
    verbose: bool = False,
    invert_price: bool = False,
    now: Optional[float] = None,
) -> str:
    headers: List[str] = ["ID"]
    if verbose:
        headers += ["Name", prompt_header(invert_price)]
    headers += [
        completion_header(invert_price, short=False),
        "Context",
        "Age",
        "Reason",
        "Tools",
        "JSON",
        "Schema",
    ]
    lines = [_row(headers), _row(["-" * len(h) for h in headers])]
    for m in models:
        flags = capability_flags(m)
        cells: List[str] = [m.id]
        if verbose:
            cells += [m.name, prompt_price(m, invert_price)]
        cells += [
            completion_price(m, invert_price),
            f"{m.context_length:,}",
            human_age(m.created, now),
            _check(flags.reasoning),
            _check(flags.tools),
            _check(flags.response_format),
            _check(flags.structured_output),
        ]
        lines.append(_row(cells))
    return "\n".join(lines)
