"""Output encodings for model records.

``render`` dispatches on the output format name used by the CLI
(``table``, ``json``, ``csv``, ``md``, ``md-verbose``); unknown names fall
back to the table.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..base.dto import ModelRecord
from .age import human_age
from .csv_output import render_csv
from .json_output import render_json
from .markdown import render_markdown
from .table import render_table


def render(
    models: Sequence[ModelRecord],
    output: str = "table",
    *,
    invert_price: bool = False,
    long_ids: bool = False,
    now: Optional[float] = None,
) -> str:
    """Encode ``models`` in the requested ``output`` format."""
    if output == "json":
        return render_json(models)
    if output == "csv":
        return render_csv(models, invert_price=invert_price)
    if output in ("md", "md-verbose"):
        return render_markdown(models, verbose=output == "md-verbose", invert_price=invert_price, now=now)
    return render_table(models, invert_price=invert_price, long_ids=long_ids, now=now)


__all__ = [
    "render",
    "render_table",
    "render_json",
    "render_csv",
    "render_markdown",
    "human_age",
]
