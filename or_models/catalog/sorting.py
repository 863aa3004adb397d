"""
Record ordering.

Sorting is stable in both directions: ``desc`` reverses the comparison, so
records with equal keys keep their input order either way. Python's
``sorted(..., reverse=True)`` already guarantees this. An unknown key returns
the records unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from ..base.dto import ModelRecord
from .pricing import effective_completion_price, effective_prompt_price

SORT_KEY_FUNCS: Dict[str, Callable[[ModelRecord], Any]] = {
    "prompt_price": effective_prompt_price,
    "completion_price": effective_completion_price,
    "context": lambda m: m.context_length,
    "created": lambda m: m.created,
    "name": lambda m: m.name.lower(),
}


def sort_models(models: Iterable[ModelRecord], sort_by: str, desc: bool = False) -> List[ModelRecord]:
    """Return ``models`` ordered by ``sort_by``.

    Keys: ``prompt_price``, ``completion_price`` (effective decimal price),
    ``context``, ``created`` and ``name`` (case-insensitive).
    """
    key = SORT_KEY_FUNCS.get(sort_by)
    if key is None:
        return list(models)
    return sorted(models, key=key, reverse=desc)


def group_by_provider(models: Iterable[ModelRecord]) -> List[ModelRecord]:
    """Make records of the same provider contiguous.

    Groups appear in order of their first record; the order inside each group
    is the input order, so a preceding sort is kept per provider.
    """
    groups: Dict[str, List[ModelRecord]] = {}
    for m in models:
        groups.setdefault(m.provider, []).append(m)
    return [m for group in groups.values() for m in group]


__all__ = ["sort_models", "group_by_provider", "SORT_KEY_FUNCS"]
