"""
Record filtering.

All active predicates combine with logical AND and the input order is
preserved. An option left at its default (``None``/``False``) adds no
constraint. Bounds are inclusive. Numeric bounds are already parsed by the
caller; this module never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, FrozenSet, Iterable, List, Optional

from ..base.dto import ModelRecord
from .pricing import effective_prompt_price

REASONING_TOKENS: FrozenSet[str] = frozenset({"reasoning", "include_reasoning"})
TOOLS_TOKENS: FrozenSet[str] = frozenset({"tools", "tool_choice"})
STRUCTURED_OUTPUT_TOKENS: FrozenSet[str] = frozenset({"structured_outputs"})
RESPONSE_FORMAT_TOKENS: FrozenSet[str] = frozenset({"response_format"})

Predicate = Callable[[ModelRecord], bool]


@dataclass(frozen=True)
class FilterOptions:
    """Recognized filter criteria.

    Attributes:
        search_term: Case-insensitive substring matched against id, name or description.
        free: Keep only records whose effective prompt price is exactly zero.
        min_prompt_price / max_prompt_price: Inclusive bounds on the effective prompt price.
        min_context / max_context: Inclusive bounds on ``context_length``.
        supports_*: Require at least one of the matching capability tokens.
    """

    search_term: Optional[str] = None
    free: bool = False
    min_prompt_price: Optional[Decimal] = None
    max_prompt_price: Optional[Decimal] = None
    min_context: Optional[int] = None
    max_context: Optional[int] = None
    supports_reasoning: bool = False
    supports_tools: bool = False
    supports_structured_output: bool = False
    supports_response_format: bool = False


def _matches_search(term: str) -> Predicate:
    needle = term.lower()

    def pred(m: ModelRecord) -> bool:
        return needle in m.id.lower() or needle in m.name.lower() or needle in m.description.lower()

    return pred


def _supports(tokens: FrozenSet[str]) -> Predicate:
    return lambda m: m.supports_any(tokens)


def build_predicates(options: FilterOptions) -> List[Predicate]:
    """Return one predicate per active option, in a fixed order."""
    preds: List[Predicate] = []
    if options.search_term:
        preds.append(_matches_search(options.search_term))
    if options.free:
        preds.append(lambda m: effective_prompt_price(m) == 0)
    if options.min_prompt_price is not None:
        low = options.min_prompt_price
        preds.append(lambda m: effective_prompt_price(m) >= low)
    if options.max_prompt_price is not None:
        high = options.max_prompt_price
        preds.append(lambda m: effective_prompt_price(m) <= high)
    if options.min_context is not None:
        min_ctx = options.min_context
        preds.append(lambda m: m.context_length >= min_ctx)
    if options.max_context is not None:
        max_ctx = options.max_context
        preds.append(lambda m: m.context_length <= max_ctx)
    if options.supports_reasoning:
        preds.append(_supports(REASONING_TOKENS))
    if options.supports_tools:
        preds.append(_supports(TOOLS_TOKENS))
    if options.supports_structured_output:
        preds.append(_supports(STRUCTURED_OUTPUT_TOKENS))
    if options.supports_response_format:
        preds.append(_supports(RESPONSE_FORMAT_TOKENS))
    return preds


def filter_models(models: Iterable[ModelRecord], options: FilterOptions) -> List[ModelRecord]:
    """Return the records satisfying every active option, order preserved."""
    preds = build_predicates(options)
    return [m for m in models if all(p(m) for p in preds)]


__all__ = [
    "FilterOptions",
    "filter_models",
    "build_predicates",
    "REASONING_TOKENS",
    "TOOLS_TOKENS",
    "STRUCTURED_OUTPUT_TOKENS",
    "RESPONSE_FORMAT_TOKENS",
]
