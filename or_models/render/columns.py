"""Column helpers shared by the tabular encodings."""

from __future__ import annotations

from typing import NamedTuple

from ..base.dto import ModelRecord
from ..catalog.filters import (
    REASONING_TOKENS,
    RESPONSE_FORMAT_TOKENS,
    STRUCTURED_OUTPUT_TOKENS,
    TOOLS_TOKENS,
)
from ..catalog.pricing import format_price

CHECK = "✅"


class CapabilityFlags(NamedTuple):
    reasoning: bool
    tools: bool
    response_format: bool
    structured_output: bool


def capability_flags(model: ModelRecord) -> CapabilityFlags:
    return CapabilityFlags(
        reasoning=model.supports_any(REASONING_TOKENS),
        tools=model.supports_any(TOOLS_TOKENS),
        response_format=model.supports_any(RESPONSE_FORMAT_TOKENS),
        structured_output=model.supports_any(STRUCTURED_OUTPUT_TOKENS),
    )


def prompt_price(model: ModelRecord, invert: bool) -> str:
    return format_price(model.pricing.prompt, invert, model.id)


def completion_price(model: ModelRecord, invert: bool) -> str:
    return format_price(model.pricing.completion, invert, model.id)


def prompt_header(invert: bool) -> str:
    return "Prompt (toks/$)" if invert else "Prompt ($/M)"


def completion_header(invert: bool, short: bool = True) -> str:
    label = "Compl." if short else "Completion"
    return f"{label} (toks/$)" if invert else f"{label} ($/M)"
