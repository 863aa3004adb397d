"""
Effective price rules shared by filtering, sorting and rendering.

Prices are decimal strings in USD per token. They are converted with
``decimal.Decimal`` so that values such as ``"0.000001"`` compare exactly.

The auto-router meta-model (``openrouter/auto``) has no fixed price: its
effective price is ``Decimal("Infinity")``. It therefore never satisfies a
zero-price test, sorts after every priced model in ascending order, and
renders as ``n/a``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..base.dto import ModelRecord
from ..config.defaults import AUTO_ROUTER_MODEL_ID

INFINITE_PRICE = Decimal("Infinity")
TOKENS_PER_MILLION = Decimal(1_000_000)
NOT_APPLICABLE = "n/a"
UNLIMITED = "∞"
# Integer digits beyond which prices are shown in exponent notation.
MAX_FIXED_DIGITS = 15


def is_auto_router(model_id: str) -> bool:
    return model_id == AUTO_ROUTER_MODEL_ID


def effective_price(price: str, model_id: str) -> Decimal:
    """Return the comparable price for ``price`` of model ``model_id``."""
    if is_auto_router(model_id):
        return INFINITE_PRICE
    return Decimal(price.strip())


def effective_prompt_price(model: ModelRecord) -> Decimal:
    return effective_price(model.pricing.prompt, model.id)


def effective_completion_price(model: ModelRecord) -> Decimal:
    return effective_price(model.pricing.completion, model.id)


def _fixed(value: Decimal, places: Decimal) -> Decimal | None:
    """Round ``value`` to ``places``; ``None`` when it needs exponent notation."""
    if value.adjusted() >= MAX_FIXED_DIGITS:
        return None
    return value.quantize(places, rounding=ROUND_HALF_UP)


def format_price(price: str, invert: bool, model_id: str) -> str:
    """Render a per-token price for display.

    - auto-router: ``n/a``
    - zero: ``0.00`` (``∞`` when inverted)
    - default: USD per million tokens, two decimals (``"0.15"``)
    - inverted: millions of tokens per USD, grouped integer (``"6,667 M"``)

    Values with ``MAX_FIXED_DIGITS`` or more integer digits fall back to
    exponent notation (``"1.00E+36"``).
    """
    if is_auto_router(model_id):
        return NOT_APPLICABLE
    value = Decimal(price.strip())
    if value == 0:
        return UNLIMITED if invert else "0.00"
    if invert:
        millions = 1 / value / TOKENS_PER_MILLION
        rounded = _fixed(millions, Decimal(1))
        return f"{millions:.2E} M" if rounded is None else f"{rounded:,} M"
    per_million = value * TOKENS_PER_MILLION
    rounded = _fixed(per_million, Decimal("0.01"))
    return f"{per_million:.2E}" if rounded is None else f"{rounded:.2f}"


__all__ = [
    "INFINITE_PRICE",
    "NOT_APPLICABLE",
    "effective_price",
    "effective_prompt_price",
    "effective_completion_price",
    "format_price",
    "is_auto_router",
]
