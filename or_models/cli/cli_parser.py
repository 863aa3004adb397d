"""CLI parser construction for or-models.

This module wires argument shapes only. Numeric bounds are validated here, at
the configuration boundary, so the filter engine never sees malformed input.
Execution lives in ``cli_actions``.
"""

from __future__ import annotations

import argparse
from decimal import Decimal, InvalidOperation

from .. import __version__
from ..config.defaults import DEFAULT_OUTPUT_FORMAT, DEFAULT_SORT_KEY, OUTPUT_FORMATS, SORT_KEYS


def _price_arg(value: str) -> Decimal:
    """Parse a per-token price bound (e.g. ``0.000002``) as a finite decimal."""
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"invalid price: {value!r}") from exc
    if not parsed.is_finite():
        raise argparse.ArgumentTypeError(f"invalid price: {value!r}")
    return parsed


def _context_arg(value: str) -> int:
    """Parse a non-negative context length bound."""
    try:
        parsed = int(value.strip().replace("_", "").replace(",", ""))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid context length: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"context length must be >= 0: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser.

    ``--help``/``-h`` and ``--version``/``-v`` print and exit with status 0
    before any fetch happens.
    """
    p = argparse.ArgumentParser(
        prog="or-models",
        description="OpenRouter Model Explorer: fetch, filter, sort, and display models from OpenRouter.",
    )
    p.add_argument("search_term", nargs="?", default=None, help="Substring matched against id, name, or description.")
    p.add_argument("-v", "--version", action="version", version=__version__, help="Show version.")

    out = p.add_argument_group("output")
    out.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT}).",
    )
    out.add_argument(
        "--sort-by",
        default=DEFAULT_SORT_KEY,
        metavar="FIELD",
        help=f"Sort by: {', '.join(SORT_KEYS)} (default: {DEFAULT_SORT_KEY}). Unknown fields leave the order unchanged.",
    )
    out.add_argument("--desc", action="store_true", help="Sort in descending order.")
    out.add_argument(
        "--invert-price",
        action="store_true",
        help="Show price as tokens per dollar instead of dollars per million tokens.",
    )
    out.add_argument("--long", action="store_true", help="Do not truncate long model ids in the table.")
    out.add_argument(
        "--group-by-provider",
        action="store_true",
        help="Keep models of the same provider together (sort order kept within each provider).",
    )
    out.add_argument("--force-refresh", action="store_true", help="Force a fresh download of the model list.")
    out.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Diagnostics verbosity on stderr (DEBUG, INFO, WARNING, ERROR).",
    )

    flt = p.add_argument_group("filtering")
    flt.add_argument("--free", action="store_true", help="Show only free models.")
    flt.add_argument("--min-prompt-price", type=_price_arg, default=None, metavar="PRICE",
                     help="Minimum prompt price per token.")
    flt.add_argument("--max-prompt-price", type=_price_arg, default=None, metavar="PRICE",
                     help="Maximum prompt price per token.")
    flt.add_argument("--min-context", type=_context_arg, default=None, metavar="LENGTH",
                     help="Minimum context length.")
    flt.add_argument("--max-context", type=_context_arg, default=None, metavar="LENGTH",
                     help="Maximum context length.")
    flt.add_argument("--supports-reasoning", action="store_true", help="Only models that support reasoning.")
    flt.add_argument("--supports-tools", action="store_true", help="Only models that support tool use.")
    flt.add_argument("--supports-structured-output", action="store_true",
                     help="Only models that support structured output.")
    flt.add_argument("--supports-response-format", action="store_true",
                     help="Only models that support response format (JSON mode).")
    return p


__all__ = ["build_parser"]
