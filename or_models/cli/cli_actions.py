"""CLI action handler for the explorer.

Purpose
-------
Run one invocation end to end: fetch (cache, network or stale fallback),
filter, sort, optionally group, render to stdout. This module has no
top-level side effects and is safe to import in tests.

Fallback & Error Semantics
--------------------------
- All recoverable failures are absorbed by the fetch orchestrator and logged.
- Only :class:`FatalError` (no data from any source) reaches this layer; it is
  logged and turned into exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

import httpx

from ..base.errors import FatalError
from ..base.logging import get_logger, log_event
from ..catalog.fetcher import fetch_models
from ..catalog.filters import FilterOptions, filter_models
from ..catalog.sorting import group_by_provider, sort_models
from ..config import ExplorerConfig
from ..render import render

logger = get_logger(__name__)


def filter_options_from_args(args: argparse.Namespace) -> FilterOptions:
    """Map parsed CLI arguments onto :class:`FilterOptions`."""
    return FilterOptions(
        search_term=args.search_term,
        free=args.free,
        min_prompt_price=args.min_prompt_price,
        max_prompt_price=args.max_prompt_price,
        min_context=args.min_context,
        max_context=args.max_context,
        supports_reasoning=args.supports_reasoning,
        supports_tools=args.supports_tools,
        supports_structured_output=args.supports_structured_output,
        supports_response_format=args.supports_response_format,
    )


def handle_list(
    args: argparse.Namespace,
    config: ExplorerConfig,
    *,
    client: Optional[httpx.Client] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Execute the listing pipeline for parsed ``args``.

    Returns
    -------
    int
        0 on success, 1 when no catalog data could be obtained.
    """
    out = out or sys.stdout
    result = fetch_models(config, force_refresh=args.force_refresh, client=client)
    try:
        models = result.require()
    except FatalError as exc:
        cause = exc.raw.message if exc.raw is not None else None
        log_event(logger, "cli.fatal", level=logging.ERROR, error=exc.message, cause=cause)
        return 1

    selected = filter_models(models, filter_options_from_args(args))
    ordered = sort_models(selected, args.sort_by, desc=args.desc)
    if args.group_by_provider:
        ordered = group_by_provider(ordered)
    log_event(
        logger,
        "cli.list",
        level=logging.DEBUG,
        status=result.status.value,
        total=len(models),
        shown=len(ordered),
        output=args.output,
    )
    print(render(ordered, args.output, invert_price=args.invert_price, long_ids=args.long), file=out)
    return 0


__all__ = ["handle_list", "filter_options_from_args"]
