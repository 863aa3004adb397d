"""OpenRouter Model Explorer CLI (package entrypoint).

This package wires argument parsing to the action handler kept in a small,
focused module. It performs no catalog logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional

import httpx

from ..base.logging import LOG_LEVEL_ENV, configure_logger
from ..config import load_config
from .cli_actions import handle_list
from .cli_parser import build_parser


def main(
    argv: Optional[list[str]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.Client] = None,
) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    env: Optional[Mapping[str, str]]
        Environment used to build the configuration; defaults to ``os.environ``.
    client: Optional[httpx.Client]
        HTTP client override (tests inject one backed by ``httpx.MockTransport``).

    Returns
    -------
    int
        Process exit code (0 success, 1 when no catalog data is obtainable).
        ``--help`` and ``--version`` exit through ``SystemExit(0)`` during parsing.
    """
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    env = os.environ if env is None else env
    configure_logger(level=args.log_level or env.get(LOG_LEVEL_ENV) or "INFO", json_mode=False)
    config = load_config(env)
    return handle_list(args, config, client=client)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
