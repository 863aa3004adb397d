"""or_models package

Read-only explorer for the OpenRouter model catalog.

Purpose:
    Fetch the public model listing, validate it, keep a local JSON cache with a
    time-based expiry and present the records through filtering, sorting and
    several output encodings. The command-line entrypoint lives in
    :mod:`or_models.cli`.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ExplorerError`, :class:`ErrorCode`
    - Pipeline: :func:`fetch_models`, :func:`filter_models`,
      :func:`sort_models`, :func:`render`
"""

__version__ = "0.2.0"

from .base.errors import ErrorCode, ExplorerError
from .catalog.fetcher import fetch_models
from .catalog.filters import FilterOptions, filter_models
from .catalog.sorting import sort_models
from .render import render

__all__ = [
    "__version__",
    "ErrorCode",
    "ExplorerError",
    "FilterOptions",
    "fetch_models",
    "filter_models",
    "sort_models",
    "render",
]
