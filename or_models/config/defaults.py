"""or_models.config.defaults
=========================

Central place for small, stable default values used across the explorer.
These defaults can be overridden via environment variables or an external
configuration file (see :mod:`or_models.config`).

This module intentionally avoids importing from other explorer packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Remote catalog ----

# Public model listing endpoint (no API key required).
OPENROUTER_MODELS_URL = "https://openrouter.ai/api/v1/models"
# Baseline HTTP timeout for the listing request.
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

# ---- Cache ----

# Directory name under the XDG cache root (``~/.cache`` when unset).
CACHE_DIR_NAME = "or-models"
CACHE_FILE_NAME = "models.json"
# Cached listings younger than this are served without a network call.
CACHE_EXPIRATION_HOURS = 24.0

# ---- Pricing ----

# Auto-routing meta-model without a fixed price.
AUTO_ROUTER_MODEL_ID = "openrouter/auto"

# ---- CLI ----

OUTPUT_FORMATS = ("table", "json", "csv", "md", "md-verbose")
DEFAULT_OUTPUT_FORMAT = "table"
SORT_KEYS = ("prompt_price", "completion_price", "context", "created", "name")
DEFAULT_SORT_KEY = "created"
# Width of the id column in table output and the truncation limit with --long.
TABLE_ID_WIDTH = 45
TABLE_ID_WIDTH_LONG = 80
