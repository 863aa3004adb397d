"""
OpenRouter: fetch the model catalog with cache and stale fallback.

Behavior
- Serves the cached listing when it is younger than ``cache_ttl_hours`` and no
  refresh was forced.
- Otherwise issues one ``GET`` to ``config.api_url`` (the public listing needs
  no API key), validates the body and persists it to the cache (best effort).
- If the request or validation fails, falls back to whatever cache exists,
  regardless of age.

Every branch is visible in the returned :class:`FetchResult`; absorbed errors
are logged as structured events and never raised. Only the caller decides
whether ``UNAVAILABLE`` is fatal (see :meth:`FetchResult.require`).

Ownership
- This module is the only reader and writer of the :class:`CacheStore`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..base.dto import ModelRecord
from ..base.errors import (
    CacheCorruptError,
    CacheMissError,
    ExplorerError,
    NetworkError,
    StructuralValidationError,
    classify_exception,
)
from ..base.errors_parts.classification import code_for_status
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..config import ExplorerConfig
from .cache_store import CacheStore
from .fetch_result import FetchResult, FetchSource
from .validation import validate_listing

PURPOSE = "catalog"

logger = get_logger(__name__)


def _fetch_via_http(client: httpx.Client, url: str) -> List[ModelRecord]:
    """Fetch and validate the listing.

    Raises:
        NetworkError: Malformed URL, transport failure, timeout or non-2xx status.
        StructuralValidationError: Body is not JSON or has the wrong shape.
    """
    try:
        resp = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(code=classify_exception(exc), message=f"request failed: {exc}", raw=exc) from exc
    if not resp.is_success:
        raise NetworkError(
            code=code_for_status(resp.status_code),
            message=f"HTTP error! status: {resp.status_code}",
            status_code=resp.status_code,
        )
    try:
        payload = resp.json()
    except ValueError as exc:
        raise StructuralValidationError(message=f"response body is not valid JSON: {exc}", raw=exc) from exc
    return validate_listing(payload)


def _read_fresh_cache(
    store: CacheStore, ttl_seconds: float, ctx: LogContext, now: Optional[float]
) -> Optional[List[ModelRecord]]:
    """Return cached records when the cache is younger than ``ttl_seconds``.

    Missing and corrupt caches both return ``None``; a miss is logged at debug
    level, corruption as a warning.
    """
    try:
        age = store.age_seconds(now)
        if age >= ttl_seconds:
            normalized_log_event(
                logger, "catalog.cache.expired", ctx, phase="cache", level=logging.DEBUG, age_seconds=round(age, 1)
            )
            return None
        batch = store.read(now)
    except CacheMissError:
        normalized_log_event(logger, "catalog.cache.miss", ctx, phase="cache", level=logging.DEBUG)
        return None
    except CacheCorruptError as exc:
        normalized_log_event(
            logger,
            "catalog.cache.corrupt",
            ctx,
            phase="cache",
            error_code=exc.code.value,
            level=logging.WARNING,
            error=exc.message,
        )
        return None
    normalized_log_event(
        logger,
        "catalog.cache.hit",
        ctx,
        phase="cache",
        count=len(batch.records),
        age_seconds=round(batch.age_seconds, 1),
    )
    return batch.records


def _persist(store: CacheStore, records: List[ModelRecord], ctx: LogContext) -> None:
    """Write ``records`` to the cache; failures are logged, never raised."""
    try:
        store.write(records)
    except OSError as exc:
        normalized_log_event(
            logger,
            "catalog.cache.write_failed",
            ctx,
            phase="cache",
            error_code=classify_exception(exc).value,
            level=logging.WARNING,
            error=str(exc),
        )


def _log_fetch_failure(exc: ExplorerError, ctx: LogContext) -> None:
    fields = {"error": exc.message}
    if isinstance(exc, StructuralValidationError):
        fields["detail"] = exc.describe()
        fields["violation_count"] = len(exc.violations)
    if isinstance(exc, NetworkError):
        fields["status_code"] = exc.status_code
    normalized_log_event(
        logger,
        "catalog.fetch.failed",
        ctx,
        phase="network",
        error_code=exc.code.value,
        level=logging.WARNING,
        **fields,
    )


def _stale_fallback(store: CacheStore, cause: ExplorerError, ctx: LogContext, now: Optional[float]) -> FetchResult:
    """Serve the cache regardless of age, or report exhaustion."""
    try:
        batch = store.read(now)
    except (CacheMissError, CacheCorruptError) as exc:
        normalized_log_event(
            logger,
            "catalog.fallback.exhausted",
            ctx,
            phase="fallback",
            error_code=exc.code.value,
            level=logging.ERROR,
            error=exc.message,
        )
        return FetchResult.unavailable(cause)
    normalized_log_event(
        logger,
        "catalog.fallback.stale",
        ctx,
        phase="fallback",
        error_code=cause.code.value,
        level=logging.WARNING,
        count=len(batch.records),
        age_seconds=round(batch.age_seconds, 1),
    )
    return FetchResult.stale(batch.records, cause)


def fetch_models(
    config: ExplorerConfig,
    *,
    force_refresh: bool = False,
    client: Optional[httpx.Client] = None,
    store: Optional[CacheStore] = None,
    now: Optional[float] = None,
) -> FetchResult:
    """Return the model catalog, preferring a fresh cache over the network.

    Parameters
    ----------
    config: ExplorerConfig
        Endpoint, cache location, expiry and timeout.
    force_refresh: bool
        Skip the fresh-cache branch and always hit the network first.
    client: Optional[httpx.Client]
        HTTP client to use; defaults to the pooled client for ``config``.
    store: Optional[CacheStore]
        Cache store to use; defaults to one at ``config.cache_path``.
    now: Optional[float]
        Wall-clock override (epoch seconds) for age computation.

    Returns
    -------
    FetchResult
        ``FRESH`` (cache or network), ``STALE`` or ``UNAVAILABLE``.
    """
    store = store or CacheStore(config.cache_path)
    ctx = LogContext(api_url=config.api_url, cache_path=str(store.path))

    if not force_refresh:
        cached = _read_fresh_cache(store, config.cache_ttl_seconds, ctx, now)
        if cached is not None:
            return FetchResult.fresh(cached, FetchSource.CACHE)

    http = client or get_httpx_client(None, PURPOSE, config.http_timeout_seconds)
    normalized_log_event(logger, "catalog.fetch.start", ctx, phase="network", forced=force_refresh or None)
    try:
        records = _fetch_via_http(http, config.api_url)
    except (NetworkError, StructuralValidationError) as exc:
        _log_fetch_failure(exc, ctx)
        return _stale_fallback(store, exc, ctx, now)

    normalized_log_event(logger, "catalog.fetch.ok", ctx, phase="network", count=len(records))
    _persist(store, records, ctx)
    return FetchResult.fresh(records, FetchSource.NETWORK)


__all__ = ["fetch_models"]
