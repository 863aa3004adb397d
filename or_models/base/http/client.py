"""Shared HTTP client pool.

Purpose:
    Provide a centralized pool of reusable ``httpx.Client`` instances so the
    catalog fetcher does not allocate a client per call. Timeouts come from
    :class:`~or_models.config.ExplorerConfig`; no numeric literals live here.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url``, ``purpose`` and
      timeout. Purposes allow distinct pools (e.g., "catalog").
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

# Internal cache keyed by (base_url, purpose, timeout)
_CLIENTS: Dict[Tuple[Optional[str], str, float], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str, timeout: float) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL to associate with the client. When
            provided, it is set on the client so relative requests can be used
            by callers. ``None`` groups clients under a shared key.
        purpose: A short string discriminating separate pools.
        timeout: Request timeout in seconds applied to every call.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose, timeout)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        headers = {"Accept": "application/json"}
        if base_url:
            client = httpx.Client(base_url=base_url, timeout=timeout, headers=headers)
        else:
            client = httpx.Client(timeout=timeout, headers=headers)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # pool teardown failures at exit are not actionable
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
