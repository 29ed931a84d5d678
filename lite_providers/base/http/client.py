"""Shared HTTP client pool for providers.

Purpose:
    Keep a small pool of reusable ``httpx.AsyncClient`` instances so adapters
    do not open a new connection pool per call. Timeouts come exclusively
    from :func:`get_timeout_config`.

Lifecycle & cleanup:
    Clients are cached by ``(base_url, purpose)``. Async clients cannot be
    closed from an ``atexit`` hook, so applications (and tests) call
    :func:`aclose_all_clients` on shutdown. A pooled client is bound to the
    event loop that first used its connections; long-lived applications run
    a single loop.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.AsyncClient] = {}


def get_httpx_client(base_url: Optional[str] = None, purpose: str = "default") -> httpx.AsyncClient:
    """Return a pooled ``httpx.AsyncClient`` for the given base URL and purpose.

    Parameters:
        base_url: Optional base URL set on the client. ``None`` groups
            clients that are always called with absolute URLs.
        purpose: Short discriminator for separate pools (e.g. ``"openai"``).

    Returns:
        A reusable ``httpx.AsyncClient``.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is None or client.is_closed:
        timeout = get_timeout_config().to_httpx()
        client = httpx.AsyncClient(base_url=base_url, timeout=timeout) if base_url else httpx.AsyncClient(timeout=timeout)
        _CLIENTS[key] = client
    return client


async def aclose_all_clients() -> None:
    """Close and forget every pooled client."""
    clients = list(_CLIENTS.values())
    _CLIENTS.clear()
    for c in clients:
        await c.aclose()


__all__ = ["get_httpx_client", "aclose_all_clients"]
