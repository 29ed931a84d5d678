"""Timeout configuration for the shared HTTP clients.

The provider layer adds no timeout logic of its own: these values only
configure the pooled ``httpx.AsyncClient`` instances, so timeout semantics are
whatever httpx enforces for a request or a streamed read.

Supported environment variables (all optional, positive floats):
    LITE_TIMEOUT_HTTP_SECONDS     per-operation read/write/pool timeout
    LITE_TIMEOUT_CONNECT_SECONDS  connection establishment timeout
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds)."""

    http_timeout_seconds: float = 120.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`, reading env on first use."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is None:
        defaults = TimeoutConfig()
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_env_float("LITE_TIMEOUT_HTTP_SECONDS", defaults.http_timeout_seconds),
            connect_timeout_seconds=_parse_env_float(
                "LITE_TIMEOUT_CONNECT_SECONDS", defaults.connect_timeout_seconds
            ),
        )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached config so the next call re-reads the environment."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config"]
