"""Pytest configuration for the providers test suite.

Fixtures here isolate process-wide state (config caches, pooled clients,
provider env vars) and provide httpx mock-transport helpers so adapter tests
never touch the network.
"""

from __future__ import annotations

import sqlite3
from typing import Any, AsyncIterator, Callable, Iterable, List, Optional, Sequence

import httpx
import pytest

from lite_providers.base.http import aclose_all_clients
from lite_providers.base.timeouts import reset_timeout_config
from lite_providers.config import reset_config_cache
from lite_providers.persistence import SCHEMA_SQL

_PROVIDER_ENV_PREFIXES = ("OPENAI", "ANTHROPIC", "OPENROUTER", "CUSTOM")
_PROVIDER_ENV_SUFFIXES = ("API_KEY", "BASE_URL", "ORGANIZATION", "MODEL")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear provider env vars and point the dotenv loader at a missing file."""
    for prefix in _PROVIDER_ENV_PREFIXES:
        for suffix in _PROVIDER_ENV_SUFFIXES:
            monkeypatch.delenv(f"{prefix}_{suffix}", raising=False)
    monkeypatch.delenv("LITE_PROVIDERS_CONFIG_FILE", raising=False)
    monkeypatch.setenv("LITE_PROVIDERS_DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    reset_timeout_config()
    yield
    reset_config_cache()
    reset_timeout_config()


@pytest.fixture()
async def pooled_clients() -> AsyncIterator[None]:
    """Close pooled clients created during a test."""
    yield
    await aclose_all_clients()


class TrackingStream(httpx.AsyncByteStream):
    """Async byte stream that records whether it was closed.

    ``fail_after`` raises ``httpx.ReadError`` once that many chunks were sent,
    simulating a connection dropped mid-stream.
    """

    def __init__(self, chunks: Iterable[bytes], fail_after: Optional[int] = None) -> None:
        self._chunks: List[bytes] = list(chunks)
        self._fail_after = fail_after
        self.sent = 0
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            if self._fail_after is not None and self.sent >= self._fail_after:
                raise httpx.ReadError("connection reset")
            self.sent += 1
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


def sse_body(*payloads: str, done: bool = True) -> bytes:
    lines = [f"data: {p}\n\n" for p in payloads]
    if done:
        lines.append("data: [DONE]\n\n")
    return "".join(lines).encode("utf-8")


@pytest.fixture()
def make_client() -> Callable[[Callable[[httpx.Request], Any]], httpx.AsyncClient]:
    """Build ``httpx.AsyncClient`` instances backed by ``httpx.MockTransport``."""
    created: List[httpx.AsyncClient] = []

    def _make(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        created.append(client)
        return client

    return _make


@pytest.fixture()
def tracking_stream() -> Callable[..., TrackingStream]:
    return TrackingStream


@pytest.fixture()
def sse() -> Callable[..., bytes]:
    return sse_body


class SqliteRowStore:
    """In-memory SQLite implementation of the ``RowStore`` protocol."""

    def __init__(self) -> None:
        self.conn = sqlite3.connect(":memory:")
        self.conn.row_factory = sqlite3.Row
        self.conn.executescript(SCHEMA_SQL)
        self.statements: List[str] = []

    async def get(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        self.statements.append(sql)
        rows = self.conn.execute(sql, tuple(params)).fetchall()
        self.conn.commit()
        return dict(rows[0]) if rows else None

    async def get_all(self, sql: str, params: Sequence[Any] = ()) -> List[dict]:
        self.statements.append(sql)
        return [dict(r) for r in self.conn.execute(sql, tuple(params)).fetchall()]

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> None:
        self.statements.append(sql)
        self.conn.execute(sql, tuple(params))
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()


@pytest.fixture()
def row_store() -> Iterable[SqliteRowStore]:
    store = SqliteRowStore()
    yield store
    store.close()
