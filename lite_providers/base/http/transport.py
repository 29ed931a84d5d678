"""Transport helper shared by all provider adapters.

Purpose:
    Wrap every outbound vendor call with the same header injection, error
    normalization and SSE framing so adapters only translate payloads.

Header precedence (later wins on conflict):
    ``Content-Type: application/json`` -> adapter auth headers -> config
    custom headers -> per-call headers.

Error normalization:
    - Non-2xx: the body is parsed as JSON and the message taken from
      ``error.message`` or ``message``. A JSON body with neither yields
      ``"API request failed with status N"``; a non-JSON body yields the HTTP
      reason phrase (or that same default). One :class:`TransportError` is
      raised with the status code, provider type and raw body.
    - No response (connect/read failures, timeouts): :class:`TransportError`
      without a status code, wrapping the httpx exception.
    Vendor error JSON never reaches callers in any other form.

Resource model:
    ``stream_events`` opens one streaming response and guarantees it is
    closed when iteration finishes, is abandoned via ``aclose()``, or fails.
    No retries and no timeouts beyond the httpx client configuration.
"""

from __future__ import annotations

import json
import logging
from contextlib import aclosing
from typing import Any, AsyncIterator, Dict, Mapping, Optional

import httpx

from ..errors import TransportError
from ..logging import LogContext, get_logger, log_event
from ..streaming.sse import iter_sse_events
from .client import get_httpx_client


def extract_error_message(response: httpx.Response) -> str:
    """Derive a human-readable message from a non-2xx response body."""
    default = f"API request failed with status {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase or default
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if data.get("message"):
            return str(data["message"])
    return default


class ProviderTransport:
    """HTTP helper bound to one adapter's provider type and headers.

    Parameters:
        provider: Owning provider type, recorded on every raised error.
        auth_headers: Adapter authentication headers.
        custom_headers: Configuration-level extra headers.
        client: Optional ``httpx.AsyncClient``; defaults to the shared pool.
    """

    def __init__(
        self,
        provider: str,
        *,
        auth_headers: Optional[Mapping[str, str]] = None,
        custom_headers: Optional[Mapping[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self._auth_headers = dict(auth_headers or {})
        self._custom_headers = dict(custom_headers or {})
        self._client = client
        self._logger = logger or get_logger("lite_providers.http")

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client if self._client is not None else get_httpx_client(purpose=self.provider)

    def build_headers(self, extra_headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        headers |= self._auth_headers
        headers |= self._custom_headers
        if extra_headers:
            headers |= dict(extra_headers)
        return headers

    def _build_request(
        self,
        url: str,
        method: str,
        body: Any,
        extra_headers: Optional[Mapping[str, str]],
    ) -> httpx.Request:
        content = json.dumps(body) if body is not None else None
        return self.client.build_request(method, url, headers=self.build_headers(extra_headers), content=content)

    async def send(
        self,
        url: str,
        method: str = "GET",
        body: Any = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """Issue one request and return the (fully read) 2xx response.

        Raises:
            TransportError: on non-2xx status or network failure.
        """
        request = self._build_request(url, method, body, extra_headers)
        try:
            response = await self.client.send(request)
        except httpx.HTTPError as exc:
            raise self._network_error(exc, method, url) from exc
        if not response.is_success:
            raise self._status_error(response, method, url)
        return response

    async def send_json(
        self,
        url: str,
        method: str = "GET",
        body: Any = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Like :meth:`send`, but return the decoded JSON body.

        Raises:
            TransportError: also when a 2xx body is not valid JSON (e.g. an
                HTML page from a misconfigured base URL); the status is kept.
        """
        response = await self.send(url, method=method, body=body, extra_headers=extra_headers)
        try:
            return response.json()
        except ValueError as exc:
            log_event(
                self._logger,
                "http.error",
                LogContext(provider=self.provider),
                level=logging.WARNING,
                method=method,
                url=url,
                status=response.status_code,
                error="invalid JSON body",
            )
            raise TransportError(
                message=f"Invalid JSON in response (status {response.status_code})",
                provider=self.provider,
                status_code=response.status_code,
                raw=response.text,
            ) from exc

    async def stream_events(
        self,
        url: str,
        method: str = "POST",
        body: Any = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> AsyncIterator[str]:
        """Open a streaming request and yield raw SSE ``data:`` payloads.

        A non-2xx status raises before anything is yielded. A network error
        after partial output raises at the point of failure; chunks already
        yielded stay delivered.
        """
        request = self._build_request(url, method, body, extra_headers)
        try:
            response = await self.client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise self._network_error(exc, method, url) from exc
        try:
            if not response.is_success:
                await response.aread()
                raise self._status_error(response, method, url)
            async with aclosing(iter_sse_events(response.aiter_bytes())) as events:
                async for event in events:
                    yield event
        except httpx.HTTPError as exc:
            raise self._network_error(exc, method, url) from exc
        finally:
            await response.aclose()

    def _status_error(self, response: httpx.Response, method: str, url: str) -> TransportError:
        message = extract_error_message(response)
        log_event(
            self._logger,
            "http.error",
            LogContext(provider=self.provider),
            level=logging.WARNING,
            method=method,
            url=url,
            status=response.status_code,
            error=message,
        )
        return TransportError(
            message=message,
            provider=self.provider,
            status_code=response.status_code,
            raw=response.text,
        )

    def _network_error(self, exc: httpx.HTTPError, method: str, url: str) -> TransportError:
        message = str(exc) or "Unknown error occurred"
        log_event(
            self._logger,
            "http.error",
            LogContext(provider=self.provider),
            level=logging.WARNING,
            method=method,
            url=url,
            error=message,
            exc_type=type(exc).__name__,
        )
        return TransportError(message=message, provider=self.provider, raw=exc)


__all__ = ["ProviderTransport", "extract_error_message"]
