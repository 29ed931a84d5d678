"""HTTP utilities package for providers.

Exposes pooled httpx clients, the per-adapter transport helper and the
translated SSE stream used by every adapter.
"""

from .client import aclose_all_clients, get_httpx_client
from .event_stream import EventTranslator, stream_translated
from .transport import ProviderTransport, extract_error_message

__all__ = [
    "get_httpx_client",
    "aclose_all_clients",
    "ProviderTransport",
    "extract_error_message",
    "EventTranslator",
    "stream_translated",
]
