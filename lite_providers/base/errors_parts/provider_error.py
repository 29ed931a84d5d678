"""
Structured provider error exception types.

`ProviderError` is the single root of the taxonomy. Subclasses pin a default
`ErrorCode` so callers can branch on either the class or the code:

- `ConfigurationError`: missing/invalid configuration, raised at construction.
- `TransportError`: non-2xx HTTP status or network failure.
- `UnsupportedOperationError`: adapter capability gap, raised before any I/O.
- `RequestValidationError`: malformed inbound request payload.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for display.
        provider: Provider type where the error originated (e.g. ``"openai"``).
        code: Normalized :class:`ErrorCode` classification for the failure.
        status_code: HTTP status code when the failure came from a response.
        raw: Original exception or response body, for diagnostics.
    """

    message: str
    provider: str = "unknown"
    code: ErrorCode = ErrorCode.UNKNOWN
    status_code: Optional[int] = None
    raw: Optional[Any] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class ConfigurationError(ProviderError):
    code: ErrorCode = ErrorCode.CONFIGURATION


@dataclass(eq=False)
class TransportError(ProviderError):
    """HTTP-level failure. ``status_code`` is None when no response arrived."""

    def __post_init__(self) -> None:
        if self.code is ErrorCode.UNKNOWN:
            # Local import: classification depends on this module.
            from .classification import code_for_status, classify_exception

            if self.status_code is not None:
                self.code = code_for_status(self.status_code)
            elif isinstance(self.raw, BaseException):
                self.code = classify_exception(self.raw)


@dataclass(eq=False)
class UnsupportedOperationError(ProviderError):
    code: ErrorCode = ErrorCode.UNSUPPORTED


@dataclass(eq=False)
class RequestValidationError(ProviderError):
    code: ErrorCode = ErrorCode.VALIDATION


__all__ = [
    "ProviderError",
    "ConfigurationError",
    "TransportError",
    "UnsupportedOperationError",
    "RequestValidationError",
]
