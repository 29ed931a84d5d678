"""Unified provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``lite_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    RequestValidationError,
    TransportError,
    UnsupportedOperationError,
    classify_exception,
    code_for_status,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "TransportError",
    "UnsupportedOperationError",
    "RequestValidationError",
    "classify_exception",
    "code_for_status",
]
