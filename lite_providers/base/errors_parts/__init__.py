"""Errors parts package public surface.

Prefer importing from `lite_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    ConfigurationError,
    ProviderError,
    RequestValidationError,
    TransportError,
    UnsupportedOperationError,
)
from .classification import classify_exception, code_for_status

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
