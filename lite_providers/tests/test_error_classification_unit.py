from __future__ import annotations

import asyncio

import httpx

from lite_providers.base.errors import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    RequestValidationError,
    TransportError,
    UnsupportedOperationError,
    classify_exception,
    code_for_status,
)


def test_code_for_status_mapping():
    assert code_for_status(401) == ErrorCode.AUTH
    assert code_for_status(403) == ErrorCode.AUTH
    assert code_for_status(404) == ErrorCode.NOT_FOUND
    assert code_for_status(429) == ErrorCode.RATE_LIMIT
    assert code_for_status(502) == ErrorCode.TRANSIENT
    assert code_for_status(599) == ErrorCode.SERVER_ERROR
    assert code_for_status(418) == ErrorCode.UNKNOWN


def test_classify_exception_variants():
    assert classify_exception(asyncio.TimeoutError()) == ErrorCode.TIMEOUT
    assert classify_exception(httpx.ConnectTimeout("t")) == ErrorCode.TIMEOUT
    assert classify_exception(httpx.ConnectError("c")) == ErrorCode.NETWORK
    assert classify_exception(ValueError("v")) == ErrorCode.UNKNOWN
    assert classify_exception(ConfigurationError(message="x")) == ErrorCode.CONFIGURATION


def test_subclasses_pin_codes_and_share_root():
    for exc, code in (
        (ConfigurationError(message="m"), ErrorCode.CONFIGURATION),
        (UnsupportedOperationError(message="m"), ErrorCode.UNSUPPORTED),
        (RequestValidationError(message="m"), ErrorCode.VALIDATION),
    ):
        assert isinstance(exc, ProviderError)
        assert exc.code == code
        assert str(exc) == "m"


def test_transport_error_derives_code_from_status_or_cause():
    assert TransportError(message="x", status_code=429).code == ErrorCode.RATE_LIMIT
    assert TransportError(message="x", raw=httpx.ReadError("r")).code == ErrorCode.NETWORK
    assert TransportError(message="x").code == ErrorCode.UNKNOWN
    assert TransportError(message="x", status_code=500, code=ErrorCode.TRANSIENT).code == ErrorCode.TRANSIENT
