from __future__ import annotations

import json
import types

import httpx
import pytest

from or_models.base.errors import (
    CacheCorruptError,
    ErrorCode,
    ExplorerError,
    FatalError,
    NetworkError,
    StructuralValidationError,
    classify_exception,
)
from or_models.base.errors_parts.classification import code_for_status


def test_classify_explorer_error_passthrough():
    e = NetworkError(code=ErrorCode.RATE_LIMIT, message="slow down", status_code=429)
    assert classify_exception(e) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    # Direct attr
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    # response.status_code
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize(
    "status,code",
    [(401, ErrorCode.AUTH), (429, ErrorCode.RATE_LIMIT), (500, ErrorCode.SERVER_ERROR), (418, ErrorCode.HTTP_ERROR)],
)
def test_code_for_status(status, code):
    assert code_for_status(status) is code  # nosec B101 - assert is appropriate in unit tests


def test_classify_httpx_failures():
    request = httpx.Request("GET", "https://openrouter.ai/api/v1/models")
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.TRANSPORT  # nosec B101
    response = httpx.Response(502, request=request)
    status_error = httpx.HTTPStatusError("bad gateway", request=request, response=response)
    assert classify_exception(status_error) is ErrorCode.TRANSIENT  # nosec B101


def test_classify_builtin_failures():
    try:
        json.loads("{")
    except json.JSONDecodeError as exc:
        assert classify_exception(exc) is ErrorCode.VALIDATION  # nosec B101
    assert classify_exception(FileNotFoundError("x")) is ErrorCode.NOT_FOUND  # nosec B101
    assert classify_exception(PermissionError("x")) is ErrorCode.IO  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(RuntimeError("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_error_defaults_and_str():
    assert FatalError().code is ErrorCode.UNAVAILABLE  # nosec B101
    assert str(FatalError()) == "unavailable: could not read fallback cache"  # nosec B101
    assert StructuralValidationError().code is ErrorCode.VALIDATION  # nosec B101
    assert CacheCorruptError(path="/c").path == "/c"  # nosec B101
    assert isinstance(NetworkError(), ExplorerError) and isinstance(NetworkError(), Exception)  # nosec B101


def test_classify_invalid_url_as_validation():
    try:
        httpx.URL("http://[::1")
    except httpx.InvalidURL as exc:
        assert classify_exception(exc) is ErrorCode.VALIDATION  # nosec B101
    else:  # pragma: no cover
        raise AssertionError("expected httpx.InvalidURL")
