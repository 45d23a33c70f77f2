from pathlib import Path
import sys

import httpx
import pytest
from google.genai import errors as genai_errors

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.errors import classify_provider_error
from core.models import GENERIC_PROVIDER_MESSAGE, INVALID_KEY_MESSAGE


def _http_status_error(status, payload):
    request = httpx.Request("POST", "https://generativelanguage.googleapis.com/v1beta/models")
    response = httpx.Response(status, json=payload, request=request)
    return httpx.HTTPStatusError("upstream error", request=request, response=response)


def test_genai_api_error_uses_embedded_status_and_message():
    exc = genai_errors.APIError(
        429, {"error": {"code": 429, "message": "Resource exhausted", "status": "RESOURCE_EXHAUSTED"}}
    )
    err = classify_provider_error(exc)
    assert err.status == 429
    assert err.message == "Resource exhausted"


def test_sdk_invalid_key_error_maps_to_401_despite_embedded_400():
    response = httpx.Response(
        400,
        json={"error": {"code": 400, "message": "API key not valid. Please pass a valid API key.", "status": "INVALID_ARGUMENT"}},
        request=httpx.Request("POST", "https://generativelanguage.googleapis.com/v1beta/models"),
    )
    with pytest.raises(genai_errors.APIError) as excinfo:
        genai_errors.APIError.raise_for_response(response)

    err = classify_provider_error(excinfo.value)
    assert err.status == 401
    assert err.message == INVALID_KEY_MESSAGE


def test_sdk_blocked_error_maps_to_403():
    exc = genai_errors.APIError(
        400, {"error": {"code": 400, "message": "Blocked reason: SAFETY", "status": "INVALID_ARGUMENT"}}
    )
    err = classify_provider_error(exc)
    assert err.status == 403
    assert "Blocked reason: SAFETY" in err.message


def test_genai_api_error_without_message_uses_generic_text():
    exc = genai_errors.APIError(503, {"error": {"code": 503}})
    err = classify_provider_error(exc)
    assert err.status == 503
    assert err.message == GENERIC_PROVIDER_MESSAGE


def test_httpx_status_error_reads_error_message_from_body():
    exc = _http_status_error(404, {"error": {"message": "models/foo is not found"}})
    err = classify_provider_error(exc)
    assert err.status == 404
    assert err.message == "models/foo is not found"


def test_httpx_status_error_with_non_json_body():
    request = httpx.Request("POST", "https://example.invalid")
    response = httpx.Response(502, text="Bad Gateway", request=request)
    exc = httpx.HTTPStatusError("bad gateway", request=request, response=response)
    err = classify_provider_error(exc)
    assert err.status == 502
    assert err.message == GENERIC_PROVIDER_MESSAGE


def test_invalid_key_message_maps_to_401():
    err = classify_provider_error(ValueError("API key not valid. Please pass a valid API key."))
    assert err.status == 401
    assert err.message == INVALID_KEY_MESSAGE


def test_blocked_message_maps_to_403_and_keeps_provider_message():
    err = classify_provider_error(RuntimeError("Response was blocked. Blocked reason: SAFETY"))
    assert err.status == 403
    assert err.message.endswith("Response was blocked. Blocked reason: SAFETY")


def test_other_messages_are_wrapped_as_500():
    err = classify_provider_error(TimeoutError("read timed out"))
    assert err.status == 500
    assert err.message == "Error de Gemini: read timed out"


def test_error_without_message_uses_generic_500():
    err = classify_provider_error(RuntimeError())
    assert err.status == 500
    assert err.message == GENERIC_PROVIDER_MESSAGE
