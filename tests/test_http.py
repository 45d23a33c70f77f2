from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.http import HttpRequest, HttpResponse, InvalidBody


def test_from_event_normalizes_method():
    request = HttpRequest.from_event({"httpMethod": "post", "body": None})
    assert request.method == "POST"
    assert request.body is None


@pytest.mark.parametrize(
    "body, expected",
    [
        (None, {}),
        ("", {}),
        ('{"prompt": "hi"}', {"prompt": "hi"}),
        (b'{"prompt": "caf\xc3\xa9"}', {"prompt": "café"}),
        ({"prompt": "hi"}, {"prompt": "hi"}),
    ],
)
def test_json_accepts_supported_body_types(body, expected):
    assert HttpRequest(method="POST", body=body).json() == expected


@pytest.mark.parametrize("body", ["{broken", "[1, 2]", b"\xff\xfe", 3.14])
def test_json_rejects_invalid_bodies(body):
    with pytest.raises(InvalidBody):
        HttpRequest(method="POST", body=body).json()


def test_response_without_body_has_no_content_type():
    headers = HttpResponse(status=200).all_headers()
    assert "Content-Type" not in headers
    assert headers["Access-Control-Allow-Credentials"] == "true"


def test_response_keeps_non_ascii_text():
    response = HttpResponse(status=405, body={"error": "Método no permitido"})
    assert response.encoded_body() == '{"error":"Método no permitido"}'
