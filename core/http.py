"""Serverless request/response helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


class InvalidBody(ValueError):
    """Raised when a request body is present but is not a JSON object."""


@dataclass
class HttpRequest:
    method: str
    body: Any = None

    @classmethod
    def from_event(cls, event: Any) -> HttpRequest:
        """Build a request from a serverless event.

        Accepts a mapping in either the Vercel (``method``) or API Gateway
        (``httpMethod``) shape, or any object exposing ``method``/``body``
        attributes.
        """
        if isinstance(event, HttpRequest):
            return event

        if isinstance(event, Mapping):
            method = event.get("method") or event.get("httpMethod") or ""
            body = event.get("body")
        else:
            method = getattr(event, "method", "") or ""
            body = getattr(event, "body", None)

        return cls(method=str(method).upper(), body=body)

    def json(self) -> dict[str, Any]:
        """Return the body as a JSON object; an absent body yields ``{}``."""
        raw = self.body
        if raw is None:
            return {}
        if isinstance(raw, Mapping):
            return dict(raw)
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidBody(str(exc)) from exc
        if isinstance(raw, str):
            if not raw.strip():
                return {}
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise InvalidBody(str(exc)) from exc
            if not isinstance(data, dict):
                raise InvalidBody("JSON body must be an object")
            return data
        raise InvalidBody(f"Unsupported body type: {type(raw).__name__}")


@dataclass
class HttpResponse:
    status: int
    body: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def all_headers(self) -> dict[str, str]:
        headers = dict(CORS_HEADERS)
        if self.body is not None:
            headers["Content-Type"] = "application/json"
        headers.update(self.headers)
        return headers

    def encoded_body(self) -> str:
        if self.body is None:
            return ""
        return json.dumps(self.body, ensure_ascii=False, separators=(",", ":"))

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view: statusCode, headers, body."""
        return {
            "statusCode": self.status,
            "headers": self.all_headers(),
            "body": self.encoded_body(),
        }
