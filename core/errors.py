"""Normalization of provider exceptions into HTTP-facing errors.

The string checks below depend on Gemini's error wording, which is not a
stable contract. They are a best-effort mapping.
"""

from __future__ import annotations

import logging

import httpx
from google.genai import errors as genai_errors

from core.models import (
    BLOCKED_CONTENT_PREFIX,
    GENERIC_PROVIDER_MESSAGE,
    INVALID_KEY_MESSAGE,
    PROVIDER_MESSAGE_PREFIX,
    ProviderError,
)

logger = logging.getLogger(__name__)

INVALID_KEY_MARKER = "API key not valid"
BLOCKED_MARKER = "Blocked reason"


def _embedded_status(exc: BaseException) -> tuple[int, str | None] | None:
    """Return (status, message) when the exception carries an HTTP response."""
    if isinstance(exc, genai_errors.APIError):
        status = exc.code if isinstance(exc.code, int) and exc.code else 500
        return status, exc.message or None

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        message = None
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            message = payload["error"].get("message") or None
        return response.status_code or 500, message

    return None


def classify_provider_error(exc: BaseException) -> ProviderError:
    """Map an exception raised by the provider call to a ProviderError.

    The credential and safety markers are checked first: the SDK reports a
    bad key as a plain HTTP 400 whose message carries the marker.
    """
    message = str(exc)
    if isinstance(exc, genai_errors.APIError) and exc.message:
        message = f"{message} {exc.message}"

    if INVALID_KEY_MARKER in message:
        return ProviderError(status=401, message=INVALID_KEY_MESSAGE)
    if BLOCKED_MARKER in message:
        logger.info("Prompt blocked by safety settings")
        return ProviderError(status=403, message=f"{BLOCKED_CONTENT_PREFIX}{str(exc)}")

    embedded = _embedded_status(exc)
    if embedded is not None:
        status, embedded_message = embedded
        return ProviderError(status=status, message=embedded_message or GENERIC_PROVIDER_MESSAGE)

    if not message:
        return ProviderError(status=500, message=GENERIC_PROVIDER_MESSAGE)
    return ProviderError(status=500, message=f"{PROVIDER_MESSAGE_PREFIX}{message}")
