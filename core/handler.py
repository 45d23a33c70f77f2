"""Request handler for the generate endpoint.

Flow for a single request:

1. ``OPTIONS`` preflight short-circuits with an empty 200.
2. Anything other than ``POST`` is rejected with 405.
3. The JSON body must carry a non-empty ``prompt`` string.
4. The API credential must be configured; otherwise 500 without calling out.
5. One provider call; its text, emptiness, or exception becomes the outcome.

Every outcome is mapped to an HTTP response in exactly one place
(``Outcome.to_response``) and CORS headers are added to all of them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from core.config import Settings, load_settings
from core.errors import classify_provider_error
from core.http import HttpRequest, HttpResponse, InvalidBody
from core.models import (
    INVALID_JSON_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    PROMPT_REQUIRED_MESSAGE,
    ClientError,
    ConfigurationError,
    EmptyResult,
    Generated,
    Outcome,
)
from core.providers import GeminiProvider, TextProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Settings], TextProvider]


def gemini_provider_factory(settings: Settings) -> TextProvider:
    return GeminiProvider(api_key=settings.api_key, model=settings.model)


class GenerateHandler:
    """Validates a prompt request and relays it to a text provider."""

    def __init__(
        self,
        settings_loader: Callable[[], Settings] = load_settings,
        provider_factory: ProviderFactory = gemini_provider_factory,
    ) -> None:
        self.settings_loader = settings_loader
        self.provider_factory = provider_factory

    def __call__(self, event: Any) -> HttpResponse:
        request = HttpRequest.from_event(event)
        if request.method == "OPTIONS":
            return HttpResponse(status=200)
        return self.process(request).to_response()

    def process(self, request: HttpRequest) -> Outcome:
        if request.method != "POST":
            return ClientError(
                status=405,
                message=METHOD_NOT_ALLOWED_MESSAGE,
                headers={"Allow": "POST"},
            )

        try:
            payload = request.json()
        except InvalidBody as e:
            logger.info("Rejected request body: %s", e)
            return ClientError(status=400, message=INVALID_JSON_MESSAGE)

        prompt = payload.get("prompt")
        if not isinstance(prompt, str) or not prompt:
            return ClientError(status=400, message=PROMPT_REQUIRED_MESSAGE)

        settings = self.settings_loader()
        if not settings.has_credentials:
            logger.error("Error: GOOGLE_API_KEY is not configured.")
            return ConfigurationError()

        return self.relay(settings, prompt)

    def relay(self, settings: Settings, prompt: str) -> Outcome:
        try:
            provider = self.provider_factory(settings)
            text = provider.generate(prompt)
        except Exception as e:
            logger.error("Gemini request failed: %s", e)
            return classify_provider_error(e)

        if not text:
            logger.warning("Gemini response contained no readable text.")
            return EmptyResult()

        logger.info("Relayed generation: %d chars -> %d chars", len(prompt), len(text))
        return Generated(text=text)
