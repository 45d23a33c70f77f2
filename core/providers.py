"""Text generation provider interface and the Gemini implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from core.config import DEFAULT_MODEL
from core.models import (
    GENERATION_CONFIG,
    SAFETY_SETTINGS,
    GenerationConfig,
    SafetySetting,
)

logger = logging.getLogger(__name__)


class ContentBlocked(RuntimeError):
    """Raised when Gemini refuses a prompt or its answer on safety grounds."""


class TextProvider(ABC):
    """Base interface for text generation providers."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return the generated text, or an empty string when none came back."""
        ...


class GeminiProvider(TextProvider):
    """Google Gemini provider with a fixed generation config and safety policy."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        generation_config: GenerationConfig = GENERATION_CONFIG,
        safety_settings: Sequence[SafetySetting] = SAFETY_SETTINGS,
    ) -> None:
        if not api_key:
            raise ValueError("Gemini API key is required. Set GOOGLE_API_KEY or pass api_key.")
        self.api_key = api_key
        self.model = model
        self.generation_config = generation_config
        self.safety_settings = tuple(safety_settings)
        self._client = None

    def _get_client(self):
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def build_config(self):
        from google.genai import types

        cfg = self.generation_config
        return types.GenerateContentConfig(
            temperature=cfg.temperature,
            top_k=cfg.top_k,
            top_p=cfg.top_p,
            max_output_tokens=cfg.max_output_tokens,
            safety_settings=[
                types.SafetySetting(
                    category=setting.category.value,
                    threshold=setting.threshold.value,
                )
                for setting in self.safety_settings
            ],
        )

    def generate(self, prompt: str) -> str:
        from google.genai import types

        client = self._get_client()
        logger.info("Generating text via Gemini model=%s", self.model)

        response = client.models.generate_content(
            model=self.model,
            contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
            config=self.build_config(),
        )

        reason = _block_reason(response)
        if reason:
            raise ContentBlocked(f"Blocked reason: {reason}")

        try:
            text = response.text
        except ValueError as e:
            logger.warning("Gemini response text could not be read: %s", e)
            return ""
        return text or ""


def _enum_name(value) -> str:
    return str(getattr(value, "value", value) or "")


def _block_reason(response) -> str:
    """Return the safety block reason of a response, or an empty string.

    A blocked prompt comes back without candidates and with
    ``prompt_feedback.block_reason`` set; a blocked answer comes back with a
    candidate whose ``finish_reason`` is SAFETY.
    """
    feedback = getattr(response, "prompt_feedback", None)
    reason = _enum_name(getattr(feedback, "block_reason", None))
    if reason and reason != "BLOCKED_REASON_UNSPECIFIED":
        return reason

    candidates = getattr(response, "candidates", None) or []
    if candidates and _enum_name(getattr(candidates[0], "finish_reason", None)) == "SAFETY":
        return "SAFETY"
    return ""
