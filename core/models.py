"""Data models for the generate endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from core.http import HttpResponse


class HarmCategory(str, Enum):
    HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"


class BlockThreshold(str, Enum):
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = 0.9
    top_k: int = 1
    top_p: float = 1.0
    max_output_tokens: int = 2048


@dataclass(frozen=True)
class SafetySetting:
    category: HarmCategory
    threshold: BlockThreshold


GENERATION_CONFIG = GenerationConfig()

SAFETY_SETTINGS: tuple[SafetySetting, ...] = tuple(
    SafetySetting(category=category, threshold=BlockThreshold.BLOCK_MEDIUM_AND_ABOVE)
    for category in (
        HarmCategory.HARASSMENT,
        HarmCategory.HATE_SPEECH,
        HarmCategory.SEXUALLY_EXPLICIT,
        HarmCategory.DANGEROUS_CONTENT,
    )
)

# --- User-facing messages ---

METHOD_NOT_ALLOWED_MESSAGE = "Método no permitido"
INVALID_JSON_MESSAGE = "El cuerpo de la solicitud no es un JSON válido."
PROMPT_REQUIRED_MESSAGE = 'El campo "prompt" es requerido.'
CONFIGURATION_ERROR_MESSAGE = "Error de configuración del servidor."
EMPTY_RESULT_MESSAGE = "No se recibió una respuesta textual válida del modelo."
GENERIC_PROVIDER_MESSAGE = "Error interno al procesar la consulta con la IA."
INVALID_KEY_MESSAGE = (
    "La clave API no es válida o no tiene permisos. Verifique su GOOGLE_API_KEY."
)
BLOCKED_CONTENT_PREFIX = "Contenido bloqueado por las políticas de seguridad de la IA: "
PROVIDER_MESSAGE_PREFIX = "Error de Gemini: "


# --- Request outcomes ---
# Each variant maps to exactly one HTTP response in to_response().


@dataclass(frozen=True)
class Generated:
    text: str

    def to_response(self) -> HttpResponse:
        # The nested candidates shape is what the frontend reads; keep it as is.
        body: dict[str, Any] = {
            "candidates": [{"content": {"parts": [{"text": self.text}]}}]
        }
        return HttpResponse(status=200, body=body)


@dataclass(frozen=True)
class ClientError:
    status: int
    message: str
    headers: dict[str, str] = field(default_factory=dict)

    def to_response(self) -> HttpResponse:
        return HttpResponse(
            status=self.status,
            body={"error": self.message},
            headers=dict(self.headers),
        )


@dataclass(frozen=True)
class ConfigurationError:
    message: str = CONFIGURATION_ERROR_MESSAGE

    def to_response(self) -> HttpResponse:
        return HttpResponse(status=500, body={"error": self.message})


@dataclass(frozen=True)
class ProviderError:
    status: int
    message: str

    def to_response(self) -> HttpResponse:
        return HttpResponse(status=self.status, body={"error": self.message})


@dataclass(frozen=True)
class EmptyResult:
    message: str = EMPTY_RESULT_MESSAGE

    def to_response(self) -> HttpResponse:
        return HttpResponse(status=500, body={"error": self.message})


Outcome = Union[Generated, ClientError, ConfigurationError, ProviderError, EmptyResult]
