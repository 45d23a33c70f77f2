"""Runtime settings for the generate endpoint."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-1.5-flash-latest"

# GOOGLE_API_KEY is the deployed name; GEMINI_API_KEY is accepted for local setups.
API_KEY_ENV_VARS = ("GOOGLE_API_KEY", "GEMINI_API_KEY")


def resolve_api_key(
    explicit: str | None,
    *env_names: str,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the explicit key if given, else the first non-blank env var."""
    if explicit and explicit.strip():
        return explicit.strip()

    env = os.environ if environ is None else environ
    for name in env_names:
        value = env.get(name, "")
        if value and value.strip():
            return value.strip()
    return ""


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment at request time."""
    env = os.environ if environ is None else environ
    return Settings(
        api_key=resolve_api_key(None, *API_KEY_ENV_VARS, environ=env),
        model=env.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
    )
