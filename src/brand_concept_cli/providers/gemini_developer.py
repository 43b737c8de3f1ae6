from __future__ import annotations

import os

from brand_concept_cli.exceptions import ConfigurationError

from .gemini_common import GeminiProvider


class GeminiDeveloperProvider(GeminiProvider):
    backend_label = "Gemini Developer"

    def __init__(self, text_model: str, image_model: str, api_key_env: str = "GEMINI_API_KEY"):
        api_key = os.getenv(api_key_env)
        if not api_key:
            raise ConfigurationError(f"Missing API key environment variable: {api_key_env}")

        try:
            from google import genai  # type: ignore
            from google.genai import types  # type: ignore
        except ImportError as exc:
            raise ConfigurationError("Developer Gemini mode requires dependency: google-genai") from exc

        super().__init__(
            client=genai.Client(api_key=api_key),
            types_module=types,
            text_model=text_model,
            image_model=image_model,
        )
