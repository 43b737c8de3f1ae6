from __future__ import annotations

from .base import GenerativeProvider
from .gemini_developer import GeminiDeveloperProvider
from .gemini_vertex import GeminiVertexProvider
from .mock import MockGenerativeProvider


def create_provider(provider: str, gemini_backend: str, text_model: str, image_model: str) -> GenerativeProvider:
    if provider == "mock":
        return MockGenerativeProvider()
    if provider != "real":
        raise ValueError(f"Unknown provider mode: {provider}")

    if gemini_backend == "developer":
        return GeminiDeveloperProvider(text_model=text_model, image_model=image_model)
    if gemini_backend == "vertex":
        return GeminiVertexProvider(text_model=text_model, image_model=image_model)

    raise ValueError(f"Unknown Gemini backend: {gemini_backend}")
