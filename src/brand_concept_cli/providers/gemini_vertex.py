from __future__ import annotations

import os

from brand_concept_cli.exceptions import ConfigurationError

from .gemini_common import GeminiProvider


class GeminiVertexProvider(GeminiProvider):
    backend_label = "Gemini Vertex"

    def __init__(
        self,
        text_model: str,
        image_model: str,
        project_env: str = "GOOGLE_CLOUD_PROJECT",
        location_env: str = "GOOGLE_CLOUD_LOCATION",
    ):
        self.project = os.getenv(project_env)
        self.location = os.getenv(location_env, "us-central1")
        if not self.project:
            raise ConfigurationError(f"Missing environment variable: {project_env}")

        try:
            from google import genai  # type: ignore
            from google.genai import types  # type: ignore
        except ImportError as exc:
            raise ConfigurationError("Vertex mode requires dependency: google-genai") from exc

        super().__init__(
            client=genai.Client(vertexai=True, project=self.project, location=self.location),
            types_module=types,
            text_model=text_model,
            image_model=image_model,
        )
