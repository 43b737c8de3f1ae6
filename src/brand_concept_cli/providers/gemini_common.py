from __future__ import annotations

import logging
from typing import Any

from brand_concept_cli.exceptions import ProviderGenerationError
from brand_concept_cli.models.brand import DEFAULT_IMAGE_MIME_TYPE, InlineImage

from .base import GenerativeProvider

logger = logging.getLogger(__name__)


def extract_text(response: Any) -> str:
    text = getattr(response, "text", None)
    if text and text.strip():
        return text.strip()

    for part in _iter_parts(response):
        part_text = getattr(part, "text", None)
        if part_text and part_text.strip():
            return part_text.strip()
    return ""


def extract_inline_image(response: Any) -> InlineImage | None:
    """Return the first inline image payload in *response*, scanning every candidate."""
    for part in _iter_parts(response):
        inline_data = getattr(part, "inline_data", None)
        if inline_data is None:
            continue
        raw_bytes = getattr(inline_data, "data", None)
        if raw_bytes:
            mime_type = getattr(inline_data, "mime_type", None) or DEFAULT_IMAGE_MIME_TYPE
            return InlineImage(mime_type=mime_type, data=raw_bytes)
    return None


def _iter_parts(response: Any):
    candidates = getattr(response, "candidates", None) or []
    for candidate in candidates:
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) if content else None
        yield from parts or []


class GeminiProvider(GenerativeProvider):
    """Shared request logic for both Gemini backends; subclasses only build the client."""

    backend_label = "Gemini"

    def __init__(self, client: Any, types_module: Any, text_model: str, image_model: str) -> None:
        self._client = client
        self._types = types_module
        self.text_model = text_model
        self.image_model = image_model

    async def generate_json(self, prompt: str, response_schema: dict[str, Any]) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.text_model,
                contents=prompt,
                config=self._types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=response_schema,
                ),
            )
        except Exception as exc:
            raise ProviderGenerationError(
                f"{self.backend_label} API call failed for text model '{self.text_model}': {exc}"
            ) from exc

        text = extract_text(response)
        logger.debug("%s text model %s returned %d characters", self.backend_label, self.text_model, len(text))
        return text

    async def generate_image(self, prompt: str) -> InlineImage | None:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.image_model,
                contents=prompt,
                config=self._types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
            )
        except Exception as exc:
            raise ProviderGenerationError(
                f"{self.backend_label} API call failed for image model '{self.image_model}': {exc}"
            ) from exc

        image = extract_inline_image(response)
        if image is None:
            logger.warning(
                "%s response from model '%s' did not contain image data", self.backend_label, self.image_model
            )
        return image
