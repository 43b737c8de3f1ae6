from __future__ import annotations

import logging

from brand_concept_cli.prompts.builder import build_image_prompt
from brand_concept_cli.providers.base import GenerativeProvider

logger = logging.getLogger(__name__)


class ImageGenerator:
    """Turns a concept's image prompt into a data URI, or ``None`` when no image is available.

    Provider failures are logged and downgraded to ``None`` so one concept's
    image can never interrupt the others.
    """

    def __init__(self, provider: GenerativeProvider) -> None:
        self.provider = provider

    async def generate(self, image_prompt: str) -> str | None:
        prompt = build_image_prompt(image_prompt)
        try:
            image = await self.provider.generate_image(prompt)
        except Exception as exc:
            logger.error("Error generating logo image: %s", exc)
            return None

        if image is None or not image.data:
            logger.warning("No image data found in response")
            return None
        return image.to_data_uri()
