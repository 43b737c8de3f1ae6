from __future__ import annotations

import asyncio
import hashlib
import io
import json
from typing import Any

from PIL import Image, ImageDraw, ImageFont

from brand_concept_cli.models.brand import InlineImage

from .base import GenerativeProvider

_CONCEPT_THEMES = (
    ("Monogram Mark", "Geometric monogram", "Bold geometric sans-serif"),
    ("Abstract Orbit", "Abstract orbit symbol", "Rounded humanist sans-serif"),
    ("Line Crest", "Single-line crest emblem", "Refined high-contrast serif"),
    ("Spark Glyph", "Angular spark glyph", "Condensed grotesk"),
)


def _palette_from_digest(digest: str) -> list[str]:
    return [f"#{digest[i : i + 6].upper()}" for i in (0, 6, 12)]


class MockGenerativeProvider(GenerativeProvider):
    """Offline provider returning deterministic concepts and Pillow-drawn PNG logos."""

    def __init__(self, concept_count: int = 3, image_size: tuple[int, int] = (512, 512)) -> None:
        self.concept_count = concept_count
        self.image_size = image_size

    async def generate_json(self, prompt: str, response_schema: dict[str, Any]) -> str:
        await asyncio.sleep(0)
        concepts = []
        for index in range(self.concept_count):
            title, symbol, typography = _CONCEPT_THEMES[index % len(_CONCEPT_THEMES)]
            digest = hashlib.sha256(f"{prompt}:{index}".encode("utf-8")).hexdigest()
            concepts.append(
                {
                    "title": title,
                    "rationale": f"A {symbol.lower()} that keeps the identity memorable at any size.",
                    "colorPalette": _palette_from_digest(digest),
                    "typographySuggestion": typography,
                    "imagePrompt": f"{symbol}, centered icon, generous negative space",
                }
            )
        return json.dumps(concepts)

    async def generate_image(self, prompt: str) -> InlineImage | None:
        await asyncio.sleep(0)
        width, height = self.image_size
        digest = hashlib.sha256(prompt.encode("utf-8")).hexdigest()
        color_a = tuple(int(digest[i : i + 2], 16) for i in (0, 2, 4))
        color_b = tuple(int(digest[i : i + 2], 16) for i in (6, 8, 10))

        image = Image.new("RGB", (width, height), (255, 255, 255))
        draw = ImageDraw.Draw(image)

        margin = width // 5
        draw.ellipse([(margin, margin), (width - margin, height - margin)], fill=color_a)
        inner = width // 3
        draw.rounded_rectangle(
            [(inner, inner), (width - inner, height - inner)],
            radius=max(inner // 6, 1),
            fill=color_b,
        )

        try:
            font = ImageFont.truetype("arial.ttf", 24)
        except OSError:
            font = ImageFont.load_default()
        draw.text((12, 12), "MOCK LOGO", fill=(0, 0, 0), font=font)

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return InlineImage(mime_type="image/png", data=buffer.getvalue())
