from __future__ import annotations

from brand_concept_cli.models.brand import BrandInput

IMAGE_STYLE_SUFFIX = (
    "minimalist vector logo, professional design, white background, high resolution, 4k, "
    "no realistic photo effects, flat design"
)

CONCEPTS_RESPONSE_SCHEMA: dict = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "title": {"type": "STRING"},
            "rationale": {"type": "STRING"},
            "colorPalette": {"type": "ARRAY", "items": {"type": "STRING"}},
            "typographySuggestion": {"type": "STRING"},
            "imagePrompt": {"type": "STRING"},
        },
        "required": ["title", "rationale", "colorPalette", "typographySuggestion", "imagePrompt"],
    },
}


def build_concepts_prompt(brand: BrandInput, count: int) -> str:
    parts = [
        "You are a world-class brand identity designer.",
        f'Client Name: "{brand.company_name}"',
        f'Industry: "{brand.industry}"',
        f'Description: "{brand.description}"',
        "",
        f"Please develop {count} distinct, high-quality logo concepts for this client.",
        "For each concept, provide:",
        "1. A creative title for the concept.",
        "2. A rationale explaining why this fits the brand.",
        "3. A color palette (list of hex codes).",
        "4. A typography style suggestion.",
        "5. A highly detailed image generation prompt that describes a flat, vector-style logo on a white background.",
        "   The image prompt should be optimized for an AI image generator.",
        "   Do not include text inside the logo image itself if possible, focus on the icon/symbol.",
    ]
    return "\n".join(parts)


def build_image_prompt(image_prompt: str) -> str:
    return f"{image_prompt.strip()}, {IMAGE_STYLE_SUFFIX}"
