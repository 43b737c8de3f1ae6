"""Scriptable stand-ins for the Gemini provider used across the test suite."""
from __future__ import annotations

import asyncio
import json
from typing import Any

from brand_concept_cli.models.brand import InlineImage
from brand_concept_cli.providers.base import GenerativeProvider

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


def concept_payload(count: int = 3) -> list[dict]:
    return [
        {
            "title": f"Concept {index}",
            "rationale": f"Rationale {index}",
            "colorPalette": ["#112233", "#445566"],
            "typographySuggestion": "Geometric sans-serif",
            "imagePrompt": f"icon-{index}",
        }
        for index in range(count)
    ]


class FakeProvider(GenerativeProvider):
    def __init__(
        self,
        concepts_text: str | None = None,
        json_error: Exception | None = None,
        image_errors: dict[str, Exception] | None = None,
        missing_images: set[str] | None = None,
        gates: dict[str, asyncio.Event] | None = None,
        json_gate: asyncio.Event | None = None,
    ) -> None:
        self.concepts_text = concepts_text if concepts_text is not None else json.dumps(concept_payload())
        self.json_error = json_error
        self.image_errors = image_errors or {}
        self.missing_images = missing_images or set()
        self.gates = gates or {}
        self.json_gate = json_gate
        self.json_calls: list[tuple[str, dict[str, Any]]] = []
        self.image_calls: list[str] = []

    async def generate_json(self, prompt: str, response_schema: dict[str, Any]) -> str:
        self.json_calls.append((prompt, response_schema))
        if self.json_gate is not None:
            await self.json_gate.wait()
        if self.json_error is not None:
            raise self.json_error
        return self.concepts_text

    async def generate_image(self, prompt: str) -> InlineImage | None:
        self.image_calls.append(prompt)
        key = prompt.split(",", 1)[0]
        gate = self.gates.get(key)
        if gate is not None:
            await gate.wait()
        if key in self.image_errors:
            raise self.image_errors[key]
        if key in self.missing_images:
            return None
        return InlineImage(mime_type="image/png", data=PNG_BYTES + key.encode("utf-8"))
