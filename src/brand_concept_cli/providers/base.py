from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from brand_concept_cli.models.brand import InlineImage


class GenerativeProvider(ABC):
    @abstractmethod
    async def generate_json(self, prompt: str, response_schema: dict[str, Any]) -> str:
        raise NotImplementedError

    @abstractmethod
    async def generate_image(self, prompt: str) -> InlineImage | None:
        raise NotImplementedError
