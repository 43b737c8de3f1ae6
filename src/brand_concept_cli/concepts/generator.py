from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from brand_concept_cli.exceptions import BrandConceptError, ConceptGenerationError
from brand_concept_cli.models.brand import BrandInput, Concept, ConceptDraft
from brand_concept_cli.prompts.builder import CONCEPTS_RESPONSE_SCHEMA, build_concepts_prompt
from brand_concept_cli.providers.base import GenerativeProvider

logger = logging.getLogger(__name__)

CONCEPT_COUNT = 3

_DRAFTS_ADAPTER = TypeAdapter(list[ConceptDraft])


def concept_id(session_token: str, index: int) -> str:
    return f"concept-{session_token}-{index}"


def parse_concept_drafts(raw_text: str) -> list[ConceptDraft]:
    """Parse the text model's JSON array into validated drafts.

    Raises ``ConceptGenerationError`` for empty, non-JSON or schema-violating output.
    """
    if not raw_text or not raw_text.strip():
        raise ConceptGenerationError("Text model returned an empty response.")

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise ConceptGenerationError(f"Text model returned invalid JSON: {exc}") from exc

    if not isinstance(parsed, list):
        raise ConceptGenerationError("Text model response root must be an array of concepts.")

    try:
        return _DRAFTS_ADAPTER.validate_python(parsed)
    except ValidationError as exc:
        details = []
        for item in exc.errors():
            location = ".".join(str(part) for part in item["loc"])
            details.append(f"- {location}: {item['msg']}")
        raise ConceptGenerationError(
            "Text model response failed validation:\n" + "\n".join(details),
            details=details,
        ) from exc


class ConceptGenerator:
    def __init__(self, provider: GenerativeProvider, count: int = CONCEPT_COUNT) -> None:
        if count < 1:
            raise ValueError("Concept count must be at least 1")
        self.provider = provider
        self.count = count

    async def generate(self, brand: BrandInput, session_token: str) -> list[Concept]:
        prompt = build_concepts_prompt(brand, self.count)
        logger.info("Requesting %d logo concepts for %s", self.count, brand.company_name)

        try:
            raw_text = await self.provider.generate_json(prompt, CONCEPTS_RESPONSE_SCHEMA)
        except BrandConceptError as exc:
            raise ConceptGenerationError(f"Concept request failed: {exc}") from exc
        except Exception as exc:
            raise ConceptGenerationError(f"Concept request failed unexpectedly: {exc}") from exc

        drafts = parse_concept_drafts(raw_text)
        if len(drafts) < self.count:
            raise ConceptGenerationError(
                f"Text model returned {len(drafts)} concepts; expected {self.count}."
            )
        if len(drafts) > self.count:
            logger.info("Text model returned %d concepts; keeping the first %d", len(drafts), self.count)

        return [
            Concept(
                **draft.model_dump(),
                id=concept_id(session_token, index),
                image_url=None,
                image_loading=True,
            )
            for index, draft in enumerate(drafts[: self.count])
        ]
