"""
Per-session orchestration of concept and image generation.

A submission moves the active session through
``IDLE -> GENERATING_CONCEPTS -> CONCEPTS_READY`` (or ``ERROR``).  Concepts are
stored as soon as the text model answers; one asyncio task per concept then
requests its image.  Each task only touches its own concept, and only while its
session is still the active one, so a resubmission never sees late results from
the session it replaced.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

from brand_concept_cli.concepts.generator import ConceptGenerator
from brand_concept_cli.exceptions import ConceptGenerationError
from brand_concept_cli.images.generator import ImageGenerator
from brand_concept_cli.models.brand import BrandInput, Concept

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "We encountered an issue generating your brand concepts. Please try again."


class SessionState(str, Enum):
    IDLE = "idle"
    GENERATING_CONCEPTS = "generating_concepts"
    CONCEPTS_READY = "concepts_ready"
    ERROR = "error"


@dataclass(slots=True)
class GenerationSession:
    token: str
    brand: BrandInput | None = None
    state: SessionState = SessionState.IDLE
    concepts: list[Concept] = field(default_factory=list)
    error: str | None = None

    @property
    def generating_concepts(self) -> bool:
        return self.state is SessionState.GENERATING_CONCEPTS

    @property
    def pending_images(self) -> int:
        return sum(1 for concept in self.concepts if concept.image_loading)

    def get(self, concept_id: str) -> Concept | None:
        for concept in self.concepts:
            if concept.id == concept_id:
                return concept
        return None

    def resolve_image(self, concept_id: str, image_url: str | None) -> Concept | None:
        concept = self.get(concept_id)
        if concept is None:
            return None
        concept.image_url = image_url
        concept.image_loading = False
        return concept


class SessionListener(Protocol):
    def session_changed(self, session: GenerationSession) -> None: ...

    def concept_updated(self, session: GenerationSession, concept: Concept) -> None: ...


def _new_token() -> str:
    return uuid.uuid4().hex[:12]


class BrandStudio:
    def __init__(
        self,
        concept_generator: ConceptGenerator,
        image_generator: ImageGenerator,
        listener: SessionListener | None = None,
        token_factory: Callable[[], str] = _new_token,
    ) -> None:
        self.concept_generator = concept_generator
        self.image_generator = image_generator
        self.listener = listener
        self._token_factory = token_factory
        self._session = GenerationSession(token="")
        self._session_tasks: list[asyncio.Task] = []
        self._all_tasks: set[asyncio.Task] = set()

    @property
    def session(self) -> GenerationSession:
        return self._session

    def is_active(self, session: GenerationSession) -> bool:
        return session is self._session

    async def submit(
        self, company_name: str, description: str, industry: str | None = ""
    ) -> GenerationSession | None:
        """Start a new session from raw form values.

        Blank company name or description is ignored: nothing is reset and no
        remote call is made.
        """
        if not company_name.strip() or not description.strip():
            logger.info("Ignoring submission with blank company name or description")
            return None

        brand = BrandInput(company_name=company_name, description=description, industry=industry or "")
        return await self.run(brand)

    async def run(self, brand: BrandInput) -> GenerationSession:
        session = GenerationSession(
            token=self._token_factory(),
            brand=brand,
            state=SessionState.GENERATING_CONCEPTS,
        )
        self._session = session
        self._session_tasks = []
        self._notify_session(session)

        try:
            concepts = await self.concept_generator.generate(brand, session.token)
        except ConceptGenerationError as exc:
            logger.error("Concept generation failed for %s: %s", brand.company_name, exc)
            if self.is_active(session):
                session.state = SessionState.ERROR
                session.error = GENERIC_ERROR_MESSAGE
                self._notify_session(session)
            return session

        if not self.is_active(session):
            logger.debug("Discarding concepts for superseded session %s", session.token)
            return session

        session.concepts = concepts
        session.state = SessionState.CONCEPTS_READY
        self._notify_session(session)

        for concept in concepts:
            task = asyncio.create_task(
                self._resolve_image(session, concept.id, concept.image_prompt),
                name=concept.id,
            )
            self._session_tasks.append(task)
            self._all_tasks.add(task)
            task.add_done_callback(self._all_tasks.discard)

        logger.info("Session %s: %d concepts ready, images pending", session.token, len(concepts))
        return session

    async def wait_for_images(self) -> GenerationSession:
        """Wait until every image request of the active session has resolved."""
        tasks = list(self._session_tasks)
        if tasks:
            await asyncio.gather(*tasks)
        return self._session

    async def _resolve_image(self, session: GenerationSession, concept_id: str, image_prompt: str) -> None:
        image_url = await self.image_generator.generate(image_prompt)

        if not self.is_active(session):
            logger.debug("Discarding image for %s from superseded session %s", concept_id, session.token)
            return

        concept = session.resolve_image(concept_id, image_url)
        if concept is None:
            logger.debug("Concept %s no longer present in session %s", concept_id, session.token)
            return

        logger.info("Image for %s %s", concept_id, "ready" if image_url else "unavailable")
        if self.listener is not None:
            self.listener.concept_updated(session, concept)

    def _notify_session(self, session: GenerationSession) -> None:
        if self.listener is not None:
            self.listener.session_changed(session)
