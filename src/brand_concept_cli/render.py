from __future__ import annotations

import io
import mimetypes
import re
import sys
import unicodedata
from pathlib import Path
from typing import TextIO

from PIL import Image, UnidentifiedImageError

from brand_concept_cli.models.brand import Concept, InlineImage
from brand_concept_cli.session import GenerationSession, SessionState

IMAGE_PENDING_LABEL = "Rendering design..."
IMAGE_UNAVAILABLE_LABEL = "Image generation unavailable"


def image_extension(mime_type: str) -> str:
    if mime_type == "image/jpeg":
        return ".jpg"
    return mimetypes.guess_extension(mime_type, strict=False) or ".png"


def concept_download_filename(concept: Concept, mime_type: str = "image/png") -> str:
    """``<title-slug>-<concept id>-logo<ext>``; the id keeps same-titled concepts apart."""
    ascii_title = unicodedata.normalize("NFKD", concept.title).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"\s+", "-", ascii_title.strip()).lower()
    slug = re.sub(r"[^a-z0-9_-]", "", slug) or "concept"
    return f"{slug}-{concept.id}-logo{image_extension(mime_type)}"


def describe_image(image_url: str) -> str:
    try:
        image = InlineImage.from_data_uri(image_url)
    except ValueError:
        return "Image ready"

    try:
        with Image.open(io.BytesIO(image.data)) as decoded:
            width, height = decoded.size
    except (UnidentifiedImageError, OSError):
        return f"Image ready ({image.mime_type}, {len(image.data)} bytes)"
    return f"Image ready ({image.mime_type}, {width}x{height})"


def image_status(concept: Concept) -> str:
    if concept.image_loading:
        return IMAGE_PENDING_LABEL
    if concept.image_url:
        return describe_image(concept.image_url)
    return IMAGE_UNAVAILABLE_LABEL


def format_concept_card(concept: Concept) -> str:
    lines = [
        f"== {concept.title} ==",
        concept.rationale,
        "Palette: " + "  ".join(concept.color_palette),
        f"Type: {concept.typography_suggestion}",
        f"Prompt: {concept.image_prompt}",
        f"Image: {image_status(concept)}",
    ]
    return "\n".join(lines)


def download_concept_image(concept: Concept, dest_dir: Path) -> Path | None:
    """Write a resolved concept image to *dest_dir*; ``None`` when there is nothing to save."""
    if concept.image_loading or not concept.image_url:
        return None

    image = InlineImage.from_data_uri(concept.image_url)
    dest_dir.mkdir(parents=True, exist_ok=True)
    output_path = dest_dir / concept_download_filename(concept, image.mime_type)
    if output_path.exists():
        raise FileExistsError(f"Refusing to overwrite existing download: {output_path}")
    output_path.write_bytes(image.data)
    return output_path


def session_to_dict(session: GenerationSession) -> dict:
    return {
        "token": session.token,
        "state": session.state.value,
        "error": session.error,
        "brand": session.brand.model_dump() if session.brand else None,
        "concepts": [
            {
                **concept.model_dump(exclude={"image_url"}),
                "has_image": bool(concept.image_url),
            }
            for concept in session.concepts
        ],
    }


class ConsoleRenderer:
    """Prints session progress to a text stream as the studio reports it."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def _write(self, text: str) -> None:
        print(text, file=self.stream, flush=True)

    def session_changed(self, session: GenerationSession) -> None:
        if session.state is SessionState.GENERATING_CONCEPTS and session.brand is not None:
            self._write(f'Analyzing brand identity for "{session.brand.company_name}"...')
        elif session.state is SessionState.ERROR:
            self._write(f"Error: {session.error}")
        elif session.state is SessionState.CONCEPTS_READY:
            self._write(f"{len(session.concepts)} concepts ready. Rendering designs...")
            for concept in session.concepts:
                self._write("")
                self._write(format_concept_card(concept))

    def concept_updated(self, session: GenerationSession, concept: Concept) -> None:
        self._write(f"[{concept.title}] {image_status(concept)}")
