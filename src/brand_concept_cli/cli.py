from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from brand_concept_cli.brand_loader import (
    BrandInputValidationError,
    brand_form_defaults,
    brand_from_form,
    normalize_form,
    read_brand_form,
)
from brand_concept_cli.concepts.generator import ConceptGenerator
from brand_concept_cli.exceptions import ConfigurationError
from brand_concept_cli.images.generator import ImageGenerator
from brand_concept_cli.providers.factory import create_provider
from brand_concept_cli.render import ConsoleRenderer, download_concept_image, session_to_dict
from brand_concept_cli.session import BrandStudio, GenerationSession, SessionState

logger = logging.getLogger(__name__)

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


@dataclass(slots=True)
class StudioConfig:
    provider_mode: str = "mock"
    gemini_backend: str = "developer"
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    download_dir: Path | None = None


def _strip_optional_quotes(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) >= 2 and ((trimmed[0] == '"' and trimmed[-1] == '"') or (trimmed[0] == "'" and trimmed[-1] == "'")):
        return trimmed[1:-1]
    return trimmed


def _load_env_file(env_path: Path) -> None:
    if not env_path.exists() or not env_path.is_file():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        os.environ.setdefault(key, _strip_optional_quotes(raw_value))


def _load_default_env_files() -> None:
    cwd_env = Path.cwd() / ".env"
    project_root_env = Path(__file__).resolve().parents[2] / ".env"

    _load_env_file(project_root_env)
    if cwd_env != project_root_env:
        _load_env_file(cwd_env)


def build_studio(config: StudioConfig, listener=None) -> BrandStudio:
    provider = create_provider(config.provider_mode, config.gemini_backend, config.text_model, config.image_model)
    return BrandStudio(
        concept_generator=ConceptGenerator(provider),
        image_generator=ImageGenerator(provider),
        listener=listener,
    )


FORM_PROMPTS = (
    ("company_name", "Company Name"),
    ("industry", "Industry"),
    ("description", "Description"),
)
QUIT_ANSWERS = {"q", "quit", "exit"}
CLEAR_ANSWER = "-"


async def run_studio(studio: BrandStudio, form: dict[str, str]) -> GenerationSession | None:
    session = await studio.submit(form["company_name"], form["description"], form["industry"])
    if session is None:
        return None
    return await studio.wait_for_images()


async def prompt_form(form: dict[str, str], read_line: Callable[[str], str]) -> dict[str, str]:
    """Ask for each form field, keeping the current value on an empty answer."""
    updated = dict(form)
    for field_name, label in FORM_PROMPTS:
        answer = (await asyncio.to_thread(read_line, f"{label} [{updated[field_name]}]: ")).strip()
        if answer == CLEAR_ANSWER:
            updated[field_name] = ""
        elif answer:
            updated[field_name] = answer
    return updated


async def run_interactive(
    studio: BrandStudio, form: dict[str, str], read_line: Callable[[str], str]
) -> GenerationSession | None:
    """Loop form edits and submissions through one studio until the user quits.

    Prompts run off the event loop, so images of the current session keep
    arriving while the next submission is being typed.
    """
    submitted = False
    while True:
        try:
            form = await prompt_form(form, read_line)
        except EOFError:
            break

        session = await studio.submit(form["company_name"], form["description"], form["industry"])
        if session is None:
            print("Company name and description are required. Nothing to generate.")
        else:
            submitted = True

        try:
            answer = await asyncio.to_thread(read_line, "Press Enter to edit and generate again, or q to quit: ")
        except EOFError:
            break
        if answer.strip().lower() in QUIT_ANSWERS:
            break

    if not submitted:
        return None
    return await studio.wait_for_images()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate AI logo concepts and images for a brand")
    parser.add_argument("--brand", default=None, help="Path to brand details file (.yaml/.yml/.json)")
    parser.add_argument("--company", default=None, help="Company name")
    parser.add_argument("--description", default=None, help="What the company does")
    parser.add_argument("--industry", default=None, help="Industry (optional)")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for brand details (prefilled with defaults) and allow repeated submissions.",
    )
    parser.add_argument("--provider", choices=["mock", "real"], default="mock", help="Provider mode")
    parser.add_argument(
        "--gemini-backend",
        choices=["developer", "vertex"],
        default="developer",
        help="Gemini backend used when --provider real",
    )
    parser.add_argument(
        "--text-model",
        default=os.getenv("GEMINI_TEXT_MODEL", DEFAULT_TEXT_MODEL),
        help="Gemini model used for concept text",
    )
    parser.add_argument(
        "--image-model",
        default=os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        help="Gemini image model name",
    )
    parser.add_argument(
        "--download-dir",
        default=None,
        help="Save every generated logo image into this folder once rendering completes.",
    )
    parser.add_argument("--json", action="store_true", help="Print the final session as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _form_from_args(args: argparse.Namespace) -> dict[str, str]:
    """Build the starting form: defaults (interactive only), then brand file, then flags."""
    if args.brand:
        form = read_brand_form(Path(args.brand), use_defaults=args.interactive)
    else:
        form = brand_form_defaults() if args.interactive else normalize_form({})

    overrides = {
        "company_name": args.company,
        "description": args.description,
        "industry": args.industry,
    }
    return normalize_form({key: value for key, value in overrides.items() if value is not None}, form)


def _save_downloads(session: GenerationSession, download_dir: Path) -> None:
    for concept in session.concepts:
        try:
            saved = download_concept_image(concept, download_dir)
        except FileExistsError as exc:
            logger.warning("%s", exc)
            continue
        if saved is not None:
            logger.info("Saved %s", saved)


def main(argv: list[str] | None = None, read_line: Callable[[str], str] = input) -> None:
    _load_default_env_files()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    config = StudioConfig(
        provider_mode=args.provider,
        gemini_backend=args.gemini_backend,
        text_model=args.text_model,
        image_model=args.image_model,
        download_dir=Path(args.download_dir) if args.download_dir else None,
    )

    try:
        form = _form_from_args(args)
        brand = None if args.interactive else brand_from_form(form)
    except BrandInputValidationError as exc:
        raise SystemExit(f"Validation error:\n{exc}") from exc

    if not args.interactive and brand is None:
        print("Company name and description are required. Nothing to generate.")
        return

    try:
        studio = build_studio(config, listener=None if args.json else ConsoleRenderer())
    except (ConfigurationError, ValueError) as exc:
        raise SystemExit(f"Configuration error: {exc}") from exc

    if args.interactive:
        session = asyncio.run(run_interactive(studio, form, read_line))
    else:
        session = asyncio.run(run_studio(studio, form))
    if session is None:
        return

    if args.json:
        print(json.dumps(session_to_dict(session), indent=2))

    if session.state is SessionState.ERROR:
        raise SystemExit(session.error)

    if config.download_dir is not None:
        _save_downloads(session, config.download_dir)

    ready = sum(1 for concept in session.concepts if concept.image_url)
    print("Session summary")
    print(f"- Concepts generated: {len(session.concepts)}")
    print(f"- Images rendered: {ready}")
    print(f"- Images unavailable: {len(session.concepts) - ready}")


if __name__ == "__main__":
    main()
