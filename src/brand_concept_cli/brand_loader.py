"""
Brand form values: defaults, file loading and conversion to ``BrandInput``.

The form starts out prefilled (see ``brand_form_defaults``); a brand file or
user answers only override the fields they provide.  Keys may use either the
form's camelCase names (``companyName``) or snake_case (``company_name``).
A form with a blank company name or description is not an error: it simply
produces no ``BrandInput`` and nothing is generated.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models.brand import DEFAULT_COMPANY_NAME, DEFAULT_DESCRIPTION, DEFAULT_INDUSTRY, BrandInput

FORM_FIELDS = ("company_name", "description", "industry")

_KEY_ALIASES = {
    "companyName": "company_name",
    "company_name": "company_name",
    "company": "company_name",
    "description": "description",
    "industry": "industry",
}

EXAMPLE_BRAND_YAML = f"""companyName: "{DEFAULT_COMPANY_NAME}"
description: "{DEFAULT_DESCRIPTION}"
industry: "{DEFAULT_INDUSTRY}"
"""


class BrandInputValidationError(ValueError):
    pass


def brand_form_defaults() -> dict[str, str]:
    return {
        "company_name": DEFAULT_COMPANY_NAME,
        "description": DEFAULT_DESCRIPTION,
        "industry": DEFAULT_INDUSTRY,
    }


def normalize_form(data: dict[str, Any], base: dict[str, str] | None = None) -> dict[str, str]:
    """Merge *data* over *base*, mapping form keys to field names.

    Unknown keys and non-text values are rejected; ``None`` clears a field.
    """
    form = dict(base) if base is not None else {name: "" for name in FORM_FIELDS}
    problems = []
    for key, value in data.items():
        field_name = _KEY_ALIASES.get(str(key))
        if field_name is None:
            problems.append(f"- {key}: unknown field (expected companyName, description or industry)")
            continue
        if value is None:
            form[field_name] = ""
        elif isinstance(value, (str, int, float)) and not isinstance(value, bool):
            form[field_name] = str(value)
        else:
            problems.append(f"- {key}: expected text, got {type(value).__name__}")

    if problems:
        raise BrandInputValidationError(
            "Brand details are invalid:\n" + "\n".join(problems) + f"\n\nExample brand file:\n{EXAMPLE_BRAND_YAML}"
        )
    return form


def brand_from_form(form: dict[str, str]) -> BrandInput | None:
    """Return the ``BrandInput`` for *form*, or ``None`` when a required field is blank."""
    company_name = form.get("company_name", "").strip()
    description = form.get("description", "").strip()
    if not company_name or not description:
        return None

    try:
        return BrandInput(company_name=company_name, description=description, industry=form.get("industry", ""))
    except ValidationError as exc:
        errors = [f"- {'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in exc.errors()]
        raise BrandInputValidationError("Brand details are invalid:\n" + "\n".join(errors)) from exc


def read_brand_form(brand_path: Path, use_defaults: bool = False) -> dict[str, str]:
    if not brand_path.exists():
        raise BrandInputValidationError(f"Brand file not found: {brand_path}")

    suffix = brand_path.suffix.lower()
    content = brand_path.read_text(encoding="utf-8")
    try:
        if suffix in {".yaml", ".yml"}:
            parsed = yaml.safe_load(content)
        elif suffix == ".json":
            parsed = json.loads(content)
        else:
            raise BrandInputValidationError(
                f"Unsupported brand file format: {suffix or '(none)'}. Use .yaml, .yml, or .json."
            )
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise BrandInputValidationError(f"Unable to parse brand file {brand_path}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise BrandInputValidationError(
            f"Brand file root must be a map of form fields.\n\nExample brand file:\n{EXAMPLE_BRAND_YAML}"
        )
    return normalize_form(parsed, brand_form_defaults() if use_defaults else None)


def load_brand_input(brand_path: Path, use_defaults: bool = False) -> BrandInput | None:
    return brand_from_form(read_brand_form(brand_path, use_defaults=use_defaults))
