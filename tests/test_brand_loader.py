from pathlib import Path

import pytest

from brand_concept_cli.brand_loader import (
    BrandInputValidationError,
    brand_form_defaults,
    brand_from_form,
    load_brand_input,
    normalize_form,
    read_brand_form,
)


def test_camel_case_form_keys_are_accepted(tmp_path: Path) -> None:
    brand_file = tmp_path / "brand.json"
    brand_file.write_text(
        '{"companyName": "Acme", "description": "Cloud tooling", "industry": "Tech"}',
        encoding="utf-8",
    )
    brand = load_brand_input(brand_file)
    assert brand.company_name == "Acme"
    assert brand.industry == "Tech"


def test_snake_case_yaml_without_industry(tmp_path: Path) -> None:
    brand_file = tmp_path / "brand.yaml"
    brand_file.write_text("company_name: Acme\ndescription: Cloud tooling\n", encoding="utf-8")
    brand = load_brand_input(brand_file)
    assert brand.description == "Cloud tooling"
    assert brand.industry == ""


def test_defaults_fill_missing_fields(tmp_path: Path) -> None:
    brand_file = tmp_path / "brand.yaml"
    brand_file.write_text("companyName: Acme\n", encoding="utf-8")
    form = read_brand_form(brand_file, use_defaults=True)
    defaults = brand_form_defaults()
    assert form["company_name"] == "Acme"
    assert form["description"] == defaults["description"]
    assert form["industry"] == defaults["industry"]


def test_default_form_is_submittable() -> None:
    brand = brand_from_form(brand_form_defaults())
    assert brand.company_name == "PressPersona"


def test_blank_company_name_yields_no_brand(tmp_path: Path) -> None:
    brand_file = tmp_path / "brand.yaml"
    brand_file.write_text("companyName: '   '\ndescription: Cloud tooling\n", encoding="utf-8")
    assert load_brand_input(brand_file) is None
    assert brand_from_form({"company_name": "Acme", "description": "", "industry": ""}) is None


def test_null_clears_a_default() -> None:
    form = normalize_form({"industry": None}, brand_form_defaults())
    assert form["industry"] == ""
    assert brand_from_form(form).industry == ""


def test_unknown_and_non_text_fields_rejected() -> None:
    with pytest.raises(BrandInputValidationError) as exc:
        normalize_form({"slogan": "Go", "description": ["a", "b"]})
    message = str(exc.value)
    assert "slogan: unknown field" in message
    assert "description: expected text" in message
    assert "Example brand file" in message


def test_non_mapping_root_rejected(tmp_path: Path) -> None:
    brand_file = tmp_path / "brand.yaml"
    brand_file.write_text("- Acme\n- Cloud tooling\n", encoding="utf-8")
    with pytest.raises(BrandInputValidationError):
        read_brand_form(brand_file)


def test_unsupported_extension(tmp_path: Path) -> None:
    brand_file = tmp_path / "brand.txt"
    brand_file.write_text("companyName: Acme", encoding="utf-8")
    with pytest.raises(BrandInputValidationError):
        read_brand_form(brand_file)
