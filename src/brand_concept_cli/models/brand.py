from __future__ import annotations

import base64
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_IMAGE_MIME_TYPE = "image/png"

# Values the brand form starts out with.
DEFAULT_COMPANY_NAME = "PressPersona"
DEFAULT_DESCRIPTION = "A modern digital PR and brand identity agency helping tech startups find their voice."
DEFAULT_INDUSTRY = "Public Relations & Branding"


class BrandInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    company_name: str = Field(alias="companyName", min_length=1)
    description: str = Field(min_length=1)
    industry: str = ""

    @field_validator("industry", mode="before")
    @classmethod
    def _industry_optional(cls, value: object) -> object:
        return "" if value is None else value


class ConceptDraft(BaseModel):
    """One concept as returned by the text model, before the client assigns an id."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(min_length=1)
    rationale: str = Field(min_length=1)
    color_palette: list[str] = Field(alias="colorPalette", min_length=1)
    typography_suggestion: str = Field(alias="typographySuggestion", min_length=1)
    image_prompt: str = Field(alias="imagePrompt", min_length=1)

    @field_validator("color_palette")
    @classmethod
    def _strip_colors(cls, value: list[str]) -> list[str]:
        colors = [color.strip() for color in value if color and color.strip()]
        if not colors:
            raise ValueError("color palette must contain at least one color")
        return colors


class Concept(ConceptDraft):
    id: str = Field(min_length=1)
    image_url: str | None = None
    image_loading: bool = True


@dataclass(slots=True, frozen=True)
class InlineImage:
    mime_type: str
    data: bytes

    def to_data_uri(self) -> str:
        mime_type = self.mime_type or DEFAULT_IMAGE_MIME_TYPE
        payload = base64.b64encode(self.data).decode("ascii")
        return f"data:{mime_type};base64,{payload}"

    @classmethod
    def from_data_uri(cls, uri: str) -> InlineImage:
        header, sep, payload = uri.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise ValueError("Not a base64 data URI")
        mime_type = header[len("data:") : -len(";base64")] or DEFAULT_IMAGE_MIME_TYPE
        return cls(mime_type=mime_type, data=base64.b64decode(payload, validate=True))
