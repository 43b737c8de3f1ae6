import asyncio
import json
from types import SimpleNamespace

import pytest

from brand_concept_cli.exceptions import ConfigurationError, ProviderGenerationError
from brand_concept_cli.prompts.builder import CONCEPTS_RESPONSE_SCHEMA
from brand_concept_cli.providers.factory import create_provider
from brand_concept_cli.providers.gemini_common import GeminiProvider, extract_inline_image, extract_text
from brand_concept_cli.providers.gemini_developer import GeminiDeveloperProvider
from brand_concept_cli.providers.mock import MockGenerativeProvider


def _response(*parts, text=None):
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))],
    )


class _FakeTypes:
    @staticmethod
    def GenerateContentConfig(**kwargs):
        return kwargs


class _FakeModels:
    def __init__(self, response=None, error=None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def _gemini(models: _FakeModels) -> GeminiProvider:
    client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return GeminiProvider(client, _FakeTypes, text_model="text-model", image_model="image-model")


def test_extract_inline_image_skips_text_parts() -> None:
    response = _response(
        SimpleNamespace(text="here you go", inline_data=None),
        SimpleNamespace(inline_data=SimpleNamespace(data=b"img", mime_type="image/jpeg")),
    )
    image = extract_inline_image(response)
    assert image.mime_type == "image/jpeg"
    assert image.data == b"img"


def test_extract_inline_image_defaults_mime_type() -> None:
    response = _response(SimpleNamespace(inline_data=SimpleNamespace(data=b"img", mime_type=None)))
    assert extract_inline_image(response).mime_type == "image/png"


def test_extract_inline_image_none_when_absent() -> None:
    assert extract_inline_image(_response(SimpleNamespace(text="no image"))) is None
    assert extract_inline_image(SimpleNamespace(candidates=None)) is None


def test_extract_text_falls_back_to_parts() -> None:
    assert extract_text(_response(SimpleNamespace(text=" [] "))) == "[]"


def test_generate_json_requests_schema() -> None:
    models = _FakeModels(response=_response(text="[]"))
    result = asyncio.run(_gemini(models).generate_json("prompt", CONCEPTS_RESPONSE_SCHEMA))
    assert result == "[]"
    config = models.calls[0]["config"]
    assert models.calls[0]["model"] == "text-model"
    assert config["response_mime_type"] == "application/json"
    assert config["response_schema"] is CONCEPTS_RESPONSE_SCHEMA


def test_generate_image_wraps_transport_errors() -> None:
    models = _FakeModels(error=ConnectionError("reset by peer"))
    with pytest.raises(ProviderGenerationError) as exc:
        asyncio.run(_gemini(models).generate_image("prompt"))
    assert "image-model" in str(exc.value)


def test_developer_provider_requires_api_key(monkeypatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        GeminiDeveloperProvider(text_model="t", image_model="i")


def test_factory_builds_mock_and_rejects_unknown_modes() -> None:
    assert isinstance(create_provider("mock", "developer", "t", "i"), MockGenerativeProvider)
    with pytest.raises(ValueError):
        create_provider("other", "developer", "t", "i")


def test_mock_concepts_follow_schema() -> None:
    raw = asyncio.run(MockGenerativeProvider().generate_json("prompt", CONCEPTS_RESPONSE_SCHEMA))
    concepts = json.loads(raw)
    assert len(concepts) == 3
    required = CONCEPTS_RESPONSE_SCHEMA["items"]["required"]
    for concept in concepts:
        assert set(required) <= set(concept)
