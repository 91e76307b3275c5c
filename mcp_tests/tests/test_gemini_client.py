from types import SimpleNamespace

import httpx
import pytest
from google.genai import errors as genai_errors

from clients.gemini_client import GeminiClient, extract_citations, extract_image_bytes
from core.errors import ExternalServiceError, ValidationError


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


def _sdk(models: FakeModels):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


def _client(models: FakeModels) -> GeminiClient:
    return GeminiClient(api_key=None, image_model="img-model", text_model="txt-model", client=_sdk(models))


def _image_response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def _inline(data):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="image/png"))


def test_extract_image_bytes_skips_text_parts():
    resp = _image_response(SimpleNamespace(inline_data=None, text="hi"), _inline(b"PNG"))
    assert extract_image_bytes(resp) == b"PNG"
    assert extract_image_bytes(SimpleNamespace(candidates=[])) is None
    assert extract_image_bytes(SimpleNamespace(candidates=None)) is None


def test_extract_citations_dedupes_by_uri():
    def chunk(uri, title):
        return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))

    resp = SimpleNamespace(
        candidates=[
            SimpleNamespace(
                grounding_metadata=SimpleNamespace(
                    grounding_chunks=[
                        chunk("https://a", "A"),
                        chunk("https://b", None),
                        chunk("https://a", "A2"),
                        SimpleNamespace(web=None),
                    ]
                )
            )
        ]
    )
    out = extract_citations(resp)
    assert [(c.uri, c.title) for c in out] == [("https://a", "A2"), ("https://b", "")]


@pytest.mark.asyncio
async def test_generate_image_requests_image_modality():
    models = FakeModels(response=_image_response(_inline(b"PNG")))
    out = await _client(models).generate_image("draw it")

    assert out == b"PNG"
    call = models.calls[0]
    assert call["model"] == "img-model"
    assert call["config"].response_modalities == ["IMAGE"]
    assert call["contents"][-1].text == "draw it"


@pytest.mark.asyncio
async def test_generate_image_with_source_image_sends_bytes_first():
    models = FakeModels(response=_image_response(_inline(b"EDITED")))
    out = await _client(models).generate_image("watercolor", image=b"ORIG", mime_type="image/jpeg")

    assert out == b"EDITED"
    first, second = models.calls[0]["contents"]
    assert first.inline_data.data == b"ORIG"
    assert first.inline_data.mime_type == "image/jpeg"
    assert second.text == "watercolor"


@pytest.mark.asyncio
async def test_generate_image_returns_none_without_image():
    models = FakeModels(response=_image_response(SimpleNamespace(inline_data=None)))
    assert await _client(models).generate_image("draw it") is None


@pytest.mark.asyncio
async def test_generate_text_uses_text_model():
    models = FakeModels(response=SimpleNamespace(text="42"))
    assert await _client(models).generate_text("question?") == "42"
    assert models.calls[0]["model"] == "txt-model"
    assert models.calls[0]["config"] is None


@pytest.mark.asyncio
async def test_generate_text_empty_answer_is_empty_string():
    models = FakeModels(response=SimpleNamespace(text=None))
    assert await _client(models).generate_text("question?") == ""


@pytest.mark.asyncio
async def test_analyze_with_search_enables_google_search():
    response = SimpleNamespace(
        text="PLAN",
        candidates=[
            SimpleNamespace(
                grounding_metadata=SimpleNamespace(
                    grounding_chunks=[SimpleNamespace(web=SimpleNamespace(uri="https://s", title="S"))]
                )
            )
        ],
    )
    models = FakeModels(response=response)
    text, citations = await _client(models).analyze_with_search("analyze")

    assert text == "PLAN"
    assert [c.uri for c in citations] == ["https://s"]
    tools = models.calls[0]["config"].tools
    assert tools and tools[0].google_search is not None


@pytest.mark.asyncio
async def test_api_error_is_wrapped():
    err = genai_errors.ServerError(500, {"error": {"code": 500, "message": "backend", "status": "INTERNAL"}})
    with pytest.raises(ExternalServiceError):
        await _client(FakeModels(error=err)).generate_text("q")


@pytest.mark.asyncio
async def test_entity_not_found_maps_to_billing_hint():
    err = genai_errors.ClientError(
        404, {"error": {"code": 404, "message": "Requested entity was not found.", "status": "NOT_FOUND"}}
    )
    with pytest.raises(ExternalServiceError) as e:
        await _client(FakeModels(error=err)).generate_image("draw")
    assert "BILLING REQUIRED" in str(e.value)


@pytest.mark.asyncio
async def test_missing_api_key_raises_validation_error():
    client = GeminiClient(api_key="  ", image_model="i", text_model="t")
    with pytest.raises(ValidationError):
        await client.generate_text("q")


@pytest.mark.asyncio
async def test_empty_prompt_raises():
    with pytest.raises(ValidationError):
        await _client(FakeModels()).generate_image("   ")


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [httpx.ConnectTimeout("timed out"), httpx.ReadTimeout("timed out")])
async def test_transport_error_is_wrapped(error):
    with pytest.raises(ExternalServiceError) as e:
        await _client(FakeModels(error=error)).generate_text("q")
    assert "timed out" in str(e.value)
    assert e.value.__cause__ is error
