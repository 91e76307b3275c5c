"""Gemini client: image generation, multimodal Q&A and search-grounded analysis.

Thin async wrapper over the google-genai SDK. The API key is passed in by
the caller; the SDK client is created lazily so the server can start (and
list files) without one.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from core.errors import ExternalServiceError, ValidationError
from core.logging import get_logger
from core.models import Citation

logger = get_logger("gemini")

BILLING_HINT = (
    "BILLING REQUIRED: The current API key does not have access to these models. "
    "This feature requires a paid Google Cloud Project. Please switch to a valid paid API Key."
)


def _first_candidate(response: Any) -> Any:
    candidates = getattr(response, "candidates", None) or []
    return candidates[0] if candidates else None


def extract_image_bytes(response: Any) -> Optional[bytes]:
    """Return the first inline image payload of a response, if any."""
    candidate = _first_candidate(response)
    content = getattr(candidate, "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        data = getattr(inline, "data", None)
        if data:
            return bytes(data)
    return None


def extract_citations(response: Any) -> List[Citation]:
    """Web grounding chunks as citations, de-duplicated by URI."""
    candidate = _first_candidate(response)
    metadata = getattr(candidate, "grounding_metadata", None)
    chunks: Iterable[Any] = getattr(metadata, "grounding_chunks", None) or []

    unique: dict[str, Citation] = {}
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if uri:
            # Later duplicates replace earlier ones; dict keeps first-seen order
            unique[uri] = Citation(uri=uri, title=getattr(web, "title", None) or "")
    return list(unique.values())


class GeminiClient:
    def __init__(
        self,
        *,
        api_key: Optional[str],
        image_model: str,
        text_model: str,
        timeout: float = 120.0,
        client: Optional[Any] = None,
    ) -> None:
        self._api_key = (api_key or "").strip()
        self._image_model = image_model
        self._text_model = text_model
        self._timeout = float(timeout)
        self._client = client

    def _sdk(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise ValidationError(
                    "Missing Gemini API key. Set GEMINI_API_KEY before generating infographics."
                )
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=types.HttpOptions(timeout=int(self._timeout * 1000)),
            )
        return self._client

    def _parts(self, prompt: str, image: Optional[bytes], mime_type: str) -> List[types.Part]:
        text = (prompt or "").strip()
        if not text:
            raise ValidationError("Prompt is empty")
        parts: List[types.Part] = []
        if image is not None:
            parts.append(types.Part.from_bytes(data=image, mime_type=mime_type))
        parts.append(types.Part.from_text(text=text))
        return parts

    async def _generate(self, *, model: str, contents: Any, config: Optional[types.GenerateContentConfig], context: str) -> Any:
        try:
            return await self._sdk().aio.models.generate_content(model=model, contents=contents, config=config)
        except genai_errors.APIError as e:
            if "Requested entity was not found" in str(e):
                raise ExternalServiceError(BILLING_HINT) from e
            raise ExternalServiceError(f"Gemini request failed ({context}): {e}") from e
        except httpx.HTTPError as e:
            # SDK transport failures surface as raw httpx errors
            raise ExternalServiceError(f"Gemini request failed ({context}): {e}") from e

    async def generate_image(
        self,
        prompt: str,
        *,
        image: Optional[bytes] = None,
        mime_type: str = "image/png",
    ) -> Optional[bytes]:
        """Generate (or re-style, when `image` is given) an image; None if the model returned none."""
        response = await self._generate(
            model=self._image_model,
            contents=self._parts(prompt, image, mime_type),
            config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            context="image" if image is None else "image edit",
        )
        data = extract_image_bytes(response)
        if data is None:
            logger.warning("Model %s returned no image data", self._image_model)
        return data

    async def generate_text(
        self,
        prompt: str,
        *,
        image: Optional[bytes] = None,
        mime_type: str = "image/png",
    ) -> str:
        response = await self._generate(
            model=self._text_model,
            contents=self._parts(prompt, image, mime_type),
            config=None,
            context="text",
        )
        return getattr(response, "text", None) or ""

    async def analyze_with_search(self, prompt: str) -> Tuple[str, List[Citation]]:
        """Search-grounded analysis; returns the text and the grounding citations."""
        # No response schema or mime type may be set together with tools
        config = types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())])
        response = await self._generate(
            model=self._image_model,
            contents=self._parts(prompt, None, "text/plain"),
            config=config,
            context="analysis",
        )
        return getattr(response, "text", None) or "", extract_citations(response)
