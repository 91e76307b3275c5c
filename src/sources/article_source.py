"""Web article InfographicSource.

Two phases: a search-grounded analysis call plans the content (headline,
takeaways, visual metaphor) and collects citations; the plan then becomes
the image prompt. A failed analysis degrades to a direct URL prompt.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from core.errors import ExternalServiceError, ValidationError
from core.interfaces import ImageModel
from core.logging import get_logger
from core.models import PreparedInfographic
from prompts.infographic_prompt import (
    article_fallback_summary,
    build_article_analysis_prompt,
    build_article_image_prompt,
)
from prompts.styles import ARTICLE_STYLES, DEFAULT_ARTICLE_STYLE, normalize_language, resolve_style

logger = get_logger("sources.article")


def article_title(url: str) -> str:
    host = urlparse(url).hostname
    return host or url


class ArticleSource:
    def __init__(self, *, model: ImageModel, url: str) -> None:
        self._model = model
        self._url = (url or "").strip()

        parsed = urlparse(self._url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValidationError("Article URL must be an http(s) URL")

    async def prepare(
        self,
        *,
        style: Optional[str] = None,
        language: str = "English",
        is_3d: bool = False,
    ) -> PreparedInfographic:
        lang = normalize_language(language)

        logger.info("Researching and analyzing %s", self._url)
        try:
            summary, citations = await self._model.analyze_with_search(
                build_article_analysis_prompt(self._url, lang)
            )
        except ExternalServiceError as e:
            logger.warning("Content analysis failed, falling back to direct URL prompt: %s", e)
            summary, citations = "", []

        if not summary.strip():
            summary = article_fallback_summary(self._url, lang)

        style_name, _ = resolve_style(style, ARTICLE_STYLES, DEFAULT_ARTICLE_STYLE)

        logger.info("Designing infographic for %s", self._url)
        return PreparedInfographic(
            kind="article",
            title=article_title(self._url),
            source=self._url,
            prompt=build_article_image_prompt(summary, style, lang),
            style=style_name,
            language=lang,
            citations=tuple(citations),
        )
