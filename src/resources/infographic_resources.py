# src/resources/infographic_resources.py

import json

from mcp.server.fastmcp import FastMCP

from core.history import HistoryStore
from prompts.styles import (
    ARTICLE_STYLES,
    DEFAULT_ARTICLE_STYLE,
    DEFAULT_REPO_STYLE,
    LANGUAGES,
    REPO_STYLES,
)


def _styles_payload(presets: dict, default: str) -> str:
    return json.dumps(
        {
            "default": default,
            "presets": [{"name": name, "description": text} for name, text in presets.items()],
            "custom": "Any other text is used verbatim as the style.",
        },
        indent=2,
    )


def register_resources(mcp: FastMCP, *, history: HistoryStore) -> None:
    """
    Register style, language and history resources for the MCP server.
    """

    @mcp.resource(
        "infographic://styles/repo",
        mime_type="application/json",
        description="Style presets for repository data-flow infographics",
    )
    def repo_styles() -> str:
        return _styles_payload(REPO_STYLES, DEFAULT_REPO_STYLE)

    @mcp.resource(
        "infographic://styles/article",
        mime_type="application/json",
        description="Style presets for article infographics",
    )
    def article_styles() -> str:
        return _styles_payload(ARTICLE_STYLES, DEFAULT_ARTICLE_STYLE)

    @mcp.resource(
        "infographic://languages",
        mime_type="application/json",
        description="Languages supported for infographic text",
    )
    def languages() -> str:
        return json.dumps([{"label": label, "value": value} for label, value in LANGUAGES], indent=2)

    @mcp.resource(
        "infographic://history",
        mime_type="application/json",
        description="Infographics generated in this session, newest first (metadata only)",
    )
    def history_items() -> str:
        return json.dumps([item.summary() for item in history.list()], indent=2, ensure_ascii=False)
