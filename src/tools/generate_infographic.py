"""MCP tool that turns a repository or article into an infographic.

Registers 'generate_infographic' which prepares a prompt through an
InfographicSource, asks the image model for a PNG, saves it to disk,
records it in the in-memory history and returns it as ImageContent.
"""

from __future__ import annotations

import base64
import json
from typing import List, Optional, Union

from mcp.server.fastmcp import FastMCP
from mcp.types import ImageContent, TextContent

from clients.github import GitHubClient
from config import INFOGRAPHIC_OUT_DIR, PROJECT_ROOT
from core.errors import GenerationError
from core.history import HistoryStore, new_history_id
from core.interfaces import ImageModel
from core.logging import get_logger
from core.models import HistoryItem, SourceKind
from core.output import sanitize_filename_stem, save_png
from sources.source_factory import get_infographic_source

logger = get_logger("tools.generate")


def register(
    mcp: FastMCP,
    *,
    github_client: GitHubClient,
    model: ImageModel,
    history: HistoryStore,
) -> None:
    @mcp.tool(name="generate_infographic")
    async def generate_infographic(
        target: str,
        style: Optional[str] = None,
        language: str = "English",
        is_3d: bool = False,
        kind: Optional[SourceKind] = None,
    ) -> List[Union[TextContent, ImageContent]]:
        """Generate an infographic for a GitHub repository or a web article.

        Params:
          - target: "owner/repo", a GitHub URL, or an article URL.
          - style: preset name (see infographic://styles/*) or free-text style.
          - language: language for all text in the image (default: English).
          - is_3d: repository only; render as a tabletop 3D diorama.
          - kind: force "repo" or "article" instead of detecting from target.
            Any github.com/<a>/<b> URL is detected as a repository, so use
            kind="article" for other GitHub pages (e.g. github.com/features/copilot).

        Returns:
          A JSON text block (history id, title, citations, saved path) and
          the PNG image.

        Raises:
          ValidationError, RateLimitedError, NotFoundError from the source;
          GenerationError when the model returns no image.
        """
        source = get_infographic_source(target, kind=kind, github_client=github_client, model=model)
        prepared = await source.prepare(style=style, language=language, is_3d=is_3d)

        png = await model.generate_image(prepared.prompt)
        if not png:
            raise GenerationError("Failed to generate visual.")

        item = HistoryItem(
            id=new_history_id(),
            kind=prepared.kind,
            title=prepared.title,
            source=prepared.source,
            image_png=png,
            style=prepared.style,
            language=prepared.language,
            is_3d=prepared.is_3d,
            files=prepared.files,
            citations=prepared.citations,
        )

        suffix = "_3d" if prepared.is_3d else ""
        stem = f"{sanitize_filename_stem(prepared.title)}{suffix}_{item.id}"
        path = save_png(png, project_root=PROJECT_ROOT, out_dir=INFOGRAPHIC_OUT_DIR, stem=stem)

        history.add(item)
        logger.info("Generated %s infographic %s for %s", prepared.kind, item.id, prepared.source)

        meta = {**item.summary(), "saved_to": str(path)}
        return [
            TextContent(type="text", text=json.dumps(meta, ensure_ascii=False)),
            ImageContent(
                type="image",
                mimeType="image/png",
                data=base64.b64encode(png).decode("ascii"),
            ),
        ]
