"""MCP tool that re-styles an image with a text instruction.

The image comes from the history or from a base64 payload; the result is
saved, recorded in the history and returned as ImageContent.
"""

from __future__ import annotations

import base64
import json
from typing import List, Optional, Union

from mcp.server.fastmcp import FastMCP
from mcp.types import ImageContent, TextContent

from config import INFOGRAPHIC_OUT_DIR, PROJECT_ROOT
from core.errors import GenerationError, NotFoundError, ValidationError
from core.history import HistoryStore, new_history_id
from core.interfaces import ImageModel
from core.models import HistoryItem
from core.output import decode_base64_image, sanitize_filename_stem, save_png


def register(mcp: FastMCP, *, model: ImageModel, history: HistoryStore) -> None:
    @mcp.tool(name="edit_image")
    async def edit_image(
        prompt: str,
        history_id: Optional[str] = None,
        image_base64: Optional[str] = None,
        mime_type: str = "image/png",
    ) -> List[Union[TextContent, ImageContent]]:
        """Re-style an image following a text instruction.

        Params:
          - prompt: the edit instruction, e.g. "make it look like a watercolor".
          - history_id: edit an image from the history, or
          - image_base64: edit an uploaded image (base64, data: URLs accepted).
          - mime_type: mime type of the uploaded image (default: image/png).
        """
        instruction = (prompt or "").strip()
        if not instruction:
            raise ValidationError("Missing edit prompt")

        if history_id:
            base = history.get(history_id)
            if base is None:
                raise NotFoundError(f"No image in history with id: {history_id}")
            image, mime, title = base.image_png, "image/png", base.title
        elif image_base64:
            image, mime, title = decode_base64_image(image_base64), (mime_type or "image/png"), "edited-image"
        else:
            raise ValidationError("Provide history_id or image_base64")

        png = await model.generate_image(instruction, image=image, mime_type=mime)
        if not png:
            raise GenerationError("Could not generate edited image.")

        item = HistoryItem(
            id=new_history_id(),
            kind="edit",
            title=title,
            source=history_id or "upload",
            image_png=png,
            style=instruction,
        )
        stem = f"{sanitize_filename_stem(title)}_edit_{item.id}"
        path = save_png(png, project_root=PROJECT_ROOT, out_dir=INFOGRAPHIC_OUT_DIR, stem=stem)
        history.add(item)

        meta = {**item.summary(), "saved_to": str(path)}
        return [
            TextContent(type="text", text=json.dumps(meta, ensure_ascii=False)),
            ImageContent(type="image", mimeType="image/png", data=base64.b64encode(png).decode("ascii")),
        ]
