"""MCP tools answering follow-up questions about a repository infographic.

Both tools work from a history item, which carries the generated image and
the truncated file list retained when the infographic was made.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from core.errors import NotFoundError, ValidationError
from core.history import HistoryStore
from core.interfaces import ImageModel
from core.models import HistoryItem
from prompts.infographic_prompt import NO_ANSWER, build_node_question_prompt, build_repo_question_prompt


def _repo_item(history: HistoryStore, history_id: str) -> HistoryItem:
    item = history.get(history_id)
    if item is None:
        raise NotFoundError(f"No infographic in history with id: {history_id}")
    if item.kind != "repo":
        raise ValidationError("Questions are only supported for repository infographics")
    return item


def _require(value: str, name: str) -> str:
    clean = (value or "").strip()
    if not clean:
        raise ValidationError(f"Missing {name}")
    return clean


def register(mcp: FastMCP, *, model: ImageModel, history: HistoryStore) -> None:
    @mcp.tool(name="ask_infographic_question")
    async def ask_infographic_question(history_id: str, question: str) -> str:
        """Answer a question using a repository infographic and its file structure.

        Params:
          - history_id: id returned by generate_infographic.
          - question: what to ask (architecture, bottlenecks, where things live...).
        """
        q = _require(question, "question")
        item = _repo_item(history, history_id)

        answer = await model.generate_text(
            build_repo_question_prompt(q, item.files),
            image=item.image_png,
            mime_type="image/png",
        )
        return answer or NO_ANSWER

    @mcp.tool(name="ask_node_question")
    async def ask_node_question(history_id: str, node_label: str, question: str) -> str:
        """Answer a question about one component (graph node) of a repository.

        Params:
          - history_id: id of the repository infographic supplying the file list.
          - node_label: label of the component, e.g. "AuthService".
          - question: what to ask about it.
        """
        label = _require(node_label, "node_label")
        q = _require(question, "question")
        item = _repo_item(history, history_id)

        answer = await model.generate_text(build_node_question_prompt(label, q, item.files))
        return answer or NO_ANSWER
