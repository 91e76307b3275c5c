"""Server bootstrap for the repo infographic MCP service.

Creates the FastMCP instance, builds credentials and clients once, wires
them into the tools, registers resources and prompts, and starts the MCP
server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from clients.gemini_client import GeminiClient
from clients.github import GitHubClient
from config import (
    GEMINI_IMAGE_MODEL,
    GEMINI_TEXT_MODEL,
    GEMINI_TIMEOUT,
    GITHUB_TIMEOUT,
    HISTORY_MAX_ITEMS,
    HTTP_VERIFY,
    LOG_LEVEL,
    load_credentials,
)
from core.history import HistoryStore
from core.logging import configure_logging

from tools.list_files import register as register_list_files
from tools.generate_infographic import register as register_generate_infographic
from tools.ask_question import register as register_ask_question
from tools.edit_image import register as register_edit_image

from resources.infographic_resources import register_resources
from prompts.infographic_prompt import register_prompts

mcp = FastMCP("repo-infographic")

history = HistoryStore(maxsize=HISTORY_MAX_ITEMS)


def register_tools() -> None:
    credentials = load_credentials()
    github_client = GitHubClient(token=credentials.github_token, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)
    gemini_client = GeminiClient(
        api_key=credentials.gemini_api_key,
        image_model=GEMINI_IMAGE_MODEL,
        text_model=GEMINI_TEXT_MODEL,
        timeout=GEMINI_TIMEOUT,
    )

    register_list_files(mcp, github_client=github_client)
    register_generate_infographic(mcp, github_client=github_client, model=gemini_client, history=history)
    register_ask_question(mcp, model=gemini_client, history=history)
    register_edit_image(mcp, model=gemini_client, history=history)


def register_all() -> None:
    register_tools()
    register_resources(mcp, history=history)
    register_prompts(mcp)


register_all()


def main() -> None:
    configure_logging(level=LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
