"""MCP tool that lists the relevant source files of a GitHub repository.

Registers the 'list_repo_files' tool which adapts GitHubClient.resolve to
the MCP tool interface used by prompts and agents.
"""

from __future__ import annotations

from typing import List

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient, parse_repo_input


def register(mcp: FastMCP, *, github_client: GitHubClient) -> None:
    @mcp.tool(name="list_repo_files")
    async def list_repo_files(repo: str) -> List[str]:
        """List the source/config files of a GitHub repository.

        The default branch is found by trying "main" then "master". Vendor,
        build-output and hidden paths are dropped, as are files that are not
        source code or structured config.

        Params:
          - repo: "owner/repo" or a full GitHub URL.

        Returns:
          File paths in the order reported by GitHub.

        Raises:
          ValidationError for a malformed repo; RateLimitedError when GitHub
          throttles (wait and retry later); NotFoundError listing the branches
          tried when none of them exists.
        """
        ref = parse_repo_input(repo)
        entries = await github_client.resolve(ref.owner, ref.repo)
        return [e.path for e in entries]
