from __future__ import annotations

from typing import Optional

from clients.github import GitHubClient, parse_repo_input
from core.errors import ValidationError
from core.logging import get_logger
from core.models import PreparedInfographic, RepositoryReference
from prompts.infographic_prompt import QUESTION_FILE_LIMIT, build_repo_infographic_prompt
from prompts.styles import DEFAULT_REPO_STYLE, REPO_STYLES, normalize_language, resolve_style


"""GitHub repository InfographicSource.

- Resolves the filtered file tree through GitHubClient.
- Keeps a truncated copy of the file list for follow-up questions.
"""

logger = get_logger("sources.repo")


class RepoSource:
    def __init__(self, *, client: GitHubClient, repo_input: str = "", reference: Optional[RepositoryReference] = None) -> None:
        self._client = client
        self._reference = reference or parse_repo_input(repo_input)

    @property
    def reference(self) -> RepositoryReference:
        return self._reference

    async def prepare(
        self,
        *,
        style: Optional[str] = None,
        language: str = "English",
        is_3d: bool = False,
    ) -> PreparedInfographic:
        ref = self._reference
        logger.info("Connecting to GitHub for %s", ref.full_name)
        entries = await self._client.resolve(ref.owner, ref.repo)
        if not entries:
            raise ValidationError("No relevant code files found in this repository.")

        files = tuple(e.path for e in entries)
        style_name, _ = resolve_style(style, REPO_STYLES, DEFAULT_REPO_STYLE)
        lang = normalize_language(language)

        logger.info("Analyzing structure of %s (%d files)", ref.full_name, len(files))
        return PreparedInfographic(
            kind="repo",
            title=ref.repo,
            source=ref.full_name,
            prompt=build_repo_infographic_prompt(ref.repo, files, style, is_3d=is_3d, language=lang),
            style=style_name,
            language=lang,
            files=files[:QUESTION_FILE_LIMIT],
            is_3d=is_3d,
        )
