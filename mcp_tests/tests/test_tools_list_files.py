import pytest

from core.errors import RateLimitedError, ValidationError
from core.models import TreeEntry
from tools import list_files as list_files_tool


class FakeGitHubClient:
    def __init__(self, entries=None, error=None):
        self._entries = entries or []
        self._error = error
        self.calls = []

    async def resolve(self, owner: str, repo: str):
        self.calls.append((owner, repo))
        if self._error is not None:
            raise self._error
        return list(self._entries)


@pytest.mark.asyncio
async def test_list_repo_files_validates_input(dummy_mcp):
    list_files_tool.register(dummy_mcp, github_client=FakeGitHubClient())
    fn = dummy_mcp.tools["list_repo_files"]

    with pytest.raises(ValidationError):
        await fn(repo="not-a-repo")


@pytest.mark.asyncio
async def test_list_repo_files_returns_paths(dummy_mcp):
    fake = FakeGitHubClient(entries=[TreeEntry("a.py", "blob"), TreeEntry("b/c.ts", "blob")])
    list_files_tool.register(dummy_mcp, github_client=fake)
    fn = dummy_mcp.tools["list_repo_files"]

    out = await fn(repo="https://github.com/octocat/Hello-World")

    assert out == ["a.py", "b/c.ts"]
    assert fake.calls == [("octocat", "Hello-World")]


@pytest.mark.asyncio
async def test_list_repo_files_propagates_rate_limit(dummy_mcp):
    list_files_tool.register(dummy_mcp, github_client=FakeGitHubClient(error=RateLimitedError("wait")))
    fn = dummy_mcp.tools["list_repo_files"]

    with pytest.raises(RateLimitedError):
        await fn(repo="o/r")
