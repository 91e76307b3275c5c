import pytest

from core.history import HistoryStore
from core.models import HistoryItem


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool, resource and prompt registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.resources = {}
        self.prompts = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator

    def resource(self, uri: str, **_kwargs):
        def _decorator(fn):
            self.resources[uri] = fn
            return fn
        return _decorator

    def prompt(self, *, name: str, **_kwargs):
        def _decorator(fn):
            self.prompts[name] = fn
            return fn
        return _decorator


class FakeModel:
    """ImageModel stand-in recording every call."""

    def __init__(self, *, image=b"PNG", text="answer", analysis=("PLAN", []), analysis_error=None):
        self.image = image
        self.text = text
        self.analysis = analysis
        self.analysis_error = analysis_error
        self.calls = []

    async def generate_image(self, prompt, *, image=None, mime_type="image/png"):
        self.calls.append(("image", prompt, image, mime_type))
        return self.image

    async def generate_text(self, prompt, *, image=None, mime_type="image/png"):
        self.calls.append(("text", prompt, image, mime_type))
        return self.text

    async def analyze_with_search(self, prompt):
        self.calls.append(("analysis", prompt))
        if self.analysis_error is not None:
            raise self.analysis_error
        return self.analysis


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def history():
    return HistoryStore(maxsize=10)


@pytest.fixture
def repo_item():
    return HistoryItem(
        id="abc123",
        kind="repo",
        title="Hello-World",
        source="octocat/Hello-World",
        image_png=b"IMG",
        style="Modern Data Flow",
        files=("src/app.py", "src/db.py"),
    )
