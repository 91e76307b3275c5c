import json

from core.models import HistoryItem
from resources.infographic_resources import register_resources


def test_style_and_language_resources(dummy_mcp, history):
    register_resources(dummy_mcp, history=history)

    repo = json.loads(dummy_mcp.resources["infographic://styles/repo"]())
    assert repo["default"] == "Modern Data Flow"
    assert "Neon Cyberpunk" in [p["name"] for p in repo["presets"]]

    article = json.loads(dummy_mcp.resources["infographic://styles/article"]())
    assert article["default"] == "Modern Editorial"

    languages = json.loads(dummy_mcp.resources["infographic://languages"]())
    assert {"label": "English (US)", "value": "English"} in languages


def test_history_resource_lists_newest_first(dummy_mcp, history, repo_item):
    register_resources(dummy_mcp, history=history)
    read = dummy_mcp.resources["infographic://history"]

    assert json.loads(read()) == []

    history.add(repo_item)
    history.add(HistoryItem(id="art1", kind="article", title="e.x", source="https://e.x", image_png=b"I"))

    items = json.loads(read())
    assert [i["id"] for i in items] == ["art1", "abc123"]
    assert "image_png" not in items[0]

    # Reading an older item (question, edit) does not reorder the listing
    assert history.get("abc123") is not None
    assert [i["id"] for i in json.loads(read())] == ["art1", "abc123"]
