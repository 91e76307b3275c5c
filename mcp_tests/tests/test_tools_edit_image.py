import base64
import json

import pytest

from core.errors import GenerationError, NotFoundError, ValidationError
from tools import edit_image as edit_tool


@pytest.fixture
def out_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(edit_tool, "PROJECT_ROOT", tmp_path)
    monkeypatch.setattr(edit_tool, "INFOGRAPHIC_OUT_DIR", "infographics")
    return tmp_path / "infographics"


@pytest.mark.asyncio
async def test_edit_history_image(dummy_mcp, fake_model, history, repo_item, out_dir):
    fake_model.image = b"EDITED"
    history.add(repo_item)
    edit_tool.register(dummy_mcp, model=fake_model, history=history)

    text, image = await dummy_mcp.tools["edit_image"](prompt="make it retro", history_id="abc123")

    meta = json.loads(text.text)
    assert meta["kind"] == "edit"
    assert meta["source"] == "abc123"
    assert base64.b64decode(image.data) == b"EDITED"
    assert history.get(meta["id"]).image_png == b"EDITED"
    assert (out_dir / f"Hello-World_edit_{meta['id']}.png").read_bytes() == b"EDITED"

    kind, prompt, src_image, mime = fake_model.calls[0]
    assert (kind, prompt, src_image, mime) == ("image", "make it retro", b"IMG", "image/png")


@pytest.mark.asyncio
async def test_edit_uploaded_image(dummy_mcp, fake_model, history, out_dir):
    edit_tool.register(dummy_mcp, model=fake_model, history=history)
    payload = "data:image/jpeg;base64," + base64.b64encode(b"JPEG").decode("ascii")

    await dummy_mcp.tools["edit_image"](prompt="sketch", image_base64=payload, mime_type="image/jpeg")

    _, _, src_image, mime = fake_model.calls[0]
    assert src_image == b"JPEG"
    assert mime == "image/jpeg"
    assert len(history) == 1


@pytest.mark.asyncio
async def test_edit_validation(dummy_mcp, fake_model, history, out_dir):
    edit_tool.register(dummy_mcp, model=fake_model, history=history)
    fn = dummy_mcp.tools["edit_image"]

    with pytest.raises(ValidationError):
        await fn(prompt="  ", history_id="abc123")
    with pytest.raises(ValidationError):
        await fn(prompt="retro")
    with pytest.raises(NotFoundError):
        await fn(prompt="retro", history_id="missing")


@pytest.mark.asyncio
async def test_edit_without_result_raises(dummy_mcp, fake_model, history, repo_item, out_dir):
    fake_model.image = None
    history.add(repo_item)
    edit_tool.register(dummy_mcp, model=fake_model, history=history)

    with pytest.raises(GenerationError) as e:
        await dummy_mcp.tools["edit_image"](prompt="retro", history_id="abc123")
    assert "Could not generate edited image." in str(e.value)
    assert len(history) == 1
