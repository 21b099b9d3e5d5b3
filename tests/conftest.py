"""
Shared fixtures: Playwright page doubles that write fake JPEGs.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from viewshot.config import Config


def make_page(body_box=None, browser_name="chromium", reload_side_effect=None, body_present=True):
    """Build a page double with the methods the sequencer uses."""
    if body_box is None:
        body_box = {"x": 0, "y": 0, "width": 1024.7, "height": 3000}

    page = MagicMock()
    page.set_viewport_size = AsyncMock()
    page.reload = AsyncMock(side_effect=reload_side_effect)

    async def screenshot(path=None, **kwargs):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        Path(path).write_bytes(b"\xff\xd8\xff\xe0")
        return b"\xff\xd8\xff\xe0"

    page.screenshot = AsyncMock(side_effect=screenshot)

    body = MagicMock()
    body.bounding_box = AsyncMock(return_value=body_box)
    body.dispose = AsyncMock()
    page.query_selector = AsyncMock(return_value=body if body_present else None)

    cdp = MagicMock()
    cdp.send = AsyncMock()
    page.context.new_cdp_session = AsyncMock(return_value=cdp)
    page.context.browser.browser_type.name = browser_name

    page.body_handle = body
    page.cdp = cdp
    return page


@pytest.fixture
def config(tmp_path):
    return Config(timeout_ms=5000, screenshot_dir=tmp_path / "screenshots")


@pytest.fixture
def page():
    return make_page()


@pytest.fixture
def page_factory():
    return make_page
