"""Tests for navigation and element helpers."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from viewshot import navigation
from viewshot.config import Config
from viewshot.errors import NavigationError, StatusCodeMismatchError
from viewshot.navigation import (
    STATUS_NOT_FOUND,
    STATUS_OK,
    click_on_element,
    get_hostname_by_selector,
    get_link_by_selector,
    get_value_by_selector,
    goto,
    sleep,
    tap_on_element,
)


def page_with_response(status):
    page = MagicMock()
    response = MagicMock()
    response.status = status
    page.goto = AsyncMock(return_value=response)
    return page


class TestGoto:

    @pytest.mark.asyncio
    async def test_expected_status_returns_page(self):
        page = page_with_response(200)

        result = await goto(page, "https://example.com/", config=Config(timeout_ms=1234))

        assert result is page
        page.goto.assert_awaited_once_with(
            "https://example.com/", timeout=1234, wait_until="domcontentloaded"
        )

    @pytest.mark.asyncio
    async def test_status_mismatch_raises(self):
        page = page_with_response(404)

        with pytest.raises(StatusCodeMismatchError) as exc_info:
            await goto(page, "https://example.com/missing", STATUS_OK)

        error = exc_info.value
        assert isinstance(error, AssertionError)
        assert isinstance(error, NavigationError)
        assert error.expected == 200
        assert error.received == 404
        message = str(error)
        assert "https://example.com/missing" in message
        assert "200" in message and "404" in message

    @pytest.mark.asyncio
    async def test_expected_error_status(self):
        page = page_with_response(404)

        assert await goto(page, "https://example.com/missing", STATUS_NOT_FOUND) is page

    @pytest.mark.asyncio
    async def test_status_compared_as_text(self):
        page = page_with_response(201)

        assert await goto(page, "https://example.com/", "201") is page

    @pytest.mark.asyncio
    async def test_empty_response(self):
        page = MagicMock()
        page.goto = AsyncMock(return_value=None)

        with pytest.raises(NavigationError, match="Response empty"):
            await goto(page, "https://example.com/")

    @pytest.mark.asyncio
    async def test_playwright_errors_pass_through(self):
        page = MagicMock()
        page.goto = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 30000ms exceeded."))

        with pytest.raises(PlaywrightTimeoutError):
            await goto(page, "https://example.com/")


class TestClickAndTap:

    @pytest.mark.asyncio
    async def test_click_success(self, monkeypatch):
        waits = AsyncMock()
        monkeypatch.setattr(navigation, "sleep", waits)
        page = MagicMock()
        page.click = AsyncMock()

        assert await click_on_element(page, "#accept", delay_after=300) is True

        page.click.assert_awaited_once_with("#accept", timeout=1000)
        waits.assert_awaited_once_with(300)

    @pytest.mark.asyncio
    async def test_click_missing_element_still_waits(self, monkeypatch, caplog):
        waits = AsyncMock()
        monkeypatch.setattr(navigation, "sleep", waits)
        page = MagicMock()
        page.click = AsyncMock(side_effect=PlaywrightTimeoutError("waiting for locator('#nope')"))

        with caplog.at_level("WARNING", logger="viewshot.navigation"):
            clicked = await click_on_element(page, "#nope", delay_after=500)

        assert clicked is False
        waits.assert_awaited_once_with(500)
        assert 'Element not found or hidden "#nope"' in caplog.text

    @pytest.mark.asyncio
    async def test_tap_missing_element_still_waits(self, monkeypatch):
        waits = AsyncMock()
        monkeypatch.setattr(navigation, "sleep", waits)
        page = MagicMock()
        page.tap = AsyncMock(side_effect=PlaywrightError("The page does not support tap"))

        assert await tap_on_element(page, ".menu", delay_after=100) is False
        waits.assert_awaited_once_with(100)

    @pytest.mark.asyncio
    async def test_tap_success(self):
        page = MagicMock()
        page.tap = AsyncMock()

        assert await tap_on_element(page, ".menu", timeout_ms=2000) is True
        page.tap.assert_awaited_once_with(".menu", timeout=2000)


class TestSelectorValues:

    @pytest.mark.asyncio
    async def test_link(self):
        page = MagicMock()
        page.eval_on_selector = AsyncMock(return_value="https://example.com/about")

        assert await get_link_by_selector(page, "a.about") == "https://example.com/about"
        page.eval_on_selector.assert_awaited_once_with("a.about", "link => link.href")

    @pytest.mark.asyncio
    async def test_hostname(self):
        page = MagicMock()
        page.eval_on_selector = AsyncMock(return_value="example.com")

        assert await get_hostname_by_selector(page, "a") == "example.com"
        page.eval_on_selector.assert_awaited_once_with("a", "link => link.hostname")

    @pytest.mark.asyncio
    async def test_value(self):
        page = MagicMock()
        page.eval_on_selector = AsyncMock(return_value="<b>Hi</b>")

        assert await get_value_by_selector(page, "h1") == "<b>Hi</b>"
        page.eval_on_selector.assert_awaited_once_with("h1", "el => el.innerHTML")

    @pytest.mark.asyncio
    async def test_missing_element_raises(self):
        page = MagicMock()
        page.eval_on_selector = AsyncMock(side_effect=PlaywrightError("failed to find element matching selector"))

        with pytest.raises(PlaywrightError):
            await get_value_by_selector(page, "#missing")


@pytest.mark.asyncio
async def test_sleep_zero_and_negative():
    await sleep(0)
    await sleep(-10)
