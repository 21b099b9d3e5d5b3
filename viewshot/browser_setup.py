#!/usr/bin/env python3
"""
Browser Setup - Browser launch and page creation.
"""
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from .config import Config

if TYPE_CHECKING:
    from playwright.async_api import Browser, Page, Playwright

logger = logging.getLogger(__name__)

# Needed to run Chromium inside containers
SANDBOX_ARGS = ["--no-sandbox", "--disable-setuid-sandbox", "--disable-dev-shm-usage"]

DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}


def get_playwright():
    """Playwright entry point, for callers driving Playwright directly."""
    from playwright.async_api import async_playwright
    return async_playwright()


async def launch(
    options: Optional[Dict[str, Any]] = None,
    playwright: Optional["Playwright"] = None,
    config: Optional[Config] = None,
) -> "Browser":
    """
    Launch a Chromium instance.

    Args:
        options: Playwright launch options; sandbox flags are always appended
        playwright: Running Playwright instance; started here if None
        config: Provides the headless default

    Returns:
        Playwright browser. Close it with close_browser().
    """
    config = config or Config()
    launch_args: Dict[str, Any] = dict(options) if isinstance(options, dict) else {}

    args = launch_args.get("args")
    launch_args["args"] = list(args) if isinstance(args, (list, tuple)) else []
    launch_args["args"].extend(SANDBOX_ARGS)
    launch_args.setdefault("headless", bool(config.headless))

    owns_playwright = playwright is None
    if owns_playwright:
        playwright = await get_playwright().start()

    try:
        browser = await playwright.chromium.launch(**launch_args)
    except Exception as e:
        logger.error(f"Browser launch failed: {e}")
        if owns_playwright:
            await playwright.stop()
        raise

    browser.on("disconnected", lambda *_: logger.info("Chromium has been closed"))
    setattr(browser, "_viewshot_playwright", playwright if owns_playwright else None)
    return browser


async def close_browser(browser: "Browser") -> None:
    """Close the browser and stop Playwright if launch() started it."""
    playwright = getattr(browser, "_viewshot_playwright", None)
    try:
        await browser.close()
    finally:
        if playwright is not None:
            await playwright.stop()


def _on_request_failed(request) -> None:
    error_text = request.failure
    if error_text != "net::ERR_ABORTED":
        logger.error(f"Request failed: {request.url} {error_text}")


def _on_page_crash(page) -> None:
    logger.error(f"page on error: page crashed {page.url}")


def _on_page_error(error) -> None:
    logger.warning(f"Uncaught page exception: {error}")


async def get_page(
    browser: "Browser",
    authentication: Optional[Dict[str, str]] = None,
    viewport: Optional[Dict[str, int]] = None,
    has_touch: bool = True,
) -> "Page":
    """
    Open a new page in its own context.

    Args:
        browser: Playwright browser
        authentication: {"username": ..., "password": ...} for HTTP basic auth
        viewport: Initial viewport size, 1920x1080 by default
        has_touch: Enable touch events, required by tap_on_element()

    Returns:
        New page with failure listeners attached
    """
    context_options: Dict[str, Any] = {
        "viewport": viewport or dict(DEFAULT_VIEWPORT),
        "device_scale_factor": 1,
        "has_touch": has_touch,
    }
    if authentication:
        context_options["http_credentials"] = {
            "username": authentication.get("username", ""),
            "password": authentication.get("password", ""),
        }

    context = await browser.new_context(**context_options)
    page = await context.new_page()

    page.on("requestfailed", _on_request_failed)
    page.on("crash", _on_page_crash)
    page.on("pageerror", _on_page_error)

    return page
