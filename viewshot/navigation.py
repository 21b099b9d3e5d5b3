"""
Navigation Actions - page navigation and element helpers

goto() asserts the HTTP status of the response. Click and tap treat a
missing element as expected (logged, not raised) so optional UI such as
cookie banners can be dismissed without guarding every call.
"""

import asyncio
import logging
from typing import Optional, TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError

from .config import Config
from .errors import NavigationError, StatusCodeMismatchError

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_CREATED = 201
STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401
STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404
STATUS_SERVER_ERROR = 500


async def sleep(ms: int) -> None:
    """Wait for the given number of milliseconds."""
    await asyncio.sleep(max(0, ms) / 1000)


async def goto(
    page: "Page",
    url: str,
    expected_status_code: int = STATUS_OK,
    config: Optional[Config] = None,
) -> "Page":
    """
    Navigate to URL and check the response status code.

    Args:
        page: Playwright page
        url: URL to navigate to
        expected_status_code: HTTP status the response must have
        config: Provides the navigation timeout

    Returns:
        The same page

    Raises:
        NavigationError: No response was received
        StatusCodeMismatchError: Response status differs from expected
    """
    config = config or Config()
    logger.info(f"Goto {url}")

    response = await page.goto(url, timeout=config.timeout_ms, wait_until="domcontentloaded")

    if not response:
        logger.error(f'Response empty for "{url}"')
        raise NavigationError(f'Response empty for "{url}"')

    received = response.status
    if str(received) != str(expected_status_code):
        error = StatusCodeMismatchError(url, expected_status_code, received)
        logger.error(str(error))
        raise error

    return page


async def click_on_element(
    page: "Page",
    selector: str,
    delay_after: int = 0,
    timeout_ms: int = 1000,
) -> bool:
    """
    Click on element, then wait.

    Returns:
        True if the element was clicked, False if it was missing or hidden
    """
    clicked = False
    try:
        await page.click(selector, timeout=timeout_ms)
        clicked = True
    except PlaywrightError:
        logger.warning(f'Element not found or hidden "{selector}"')

    await sleep(delay_after)
    return clicked


async def tap_on_element(
    page: "Page",
    selector: str,
    delay_after: int = 0,
    timeout_ms: int = 1000,
) -> bool:
    """
    Tap on element, then wait. Needs a context created with touch support.

    Returns:
        True if the element was tapped, False if it was missing or hidden
    """
    tapped = False
    try:
        await page.tap(selector, timeout=timeout_ms)
        tapped = True
    except PlaywrightError:
        logger.warning(f'Element not found or hidden "{selector}"')

    await sleep(delay_after)
    return tapped


async def get_link_by_selector(page: "Page", selector: str) -> Optional[str]:
    """Get href of an <a> element."""
    return await page.eval_on_selector(selector, "link => link.href")


async def get_hostname_by_selector(page: "Page", selector: str) -> Optional[str]:
    """Get hostname of an <a> element's link."""
    return await page.eval_on_selector(selector, "link => link.hostname")


async def get_value_by_selector(page: "Page", selector: str) -> Optional[str]:
    """Get innerHTML of an element."""
    return await page.eval_on_selector(selector, "el => el.innerHTML")
