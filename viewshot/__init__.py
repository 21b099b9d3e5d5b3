"""
viewshot: multi-resolution page screenshots on top of Playwright

Usage:
    from viewshot import Config, ScreenshotSequencer, launch, get_page, goto, close_browser

    config = Config.from_env()
    browser = await launch(config=config)
    page = await get_page(browser)
    await goto(page, "https://example.com", config=config)
    await ScreenshotSequencer(config).capture_all_resolutions(page, "home")
    await close_browser(browser)
"""
from .config import Config, init, setup_logging
from .errors import (
    InvalidParameterError,
    NavigationError,
    ReloadTimeoutError,
    StatusCodeMismatchError,
    ViewshotError,
)
from .resolutions import RESOLUTIONS, Viewport, artifact_path
from .browser_setup import close_browser, get_page, get_playwright, launch
from .navigation import (
    STATUS_BAD_REQUEST,
    STATUS_CREATED,
    STATUS_FORBIDDEN,
    STATUS_NOT_FOUND,
    STATUS_OK,
    STATUS_SERVER_ERROR,
    STATUS_UNAUTHORIZED,
    click_on_element,
    get_hostname_by_selector,
    get_link_by_selector,
    get_value_by_selector,
    goto,
    sleep,
    tap_on_element,
)
from .screenshots import (
    CaptureOutcome,
    CaptureRequest,
    CaptureResult,
    ScreenshotSequencer,
    clamp_bounding_box,
    parse_scale_factor,
)

__all__ = [
    # Configuration
    "Config",
    "init",
    "setup_logging",
    # Errors
    "ViewshotError",
    "InvalidParameterError",
    "NavigationError",
    "StatusCodeMismatchError",
    "ReloadTimeoutError",
    # Resolutions
    "RESOLUTIONS",
    "Viewport",
    "artifact_path",
    # Browser
    "get_playwright",
    "launch",
    "close_browser",
    "get_page",
    # Navigation
    "STATUS_OK",
    "STATUS_CREATED",
    "STATUS_BAD_REQUEST",
    "STATUS_UNAUTHORIZED",
    "STATUS_FORBIDDEN",
    "STATUS_NOT_FOUND",
    "STATUS_SERVER_ERROR",
    "goto",
    "sleep",
    "click_on_element",
    "tap_on_element",
    "get_link_by_selector",
    "get_hostname_by_selector",
    "get_value_by_selector",
    # Screenshots
    "ScreenshotSequencer",
    "CaptureRequest",
    "CaptureResult",
    "CaptureOutcome",
    "clamp_bounding_box",
    "parse_scale_factor",
]

__version__ = "1.0.0"
