"""
Multi-resolution screenshot capture.

For every entry of the resolution table the page viewport is reconfigured,
the document reloaded, and two JPEGs written: the visible viewport and a
clip of the whole ``<body>``.

Usage:
    from viewshot import ScreenshotSequencer, Config

    sequencer = ScreenshotSequencer(Config.from_env())
    results = await sequencer.capture_all_resolutions(page, "home")
"""
import inspect
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union, TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError

from .config import Config
from .errors import InvalidParameterError, ReloadTimeoutError
from .navigation import sleep
from .resolutions import (
    FULLPAGE_SUFFIX,
    RESOLUTIONS,
    VIEWPORT_SUFFIX,
    Viewport,
    artifact_path,
    artifact_stem,
)

if TYPE_CHECKING:
    from playwright.async_api import CDPSession, Page

logger = logging.getLogger(__name__)

BeforeAction = Callable[[], Union[Awaitable[Any], Any]]


class CaptureOutcome(str, Enum):
    CAPTURED = "captured"
    SKIPPED_RELOAD_FAILED = "skipped_reload_failed"


@dataclass
class CaptureRequest:
    """Parameters of a single-resolution capture"""
    width: int
    height: int
    page_name: str
    device_scale_factor: Union[int, float, str] = 1
    is_mobile: bool = False
    delay_ms: int = 0
    before_action: Optional[BeforeAction] = None

    @classmethod
    def for_viewport(
        cls,
        viewport: Viewport,
        page_name: str,
        delay_ms: int = 0,
        before_action: Optional[BeforeAction] = None,
    ) -> "CaptureRequest":
        return cls(
            width=viewport.width,
            height=viewport.height,
            page_name=page_name,
            device_scale_factor=viewport.device_scale_factor,
            is_mobile=viewport.is_mobile,
            delay_ms=delay_ms,
            before_action=before_action,
        )


@dataclass
class CaptureResult:
    """What a single-resolution capture produced"""
    outcome: CaptureOutcome
    viewport: Viewport
    viewport_path: Optional[Path] = None
    fullpage_path: Optional[Path] = None
    clip: Optional[Dict[str, int]] = None
    error: Optional[Exception] = None

    @property
    def captured(self) -> bool:
        return self.outcome is CaptureOutcome.CAPTURED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "viewport": self.viewport.to_dict(),
            "viewport_path": str(self.viewport_path) if self.viewport_path else None,
            "fullpage_path": str(self.fullpage_path) if self.fullpage_path else None,
            "clip": self.clip,
            "error": str(self.error) if self.error else None,
        }


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_scale_factor(value) -> int:
    """
    Parse a device scale factor to an integer >= 1.

    Accepts ints, floats (truncated) and strings with a leading integer
    ("2", "3x"). Anything else raises InvalidParameterError.
    """
    parsed: Optional[int] = None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        parsed = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        parsed = int(match.group(1)) if match else None

    if parsed is None or parsed < 1:
        raise InvalidParameterError(f"device scale factor incorrect: {value!r}")
    return parsed


def _clamp_dimension(value) -> int:
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return number if number >= 1 else 1


def clamp_bounding_box(box: Optional[Dict[str, Any]]) -> Dict[str, int]:
    """
    Turn a measured bounding box into a capture region of at least 1x1.

    Missing, non-numeric or sub-1 dimensions become 1; fractional values are
    truncated.
    """
    box = box or {}
    return {
        "width": _clamp_dimension(box.get("width")),
        "height": _clamp_dimension(box.get("height")),
    }


def _is_chromium(page) -> bool:
    browser = page.context.browser
    return browser is not None and browser.browser_type.name == "chromium"


class ScreenshotSequencer:
    """
    Captures a page in every resolution of the table.

    One sequencer may serve several pages, but a single page must not be
    captured by two sequences at the same time: the viewport and loaded
    document are shared state.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        # DevTools sessions kept open so device metrics survive reloads
        self._cdp_sessions: Dict[int, "CDPSession"] = {}

    def page_dir(self, page_name: str) -> Path:
        return self.config.page_dir(page_name)

    async def _cdp_session(self, page: "Page") -> "CDPSession":
        session = self._cdp_sessions.get(id(page))
        if session is None:
            session = await page.context.new_cdp_session(page)
            self._cdp_sessions[id(page)] = session
            page.once("close", lambda *_: self._cdp_sessions.pop(id(page), None))
        return session

    async def apply_viewport(self, page: "Page", viewport: Viewport) -> None:
        """Resize the page and emulate scale factor / mobile where supported."""
        await page.set_viewport_size({"width": viewport.width, "height": viewport.height})

        if not _is_chromium(page):
            logger.debug("Device metrics emulation needs Chromium, only viewport size applied")
            return

        session = await self._cdp_session(page)
        await session.send(
            "Emulation.setDeviceMetricsOverride",
            {
                "width": viewport.width,
                "height": viewport.height,
                "deviceScaleFactor": viewport.device_scale_factor,
                "mobile": viewport.is_mobile,
            },
        )

    async def capture_one(self, page: "Page", request: CaptureRequest) -> CaptureResult:
        """
        Capture viewport and full-page JPEGs for one resolution.

        Args:
            page: Playwright page already showing the target document
            request: Capture parameters

        Returns:
            CaptureResult; outcome is SKIPPED_RELOAD_FAILED when the reload
            failed, in which case nothing was written

        Raises:
            InvalidParameterError: scale factor is not an integer >= 1
            playwright.async_api.Error: viewport or capture failures
        """
        stem = artifact_stem(request.page_name, request.width, request.height, request.device_scale_factor)
        logger.info(f"Screenshotting '{stem}'")

        try:
            scale = parse_scale_factor(request.device_scale_factor)
            viewport = Viewport(request.width, request.height, scale, bool(request.is_mobile))

            await self.apply_viewport(page, viewport)

            try:
                await page.reload(timeout=self.config.timeout_ms, wait_until="domcontentloaded")
            except PlaywrightError as e:
                logger.warning(f"Failed reload: {stem}: {e}")
                return CaptureResult(
                    outcome=CaptureOutcome.SKIPPED_RELOAD_FAILED,
                    viewport=viewport,
                    error=ReloadTimeoutError(f"Failed reload: {stem}: {e}"),
                )

            # Let animations and lazy content settle
            if request.delay_ms and request.delay_ms > 0:
                await sleep(request.delay_ms)

            if request.before_action is not None:
                pending = request.before_action()
                if inspect.isawaitable(pending):
                    await pending

            viewport_path = self._path(request, VIEWPORT_SUFFIX)
            await page.screenshot(path=str(viewport_path), full_page=False, type="jpeg")

            clip = await self._measure_body(page)

            fullpage_path = self._path(request, FULLPAGE_SUFFIX)
            await page.screenshot(
                path=str(fullpage_path),
                full_page=True,
                clip={"x": 0, "y": 0, "width": clip["width"], "height": clip["height"]},
                type="jpeg",
            )
        except Exception as e:
            logger.error(f"Screenshot failed for '{stem}': {e}")
            raise

        logger.debug(f"Screenshots saved: {viewport_path}, {fullpage_path}")
        return CaptureResult(
            outcome=CaptureOutcome.CAPTURED,
            viewport=viewport,
            viewport_path=viewport_path,
            fullpage_path=fullpage_path,
            clip=clip,
        )

    async def _measure_body(self, page: "Page") -> Dict[str, int]:
        body = await page.query_selector("body")
        if body is None:
            return clamp_bounding_box(None)
        try:
            box = await body.bounding_box()
        finally:
            await body.dispose()
        return clamp_bounding_box(box)

    def _path(self, request: CaptureRequest, kind: str) -> Path:
        return artifact_path(
            self.config.screenshot_dir,
            request.page_name,
            request.width,
            request.height,
            request.device_scale_factor,
            kind,
        )

    async def capture_all_resolutions(
        self,
        page: "Page",
        page_name: str,
        delay_ms: int = 0,
        before_action: Optional[BeforeAction] = None,
    ) -> List[CaptureResult]:
        """
        Capture a page in every resolution of RESOLUTIONS, one after another.

        Args:
            page: Playwright page already showing the target document
            page_name: Name used for the output directory and file names
            delay_ms: Time to wait after each reload
            before_action: Called before each capture (e.g. to close a cookie banner)

        Returns:
            One CaptureResult per resolution, in table order

        Raises:
            The first error raised by a capture; later resolutions are not run
        """
        results: List[CaptureResult] = []
        try:
            self.page_dir(page_name).mkdir(parents=True, exist_ok=True)

            for viewport in RESOLUTIONS:
                request = CaptureRequest.for_viewport(viewport, page_name, delay_ms, before_action)
                results.append(await self.capture_one(page, request))
        except Exception as e:
            logger.error(f"Capturing all resolutions of '{page_name}' failed: {e}")
            raise

        skipped = sum(1 for r in results if not r.captured)
        if skipped:
            logger.warning(f"'{page_name}': {skipped}/{len(results)} resolutions skipped")
        return results

    def list_page_artifacts(self, page_name: str) -> List[Path]:
        """
        Get captured JPEGs of a page, sorted by name.

        Returns:
            Sorted list of paths, empty if nothing was captured yet
        """
        directory = self.page_dir(page_name)
        if not directory.exists():
            return []
        return sorted(p for p in directory.glob("*.jpg") if p.is_file())
