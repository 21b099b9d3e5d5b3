#!/usr/bin/env python3
"""
Capture a site in all resolutions.

    python examples/capture_site.py https://example.com home
"""
import asyncio
import sys
from functools import partial

from viewshot import (
    Config,
    ScreenshotSequencer,
    click_on_element,
    close_browser,
    get_page,
    goto,
    launch,
    setup_logging,
)


async def main(url: str, page_name: str) -> int:
    config = Config.from_env()
    setup_logging(config)

    browser = await launch(config=config)
    try:
        page = await get_page(browser)
        await goto(page, url, config=config)

        sequencer = ScreenshotSequencer(config)
        results = await sequencer.capture_all_resolutions(
            page,
            page_name,
            delay_ms=500,
            before_action=partial(click_on_element, page, "#onetrust-accept-btn-handler", 200),
        )
    finally:
        await close_browser(browser)

    for result in results:
        print(f"{result.outcome.value:24} {result.viewport_path or '-'}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__.strip(), file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1], sys.argv[2])))
