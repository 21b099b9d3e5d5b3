#!/usr/bin/env python3
"""
Configuration for viewshot.

Settings are held in an explicit ``Config`` object that is passed to the
screenshot sequencer and the navigation helpers. Nothing here is mutated
after construction.
"""
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_SCREENSHOT_DIR = "screenshots/"


@dataclass(frozen=True)
class Config:
    """Viewshot configuration"""
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    screenshot_dir: Path = field(default_factory=lambda: Path(DEFAULT_SCREENSHOT_DIR))
    headless: bool = True
    log_level: str = "INFO"

    def __post_init__(self):
        # Allow plain strings for the directory
        object.__setattr__(self, "screenshot_dir", Path(self.screenshot_dir))

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from .env file and environment variables"""
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            timeout_ms=int(os.getenv("VIEWSHOT_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            screenshot_dir=Path(os.getenv("VIEWSHOT_SCREENSHOT_DIR", DEFAULT_SCREENSHOT_DIR)),
            headless=os.getenv("VIEWSHOT_HEADLESS", "true").lower() in ["true", "1", "yes"],
            log_level=os.getenv("VIEWSHOT_LOG_LEVEL", "INFO").upper(),
        )

    def page_dir(self, page_name: str) -> Path:
        return self.screenshot_dir / page_name


def init(timeout_ms: int = DEFAULT_TIMEOUT_MS, screenshot_dir: str = DEFAULT_SCREENSHOT_DIR) -> Config:
    """
    Build a configuration.

    Args:
        timeout_ms: Navigation and reload timeout in milliseconds
        screenshot_dir: Directory where screenshots are stored

    Returns:
        New Config instance
    """
    return Config(timeout_ms=timeout_ms, screenshot_dir=Path(screenshot_dir))


def setup_logging(config: Config) -> None:
    """Configure root logging for scripts using viewshot."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
