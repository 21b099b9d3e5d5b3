"""
Device resolutions captured for every page, and artifact naming.

Artifacts are organized as:
screenshots/
└── home/
    ├── home-0360x0640at1-viewport.jpg
    ├── home-0360x0640at1-fullpage.jpg
    └── ...
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Viewport:
    """Viewport emulated for one capture"""
    width: int
    height: int
    device_scale_factor: int = 1
    is_mobile: bool = False

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "device_scale_factor": self.device_scale_factor,
            "is_mobile": self.is_mobile,
        }


# Most popular screen resolutions, captured in this order
RESOLUTIONS: Tuple[Viewport, ...] = (
    Viewport(360, 640, 1, True),
    Viewport(360, 640, 3, True),
    Viewport(640, 360, 1, True),
    Viewport(1366, 768, 1, False),
    Viewport(1920, 1080, 1, False),
    Viewport(375, 667, 1, True),
    Viewport(375, 667, 2, True),
    Viewport(667, 375, 1, True),
    Viewport(1440, 900, 1, False),
    Viewport(1280, 800, 1, False),
)

VIEWPORT_SUFFIX = "viewport"
FULLPAGE_SUFFIX = "fullpage"


def artifact_stem(page_name: str, width: int, height: int, device_scale_factor) -> str:
    """
    Base name shared by both artifacts of one resolution.

    Width and height are zero-padded to 4 digits so names sort by size.
    """
    return f"{page_name}-{str(width).zfill(4)}x{str(height).zfill(4)}at{device_scale_factor}"


def artifact_path(
    screenshot_dir: Path,
    page_name: str,
    width: int,
    height: int,
    device_scale_factor,
    kind: str,
) -> Path:
    """Path of a viewport or fullpage JPEG for one resolution."""
    stem = artifact_stem(page_name, width, height, device_scale_factor)
    return Path(screenshot_dir) / page_name / f"{stem}-{kind}.jpg"
