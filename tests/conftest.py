import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from dataclasses import dataclass, field

import pytest

from brickwall.animation.clock import FrameClock
from brickwall.geometry import WallDimensions
from brickwall.paint import Paint
from brickwall.types import Size, Vector2

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
GRAY = (128, 128, 128, 255)


@dataclass
class RecordingCanvas:
    """Collects draw calls instead of rasterizing them."""

    width: int = 100
    height: int = 100
    rects: list[tuple[Paint, Vector2, Size]] = field(default_factory=list)
    lines: list[tuple[Paint, Vector2, Vector2, float]] = field(default_factory=list)

    def draw_rect(self, paint: Paint, top_left: Vector2, size: Size) -> None:
        self.rects.append((paint, top_left, size))

    def draw_line(
        self, paint: Paint, start: Vector2, end: Vector2, stroke_width: float
    ) -> None:
        self.lines.append((paint, start, end, stroke_width))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def canvas():
    """Returns a fresh RecordingCanvas for each test."""
    return RecordingCanvas()


@pytest.fixture
def fast_clock():
    return FrameClock(target_fps=1000)


@pytest.fixture
def small_dimensions():
    """The 2x2 wall used throughout the layout examples."""
    return WallDimensions(
        bottom_left=Vector2(0.0, 0.0),
        wall_width_ratio=0.9,
        wall_height_ratio=0.9,
        brick_rows=2,
        bricks_per_row=2,
    )
