# brickwall/presets.py
from __future__ import annotations

from enum import StrEnum

from brickwall.dispersion import (
    AlternatingDispersion,
    ColorWallPaints,
    CustomDispersion,
    RandomDispersion,
)
from brickwall.types import Color, rgb

BROWN_PALETTE: tuple[Color, ...] = (
    rgb(0xFF8D6E63),  # soft brown
    rgb(0xFF795548),  # chocolate brown
    rgb(0xFFA1887F),  # taupe
    rgb(0xFF6D4C41),  # dark cocoa
    rgb(0xFFD7CCC8),  # light beige
)

BLUE_GRAY_PALETTE: tuple[Color, ...] = (
    rgb(0xFF607D8B),  # blue-gray
    rgb(0xFF9E9E9E),  # gray
    rgb(0xFFCFD8DC),  # light gray
)

# Heart shortcuts
_B = rgb(0xFF3E2723)  # dark brown border
_W = rgb(0xFFFFFFFF)
_R = rgb(0xFFFF0000)
_O = rgb(0xFFFF9800)  # orange

# Sized for a 10-row wall with 10 bricks per row.
HEART_GRID: tuple[tuple[Color, ...], ...] = (
    (_B, _B, _B, _B, _B, _B, _B, _B, _B, _B),
    (_B, _W, _W, _W, _W, _W, _W, _W, _W, _W, _B),
    (_B, _W, _O, _O, _O, _O, _O, _O, _W, _B),
    (_B, _W, _O, _R, _R, _R, _R, _R, _O, _W, _B),
    (_B, _W, _O, _R, _R, _R, _R, _O, _W, _B),
    (_B, _W, _W, _O, _R, _R, _R, _O, _W, _W, _B),
    (_B, _W, _W, _O, _R, _R, _O, _W, _W, _B),
    (_B, _W, _W, _W, _O, _O, _O, _W, _W, _W, _B),
    (_B, _W, _W, _W, _W, _W, _W, _W, _W, _B),
    (_B, _B, _B, _B, _B, _B, _B, _B, _B, _B, _B),
)
HEART_ROWS = 10
HEART_BRICKS_PER_ROW = 10


def random_brown_dispersion() -> RandomDispersion[Color]:
    return RandomDispersion(BROWN_PALETTE)


def alternating_gray_dispersion() -> AlternatingDispersion[Color]:
    return AlternatingDispersion(BLUE_GRAY_PALETTE)


def heart_dispersion() -> CustomDispersion[Color]:
    return CustomDispersion(HEART_GRID)


class PresetPalette(StrEnum):
    RANDOM_BROWN = "random-brown"
    ALTERNATING_GRAY = "alternating-gray"
    HEART = "heart"


_PRESETS = {
    PresetPalette.RANDOM_BROWN: random_brown_dispersion,
    PresetPalette.ALTERNATING_GRAY: alternating_gray_dispersion,
    PresetPalette.HEART: heart_dispersion,
}


def preset_colors(name: PresetPalette | str) -> ColorWallPaints:
    """Color paints for a named preset. Raises ValueError for unknown names."""
    return ColorWallPaints(dispersion=_PRESETS[PresetPalette(name)]())
