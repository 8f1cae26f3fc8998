# brickwall/defaults.py
"""Ready-to-use wall settings. Every factory accepts keyword overrides."""

from __future__ import annotations

from brickwall.animation.easing import FastOutSlowInEasing
from brickwall.animation.spec import AnimationConfig, AnimationSpec, Tween
from brickwall.dispersion import AlternatingDispersion, ColorWallPaints, Dispersion
from brickwall.geometry import WallDimensions
from brickwall.paint import ColorPaint, Paint
from brickwall.rendering.mortar import Mortar
from brickwall.types import Color, Vector2, rgb

LIGHT_GRAY: Color = rgb(0xFFCCCCCC)

GRAY_PALETTE: tuple[Color, ...] = (
    rgb(0xFFB0B0B0),  # medium gray
    rgb(0xFFA0A0A0),  # slightly darker
    rgb(0xFFC0C0C0),  # slightly lighter
    rgb(0xFF909090),  # darker tone
    rgb(0xFFD0D0D0),  # brighter tone
)


def default_animation_config(
    animation_spec: AnimationSpec = Tween(
        duration_ms=200, easing=FastOutSlowInEasing
    ),
    delay_ms: int = 60,
) -> AnimationConfig:
    return AnimationConfig(animation_spec=animation_spec, delay_ms=delay_ms)


def default_dimensions(
    bottom_left: Vector2 = Vector2(0.0, 0.0),
    wall_width_ratio: float = 0.9,
    wall_height_ratio: float = 0.9,
    brick_rows: int = 8,
    bricks_per_row: int = 10,
) -> WallDimensions:
    return WallDimensions(
        bottom_left=bottom_left,
        wall_width_ratio=wall_width_ratio,
        wall_height_ratio=wall_height_ratio,
        brick_rows=brick_rows,
        bricks_per_row=bricks_per_row,
    )


def default_mortar(
    paint: Paint = ColorPaint(LIGHT_GRAY),
    thickness_ratio: float = 0.005,
    draw_outer_edges: bool = True,
) -> Mortar:
    return Mortar(
        paint=paint,
        thickness_ratio=thickness_ratio,
        draw_outer_edges=draw_outer_edges,
    )


def default_colors(
    dispersion: Dispersion[Color] = AlternatingDispersion(GRAY_PALETTE),
) -> ColorWallPaints:
    return ColorWallPaints(dispersion=dispersion)
