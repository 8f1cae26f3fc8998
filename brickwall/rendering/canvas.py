# brickwall/rendering/canvas.py
from __future__ import annotations

from typing import Protocol, assert_never

import pygame

from brickwall.assets.types import Texture
from brickwall.paint import ColorPaint, Paint, TexturePaint
from brickwall.types import Size, Vector2


class Canvas(Protocol):
    """Drawing surface the wall renderer paints on, in pixels."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def draw_rect(self, paint: Paint, top_left: Vector2, size: Size) -> None: ...

    def draw_line(
        self, paint: Paint, start: Vector2, end: Vector2, stroke_width: float
    ) -> None: ...


def to_pixel_rect(top_left: Vector2, size: Size) -> pygame.Rect:
    """
    Round edges rather than origin and size so neighbouring rects share
    their border pixel row instead of leaving a gap.
    """
    left = round(top_left.x)
    top = round(top_left.y)
    right = round(top_left.x + size.width)
    bottom = round(top_left.y + size.height)
    return pygame.Rect(left, top, right - left, bottom - top)


def stroke_bounds(
    start: Vector2, end: Vector2, stroke_width: float
) -> tuple[Vector2, Size]:
    """Area covered by an axis-aligned stroke with butt caps."""
    half = stroke_width / 2.0

    if start.x == end.x:
        top = min(start.y, end.y)
        return Vector2(start.x - half, top), Size(stroke_width, abs(end.y - start.y))
    if start.y == end.y:
        left = min(start.x, end.x)
        return Vector2(left, start.y - half), Size(abs(end.x - start.x), stroke_width)

    raise ValueError(f"Only axis-aligned strokes are supported: {start} -> {end}")


class SurfaceCanvas:
    """Canvas backed by a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def draw_rect(self, paint: Paint, top_left: Vector2, size: Size) -> None:
        rect = to_pixel_rect(top_left, size)
        if rect.width <= 0 or rect.height <= 0:
            return

        match paint:
            case ColorPaint(color=color):
                pygame.draw.rect(self.surface, color, rect)
            case TexturePaint(texture=texture):
                self._fill_pattern(texture, rect)
            case _:
                assert_never(paint)

    def draw_line(
        self, paint: Paint, start: Vector2, end: Vector2, stroke_width: float
    ) -> None:
        top_left, size = stroke_bounds(start, end, stroke_width)
        self.draw_rect(paint, top_left, size)

    def _fill_pattern(self, texture: Texture, rect: pygame.Rect) -> None:
        # Tiles line up with the surface origin, not with the rect.
        tile = texture.surface
        tile_w, tile_h = tile.get_size()
        first_x = (rect.left // tile_w) * tile_w
        first_y = (rect.top // tile_h) * tile_h

        previous_clip = self.surface.get_clip()
        self.surface.set_clip(rect.clip(previous_clip))
        try:
            self.surface.blits(
                [
                    (tile, (x, y))
                    for y in range(first_y, rect.bottom, tile_h)
                    for x in range(first_x, rect.right, tile_w)
                ]
            )
        finally:
            self.surface.set_clip(previous_clip)
