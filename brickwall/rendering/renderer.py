# brickwall/rendering/renderer.py
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from brickwall.animation.animatable import AnimatedBrick
from brickwall.geometry import WallDimensions
from brickwall.rendering.canvas import Canvas
from brickwall.rendering.mortar import Mortar, mortar_segments
from brickwall.types import Size, Vector2


def brick_bounds(
    animated: AnimatedBrick,
    dimensions: WallDimensions,
    surface_width: float,
    surface_height: float,
) -> Tuple[Vector2, Size]:
    """
    Pixel rect of a brick at its current progress.

    The brick grows upward from its row's baseline: its height scales with
    progress and its top sits `row_height * progress` above `position.y`.
    """
    brick = animated.brick
    progress = animated.progress
    row_height = dimensions.brick_height_ratio

    top_left = Vector2(
        surface_width * brick.position.x,
        surface_height * (brick.position.y - row_height * progress),
    )
    size = Size(
        surface_width * brick.width_ratio(dimensions),
        surface_height * row_height * progress,
    )
    return top_left, size


def draw_brick_wall(
    canvas: Canvas,
    bricks: Sequence[Sequence[AnimatedBrick]],
    dimensions: WallDimensions,
    mortar: Optional[Mortar],
) -> None:
    """Paint one frame. Reads progress snapshots only."""
    width = canvas.width
    height = canvas.height

    thickness = mortar.thickness_ratio if mortar is not None else 0.0
    stroke_width_x = width * thickness
    stroke_width_y = height * thickness

    for row in bricks:
        for animated in row:
            brick = animated.brick
            top_left, size = brick_bounds(animated, dimensions, width, height)

            canvas.draw_rect(brick.paint, top_left, size)

            if mortar is None:
                continue

            for segment in mortar_segments(
                brick=brick,
                dimensions=dimensions,
                mortar=mortar,
                progress=animated.progress,
                top_left=top_left,
                size=size,
                stroke_width_x=stroke_width_x,
                stroke_width_y=stroke_width_y,
            ):
                canvas.draw_line(
                    mortar.paint, segment.start, segment.end, segment.stroke_width
                )
