# brickwall/rendering/mortar.py
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import List

from brickwall.errors import WallConfigurationError
from brickwall.geometry import Brick, WallDimensions
from brickwall.paint import Paint
from brickwall.types import Size, Vector2


@dataclass(frozen=True, slots=True)
class Mortar:
    paint: Paint
    thickness_ratio: float  # of the surface width (vertical joints) or height (horizontal joints)
    draw_outer_edges: bool = True

    def __post_init__(self):
        if self.thickness_ratio < 0:
            raise WallConfigurationError(
                f"Mortar thickness must be non-negative, got {self.thickness_ratio}"
            )


class MortarEdge(StrEnum):
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    TOP = "top"


@dataclass(frozen=True, slots=True)
class MortarSegment:
    edge: MortarEdge
    start: Vector2
    end: Vector2
    stroke_width: float


def mortar_segments(
    brick: Brick,
    dimensions: WallDimensions,
    mortar: Mortar,
    progress: float,
    top_left: Vector2,
    size: Size,
    stroke_width_x: float,
    stroke_width_y: float,
) -> List[MortarSegment]:
    """
    Joint lines around one brick, in pixels, ordered right, bottom, left, top.

    Bricks that are still growing get none. Each brick outlines itself, so
    a joint between two bricks is produced by both of them.
    """
    if progress != 1.0:
        return []

    outer = mortar.draw_outer_edges
    # The last row index is the top of the wall; "bottom" names the brick's
    # own side, matching how rows are indexed.
    is_last_row = brick.row == dimensions.brick_rows - 1
    w, h = size.width, size.height

    segments: List[MortarSegment] = []

    if outer or not brick.is_rightmost(dimensions):
        segments.append(
            MortarSegment(
                MortarEdge.RIGHT,
                top_left + Vector2(w, 0.0),
                top_left + Vector2(w, h),
                stroke_width_x,
            )
        )

    if outer or not is_last_row:
        segments.append(
            MortarSegment(
                MortarEdge.BOTTOM,
                top_left + Vector2(0.0, h),
                top_left + Vector2(w, h),
                stroke_width_y,
            )
        )

    if outer or brick.col > 0:
        segments.append(
            MortarSegment(
                MortarEdge.LEFT,
                top_left,
                top_left + Vector2(0.0, h),
                stroke_width_x,
            )
        )

    if outer or brick.row > 0:
        segments.append(
            MortarSegment(
                MortarEdge.TOP,
                top_left,
                top_left + Vector2(w, 0.0),
                stroke_width_y,
            )
        )

    return segments
