# brickwall/geometry.py
"""
Running-bond brick layout.

Coordinates are normalized to the drawing surface: (0, 0) is the top-left
corner and (1, 1) the bottom-right. Row 0 is the bottom row of the wall and
each following row sits one brick height higher (smaller y).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from brickwall.errors import WallConfigurationError
from brickwall.paint import Paint
from brickwall.types import Scalar, Vector2


@dataclass(frozen=True, slots=True)
class WallDimensions:
    bottom_left: Vector2
    wall_width_ratio: Scalar
    wall_height_ratio: Scalar
    brick_rows: int
    bricks_per_row: int

    def __post_init__(self):
        ratios = (self.wall_width_ratio, self.wall_height_ratio)
        if not all(math.isfinite(r) and r > 0 for r in ratios):
            raise WallConfigurationError(
                "Wall ratios must be positive and finite, got "
                f"width={self.wall_width_ratio}, height={self.wall_height_ratio}"
            )
        if self.brick_rows < 1 or self.bricks_per_row < 1:
            raise WallConfigurationError(
                "Wall needs at least one row and one brick per row, got "
                f"rows={self.brick_rows}, bricks_per_row={self.bricks_per_row}"
            )
        if not all(math.isfinite(v) for v in self.bottom_left):
            raise WallConfigurationError(
                f"Wall origin must be finite, got {self.bottom_left}"
            )

    @property
    def brick_width_ratio(self) -> Scalar:
        return self.wall_width_ratio / self.bricks_per_row

    @property
    def half_brick_width_ratio(self) -> Scalar:
        return self.brick_width_ratio / 2.0

    @property
    def brick_height_ratio(self) -> Scalar:
        return self.wall_height_ratio / self.brick_rows

    def columns_in_row(self, row: int) -> int:
        """Odd rows carry one extra brick: a half brick at each end."""
        return self.bricks_per_row if is_full_row(row) else self.bricks_per_row + 1


@dataclass(frozen=True, slots=True)
class Brick:
    row: int
    col: int
    is_half: bool
    paint: Paint
    position: Vector2  # left edge, bottom of the brick's row

    def width_ratio(self, dimensions: WallDimensions) -> Scalar:
        if self.is_half:
            return dimensions.half_brick_width_ratio
        return dimensions.brick_width_ratio

    def is_rightmost(self, dimensions: WallDimensions) -> bool:
        return self.col == dimensions.columns_in_row(self.row) - 1


BrickGrid = List[List[Brick]]


def is_full_row(row: int) -> bool:
    return row % 2 == 0


def brick_x(dimensions: WallDimensions, row: int, col: int) -> Scalar:
    x0 = dimensions.bottom_left.x
    width = dimensions.brick_width_ratio

    if is_full_row(row):
        return x0 + col * width

    half = dimensions.half_brick_width_ratio
    if col == 0:
        return x0
    if col == dimensions.bricks_per_row:
        return x0 + (col - 1) * width + half
    return x0 + col * width - half


def brick_y(dimensions: WallDimensions, row: int) -> Scalar:
    return dimensions.bottom_left.y - row * dimensions.brick_height_ratio


def build_bricks(
    dimensions: WallDimensions, paint_grid: Sequence[Sequence[Paint]]
) -> BrickGrid:
    """
    Lay out the wall bottom to top, left to right.

    `paint_grid` must already match the layout (see
    `brickwall.dispersion.validate_paint_grid`).
    """
    bricks: BrickGrid = []

    for row in range(dimensions.brick_rows):
        half_row = not is_full_row(row)
        last_col = dimensions.bricks_per_row
        y = brick_y(dimensions, row)

        bricks.append(
            [
                Brick(
                    row=row,
                    col=col,
                    is_half=half_row and (col == 0 or col == last_col),
                    paint=paint_grid[row][col],
                    position=Vector2(brick_x(dimensions, row, col), y),
                )
                for col in range(dimensions.columns_in_row(row))
            ]
        )

    return bricks
