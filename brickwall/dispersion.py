# brickwall/dispersion.py
"""
Paint assignment strategies.

A dispersion describes how colors (or textures) are spread over the bricks.
It is resolved into a grid shaped like the wall: even rows hold
`bricks_per_row` cells, odd rows `bricks_per_row + 1`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    Callable,
    Generic,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    assert_never,
)

import numpy as np

from brickwall.assets.types import Texture
from brickwall.errors import PaintGridShapeError, WallConfigurationError
from brickwall.geometry import WallDimensions, is_full_row
from brickwall.paint import ColorPaint, Paint, TexturePaint
from brickwall.types import Color

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Color or Texture


def _unique(paints: Sequence[T]) -> Tuple[T, ...]:
    # Ordered set: keeps first occurrence.
    unique = tuple(dict.fromkeys(paints))
    if not unique:
        raise WallConfigurationError("A paint set needs at least one entry")
    return unique


@dataclass(frozen=True)
class RandomDispersion(Generic[T]):
    """Every brick draws independently and uniformly from `paints`."""

    paints: Tuple[T, ...]

    def __post_init__(self):
        object.__setattr__(self, "paints", _unique(self.paints))


@dataclass(frozen=True)
class AlternatingDispersion(Generic[T]):
    """Cycle through `paints`; odd rows start one step further along."""

    paints: Tuple[T, ...]

    def __post_init__(self):
        object.__setattr__(self, "paints", _unique(self.paints))


@dataclass(frozen=True)
class CustomDispersion(Generic[T]):
    """Explicit per-brick grid, row 0 first."""

    grid: Tuple[Tuple[T, ...], ...]

    def __post_init__(self):
        object.__setattr__(
            self, "grid", tuple(tuple(row) for row in self.grid)
        )


Dispersion = Union[
    RandomDispersion[T], AlternatingDispersion[T], CustomDispersion[T]
]


@dataclass(frozen=True)
class ColorWallPaints:
    dispersion: Dispersion[Color]


@dataclass(frozen=True)
class TextureWallPaints:
    dispersion: Dispersion[Texture]


WallPaints = Union[ColorWallPaints, TextureWallPaints]


def random_dispersion(
    brick_rows: int,
    bricks_per_row: int,
    paints: Sequence[T],
    rng: Optional[np.random.Generator] = None,
) -> List[List[T]]:
    rng = rng if rng is not None else np.random.default_rng()

    grid: List[List[T]] = []
    for row in range(brick_rows):
        columns = bricks_per_row if is_full_row(row) else bricks_per_row + 1
        picks = rng.integers(0, len(paints), size=columns)
        grid.append([paints[int(i)] for i in picks])
    return grid


def alternating_dispersion(
    brick_rows: int, bricks_per_row: int, paints: Sequence[T]
) -> List[List[T]]:
    grid: List[List[T]] = []
    for row in range(brick_rows):
        full_row = is_full_row(row)
        columns = bricks_per_row if full_row else bricks_per_row + 1
        offset = 0 if full_row else 1
        grid.append(
            [paints[(col + offset) % len(paints)] for col in range(columns)]
        )
    return grid


def resolve_dispersion(
    dispersion: Dispersion[T],
    brick_rows: int,
    bricks_per_row: int,
    rng: Optional[np.random.Generator] = None,
) -> List[List[T]]:
    match dispersion:
        case RandomDispersion(paints=paints):
            return random_dispersion(brick_rows, bricks_per_row, paints, rng)
        case AlternatingDispersion(paints=paints):
            return alternating_dispersion(brick_rows, bricks_per_row, paints)
        case CustomDispersion(grid=grid):
            return [list(row) for row in grid]
        case _:
            assert_never(dispersion)


def validate_paint_grid(
    dimensions: WallDimensions, grid: Sequence[Sequence[object]]
) -> None:
    """Raise `PaintGridShapeError` unless `grid` matches the wall layout."""
    brick_rows = dimensions.brick_rows
    bricks_per_row = dimensions.bricks_per_row

    logger.debug(
        "Expected: %d rows, %d columns for even rows and %d for odd rows",
        brick_rows,
        bricks_per_row,
        bricks_per_row + 1,
    )

    if len(grid) != brick_rows:
        raise PaintGridShapeError(
            f"Paint grid must have {brick_rows} rows, but has {len(grid)}",
            row=None,
            expected=brick_rows,
            actual=len(grid),
        )

    for index, row in enumerate(grid):
        expected = dimensions.columns_in_row(index)
        if len(row) != expected:
            raise PaintGridShapeError(
                f"Row {index} must have {expected} columns, but has {len(row)}",
                row=index,
                expected=expected,
                actual=len(row),
            )


def _is_color(cell: object) -> bool:
    return (
        isinstance(cell, tuple)
        and len(cell) in (3, 4)
        and all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in cell
        )
    )


def _check_cells(
    grid: Sequence[Sequence[object]], is_valid: Callable[[object], bool], kind: str
) -> None:
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if not is_valid(cell):
                raise WallConfigurationError(
                    f"Brick at row {r}, column {c} must be a {kind}, got {cell!r}"
                )


def resolve_paints(
    paints: WallPaints,
    dimensions: WallDimensions,
    rng: Optional[np.random.Generator] = None,
) -> List[List[Paint]]:
    """
    Resolve and validate the paint for every brick.

    The result only ever holds one paint kind: every cell of a color wall is
    a `ColorPaint`, every cell of a texture wall a `TexturePaint`.
    """
    rows = dimensions.brick_rows
    per_row = dimensions.bricks_per_row

    match paints:
        case ColorWallPaints(dispersion=dispersion):
            colors = resolve_dispersion(dispersion, rows, per_row, rng)
            validate_paint_grid(dimensions, colors)
            _check_cells(colors, _is_color, "color tuple of 3 or 4 ints in 0-255")
            return [[ColorPaint(c) for c in row] for row in colors]
        case TextureWallPaints(dispersion=dispersion):
            textures = resolve_dispersion(dispersion, rows, per_row, rng)
            validate_paint_grid(dimensions, textures)
            _check_cells(
                textures, lambda cell: isinstance(cell, Texture), "Texture"
            )
            return [[TexturePaint(t) for t in row] for row in textures]
        case _:
            assert_never(paints)
