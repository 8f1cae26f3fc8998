# brickwall/errors.py
from __future__ import annotations


class WallConfigurationError(ValueError):
    """Raised when a wall cannot be built from the supplied configuration."""


class PaintGridShapeError(WallConfigurationError):
    """
    A paint grid does not match the running-bond layout of the wall.

    `row` is None when the number of rows is wrong.
    """

    def __init__(self, message: str, row: int | None, expected: int, actual: int):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual
