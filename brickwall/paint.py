# brickwall/paint.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from brickwall.assets.types import Texture
from brickwall.types import Color


@dataclass(frozen=True, slots=True)
class ColorPaint:
    """Solid fill."""

    color: Color


@dataclass(frozen=True, slots=True)
class TexturePaint:
    """Repeating pattern fill anchored at the surface origin."""

    texture: Texture


Paint = Union[ColorPaint, TexturePaint]
