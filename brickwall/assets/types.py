# brickwall/assets/types.py
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # 3 (RGB) or 4 (RGBA)


@dataclass(frozen=True, eq=False)
class Texture:
    """
    Repeating paint handle.

    `surface` is the already pre-scaled tile. Hashing is by identity so a
    texture can live in a paint set without comparing pixels.
    """

    surface: pygame.Surface
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def tile_size(self) -> tuple[int, int]:
        return self.surface.get_size()
