# brickwall/assets/textures.py
import logging
from pathlib import Path

import pygame

from brickwall.assets.importers.texture import TextureImporter
from brickwall.assets.types import Texture, TextureData

logger = logging.getLogger(__name__)

DEFAULT_TEXTURE_SCALE = 0.1

_FORMATS = {3: "RGB", 4: "RGBA"}


def load_texture(
    texture_data: TextureData,
    scale_x: float = DEFAULT_TEXTURE_SCALE,
    scale_y: float = DEFAULT_TEXTURE_SCALE,
) -> Texture:
    """
    Turn decoded image data into a repeating paint.

    The tile is pre-scaled once here so the renderer only has to blit it.
    A scaled dimension never drops below one pixel.
    """
    if scale_x <= 0 or scale_y <= 0:
        raise ValueError(
            f"Texture scale must be positive, got ({scale_x}, {scale_y})"
        )

    fmt = _FORMATS.get(texture_data.components)
    if fmt is None:
        raise ValueError(
            f"Unsupported component count {texture_data.components}"
        )

    size = (texture_data.width, texture_data.height)
    tile = pygame.image.frombytes(texture_data.data, size, fmt)

    scaled_size = (
        max(1, round(texture_data.width * scale_x)),
        max(1, round(texture_data.height * scale_y)),
    )
    if scaled_size != size:
        tile = pygame.transform.smoothscale(tile, scaled_size)

    logger.debug("Loaded texture %s scaled to %s", size, scaled_size)
    return Texture(surface=tile, scale_x=scale_x, scale_y=scale_y)


def load_texture_file(
    path: Path,
    scale_x: float = DEFAULT_TEXTURE_SCALE,
    scale_y: float = DEFAULT_TEXTURE_SCALE,
) -> Texture:
    return load_texture(TextureImporter().import_file(path), scale_x, scale_y)
