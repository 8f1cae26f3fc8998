# brickwall/assets/procedural.py
"""
Generated stand-ins for photographic textures.

Used by the demo when no image files are given, and handy in tests.
"""

from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from brickwall.assets.types import TextureData

RGB = Tuple[int, int, int]

CLAY: RGB = (160, 82, 60)
GROUND: RGB = (120, 112, 100)


def grain_texture(
    base_color: RGB,
    width: int = 256,
    height: int = 256,
    variation: int = 24,
    speckle: float = 0.04,
    seed: Optional[int] = None,
) -> TextureData:
    """
    Noisy RGBA tile around `base_color`.

    Each pixel shifts all channels by the same random amount in
    [-variation, variation]; a `speckle` fraction of pixels is darkened
    further for a grainy look.
    """
    rng = np.random.default_rng(seed)

    # 1. Per-pixel brightness shift
    shift = rng.integers(-variation, variation + 1, size=(height, width, 1))

    # 2. Dark speckles
    dark = rng.random((height, width, 1)) < speckle
    shift = np.where(dark, shift - 2 * variation, shift)

    # 3. Compose albedo
    rgb = np.clip(np.asarray(base_color, dtype=np.int32) + shift, 0, 255)
    alpha = np.full((height, width, 1), 255, dtype=np.int32)
    pixels = np.concatenate([rgb, alpha], axis=2).astype(np.uint8)

    return TextureData(
        data=pixels.tobytes(), width=width, height=height, components=4
    )


def save_texture(texture_data: TextureData, path: Path) -> None:
    mode = "RGBA" if texture_data.components == 4 else "RGB"
    img = Image.frombytes(
        mode, (texture_data.width, texture_data.height), texture_data.data
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
