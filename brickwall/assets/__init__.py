# brickwall/assets/__init__.py
from brickwall.assets.importers import AssetImporter, TextureImporter
from brickwall.assets.procedural import grain_texture, save_texture
from brickwall.assets.textures import (
    DEFAULT_TEXTURE_SCALE,
    load_texture,
    load_texture_file,
)
from brickwall.assets.types import Texture, TextureData

__all__ = [
    "AssetImporter",
    "TextureImporter",
    "Texture",
    "TextureData",
    "DEFAULT_TEXTURE_SCALE",
    "load_texture",
    "load_texture_file",
    "grain_texture",
    "save_texture",
]
