from brickwall.assets.importers.base import AssetImporter
from brickwall.assets.importers.texture import TextureImporter

__all__ = ["AssetImporter", "TextureImporter"]
