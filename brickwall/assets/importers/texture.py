# brickwall/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from brickwall.assets.importers.base import AssetImporter
from brickwall.assets.types import TextureData


class TextureImporter(AssetImporter):
    def import_file(self, path: Path) -> TextureData:
        with Image.open(path) as img:
            converted = img.convert("RGBA")

            width, height = converted.size
            data = converted.tobytes()

        return TextureData(data=data, width=width, height=height, components=4)
