import pytest
from PIL import Image

from brickwall.assets.textures import load_texture, load_texture_file
from brickwall.assets.types import Texture, TextureData


def solid(width, height, components=4):
    pixel = bytes((200, 100, 50, 255)[:components])
    return TextureData(
        data=pixel * (width * height), width=width, height=height, components=components
    )


def test_default_scale_shrinks_tile_tenfold():
    texture = load_texture(solid(40, 20))

    assert isinstance(texture, Texture)
    assert texture.tile_size == (4, 2)
    assert (texture.scale_x, texture.scale_y) == (0.1, 0.1)


def test_scale_never_drops_below_one_pixel():
    assert load_texture(solid(3, 3), 0.01, 0.01).tile_size == (1, 1)


def test_unscaled_texture_keeps_pixels():
    texture = load_texture(solid(2, 2), 1.0, 1.0)

    assert tuple(texture.surface.get_at((1, 1))) == (200, 100, 50, 255)


def test_rgb_data_is_accepted():
    assert load_texture(solid(10, 10, components=3), 0.5, 0.5).tile_size == (5, 5)


def test_textures_compare_by_identity():
    a = load_texture(solid(2, 2), 1.0, 1.0)
    b = load_texture(solid(2, 2), 1.0, 1.0)

    assert a != b
    assert len({a, b, a}) == 2


@pytest.mark.parametrize("sx,sy", [(0.0, 1.0), (1.0, -0.5)])
def test_invalid_scale(sx, sy):
    with pytest.raises(ValueError):
        load_texture(solid(2, 2), sx, sy)


def test_invalid_component_count():
    with pytest.raises(ValueError):
        load_texture(TextureData(data=b"\x00" * 4, width=2, height=2, components=1))


def test_load_texture_file(tmp_path):
    f = tmp_path / "clay.png"
    Image.new("RGBA", (30, 10), color=(180, 80, 60, 255)).save(f)

    texture = load_texture_file(f)

    assert texture.tile_size == (3, 1)


def test_load_texture_file_propagates_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_texture_file(tmp_path / "nope.png")
