import pygame
import pytest

from brickwall.animation.animatable import animate_bricks
from brickwall.assets.textures import load_texture
from brickwall.assets.types import TextureData
from brickwall.geometry import WallDimensions, build_bricks
from brickwall.paint import ColorPaint, TexturePaint
from brickwall.rendering.canvas import SurfaceCanvas, stroke_bounds, to_pixel_rect
from brickwall.rendering.mortar import Mortar
from brickwall.rendering.renderer import draw_brick_wall
from brickwall.types import Size, Vector2

from tests.conftest import BLUE, GRAY, GREEN, RED

BLACK = (0, 0, 0, 255)


@pytest.fixture
def surface():
    s = pygame.Surface((100, 100), pygame.SRCALPHA)
    s.fill(BLACK)
    return s


@pytest.fixture
def checker():
    # 2x2 tile: red green / blue gray
    data = bytes(RED + GREEN + BLUE + GRAY)
    return load_texture(TextureData(data=data, width=2, height=2, components=4), 1.0, 1.0)


def test_pixel_rect_rounds_edges():
    rect = to_pixel_rect(Vector2(0.4, 0.6), Size(10.2, 4.8))

    assert (rect.left, rect.top, rect.right, rect.bottom) == (0, 1, 11, 5)


def test_stroke_bounds_are_centered_on_the_line():
    assert stroke_bounds(Vector2(10, 0), Vector2(10, 20), 4.0) == (Vector2(8, 0), Size(4.0, 20))
    assert stroke_bounds(Vector2(30, 5), Vector2(0, 5), 2.0) == (Vector2(0, 4), Size(30, 2.0))


def test_diagonal_strokes_are_rejected():
    with pytest.raises(ValueError):
        stroke_bounds(Vector2(0, 0), Vector2(5, 5), 1.0)


def test_color_fill(surface):
    canvas = SurfaceCanvas(surface)

    canvas.draw_rect(ColorPaint(RED), Vector2(10, 10), Size(20, 20))

    assert tuple(surface.get_at((15, 15))) == RED
    assert tuple(surface.get_at((35, 35))) == BLACK


def test_empty_rect_draws_nothing(surface):
    SurfaceCanvas(surface).draw_rect(ColorPaint(RED), Vector2(10, 10), Size(20, 0))

    assert tuple(surface.get_at((15, 10))) == BLACK


def test_texture_fill_is_anchored_at_surface_origin(surface, checker):
    canvas = SurfaceCanvas(surface)

    canvas.draw_rect(TexturePaint(checker), Vector2(3, 5), Size(4, 4))

    # Pixel (x, y) takes the tile pixel (x % 2, y % 2).
    assert tuple(surface.get_at((3, 5))) == GRAY
    assert tuple(surface.get_at((4, 6))) == RED
    assert tuple(surface.get_at((4, 5))) == BLUE
    assert tuple(surface.get_at((3, 6))) == GREEN
    # Clipped to the rect.
    assert tuple(surface.get_at((2, 5))) == BLACK
    assert tuple(surface.get_at((7, 5))) == BLACK


def test_texture_fill_restores_clip(surface, checker):
    canvas = SurfaceCanvas(surface)

    canvas.draw_rect(TexturePaint(checker), Vector2(0, 0), Size(10, 10))

    assert surface.get_clip() == surface.get_rect()


def test_line_is_drawn_as_stroke(surface):
    SurfaceCanvas(surface).draw_line(ColorPaint(GREEN), Vector2(50, 10), Vector2(50, 90), 6.0)

    assert tuple(surface.get_at((48, 50))) == GREEN
    assert tuple(surface.get_at((52, 50))) == GREEN
    assert tuple(surface.get_at((56, 50))) == BLACK


def test_single_brick_wall_on_surface(surface):
    dims = WallDimensions(Vector2(0.0, 1.0), 1.0, 1.0, 1, 1)
    bricks = animate_bricks(build_bricks(dims, [[ColorPaint(RED)]]), True)
    mortar = Mortar(ColorPaint(GRAY), 0.1)

    draw_brick_wall(SurfaceCanvas(surface), bricks, dims, mortar)

    assert tuple(surface.get_at((50, 50))) == RED
    # 10px strokes centered on each outer edge
    assert tuple(surface.get_at((2, 50))) == GRAY
    assert tuple(surface.get_at((97, 50))) == GRAY
    assert tuple(surface.get_at((50, 2))) == GRAY
    assert tuple(surface.get_at((50, 97))) == GRAY
