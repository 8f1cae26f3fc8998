# brickwall/__init__.py
from brickwall.animation import (
    AnimatedBrick,
    AnimationConfig,
    BrickWallAnimator,
    FrameClock,
    Tween,
)
from brickwall.assets import Texture, load_texture, load_texture_file
from brickwall.dispersion import (
    AlternatingDispersion,
    ColorWallPaints,
    CustomDispersion,
    RandomDispersion,
    TextureWallPaints,
)
from brickwall.errors import PaintGridShapeError, WallConfigurationError
from brickwall.geometry import Brick, WallDimensions, build_bricks
from brickwall.paint import ColorPaint, Paint, TexturePaint
from brickwall.rendering import Mortar, SurfaceCanvas, draw_brick_wall
from brickwall.types import Color, Size, Vector2
from brickwall.wall import AnimatedBrickWall, WallConfig, animated_brick_wall

__all__ = [
    "AlternatingDispersion",
    "AnimatedBrick",
    "AnimatedBrickWall",
    "AnimationConfig",
    "Brick",
    "BrickWallAnimator",
    "Color",
    "ColorPaint",
    "ColorWallPaints",
    "CustomDispersion",
    "FrameClock",
    "Mortar",
    "Paint",
    "PaintGridShapeError",
    "RandomDispersion",
    "Size",
    "SurfaceCanvas",
    "Texture",
    "TexturePaint",
    "TextureWallPaints",
    "Tween",
    "Vector2",
    "WallConfig",
    "WallConfigurationError",
    "WallDimensions",
    "animated_brick_wall",
    "build_bricks",
    "draw_brick_wall",
    "load_texture",
    "load_texture_file",
]
