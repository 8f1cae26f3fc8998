"""
Animated brick wall demo.

Opens a window, grows a wall brick by brick and keeps drawing it until the
window is closed.

Expected keys:
    - ESC: quit
    - R: rebuild the wall and replay the animation
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import pygame

from brickwall import (
    AnimatedBrickWall,
    AnimationConfig,
    RandomDispersion,
    TexturePaint,
    TextureWallPaints,
    Tween,
    Vector2,
    animated_brick_wall,
    load_texture,
    load_texture_file,
)
from brickwall.animation.easing import FastOutSlowInEasing
from brickwall.assets.procedural import CLAY, GROUND, grain_texture
from brickwall.defaults import default_colors, default_dimensions, default_mortar
from brickwall.presets import (
    HEART_BRICKS_PER_ROW,
    HEART_ROWS,
    PresetPalette,
    preset_colors,
)

logger = logging.getLogger("brickwall.demo")

BACKGROUND = (24, 24, 28)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated brick wall demo")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument(
        "--palette",
        choices=[p.value for p in PresetPalette],
        default=None,
        help="Color preset (ignored when --brick-texture is given)",
    )
    parser.add_argument("--brick-texture", type=Path, default=None)
    parser.add_argument("--mortar-texture", type=Path, default=None)
    parser.add_argument(
        "--textured",
        action="store_true",
        help="Use generated clay and ground textures when no files are given",
    )
    parser.add_argument("--instant", action="store_true", help="Skip the growth animation")
    parser.add_argument(
        "--screenshot",
        type=Path,
        default=None,
        help="Save the frame drawn right after the animation finished",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def build_wall(args: argparse.Namespace, on_finished) -> AnimatedBrickWall:
    dimensions = default_dimensions(
        bottom_left=Vector2(0.2, 0.8),
        wall_width_ratio=0.6,
        wall_height_ratio=0.4,
        brick_rows=12,
        bricks_per_row=8,
    )
    colors = default_colors()
    mortar = default_mortar()

    if args.brick_texture is not None:
        clay = load_texture_file(args.brick_texture)
        colors = TextureWallPaints(RandomDispersion((clay,)))
    elif args.textured:
        clay = load_texture(grain_texture(CLAY, seed=1))
        colors = TextureWallPaints(RandomDispersion((clay,)))
    elif args.palette is not None:
        colors = preset_colors(args.palette)
        if args.palette == PresetPalette.HEART:
            dimensions = default_dimensions(
                bottom_left=Vector2(0.2, 0.8),
                wall_width_ratio=0.6,
                wall_height_ratio=0.6,
                brick_rows=HEART_ROWS,
                bricks_per_row=HEART_BRICKS_PER_ROW,
            )

    if args.mortar_texture is not None:
        ground = load_texture_file(args.mortar_texture)
        mortar = default_mortar(paint=TexturePaint(ground), thickness_ratio=0.002)
    elif args.textured:
        ground = load_texture(grain_texture(GROUND, variation=12, speckle=0.1, seed=2))
        mortar = default_mortar(paint=TexturePaint(ground), thickness_ratio=0.002)

    return animated_brick_wall(
        dimensions=dimensions,
        mortar=mortar,
        colors=colors,
        build_instantly=args.instant,
        start_animation=not args.instant,
        animation_config=AnimationConfig(
            animation_spec=Tween(duration_ms=100, easing=FastOutSlowInEasing),
            delay_ms=60,
        ),
        on_finished=on_finished,
    )


async def run(args: argparse.Namespace) -> None:
    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Animated Brick Wall")

    finished = asyncio.Event()

    def on_finished() -> None:
        logger.info("All animations finished!")
        finished.set()

    wall = build_wall(args, on_finished)
    wall.start()

    frame_time = 1.0 / args.fps
    screenshot_pending = args.screenshot is not None
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        await wall.cancel()
                        finished.clear()
                        wall = wall.rebuild()
                        wall.start()

            screen.fill(BACKGROUND)
            wall.draw(screen)
            pygame.display.flip()

            if screenshot_pending and (finished.is_set() or args.instant):
                pygame.image.save(screen, str(args.screenshot))
                logger.info("Saved %s", args.screenshot)
                screenshot_pending = False

            await asyncio.sleep(frame_time)
    finally:
        await wall.cancel()
        pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
