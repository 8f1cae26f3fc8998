# brickwall/wall.py
"""
Public entry point: build a wall from its configuration, animate it and
draw it.

A wall is a pure function of its `WallConfig`. Changing the configuration
means building a new wall with `rebuild`; nothing is patched in place, so an
animation still running on the old wall never touches the new one.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, List, Optional

import numpy as np
import pygame

from brickwall.animation.animatable import AnimatedBrick, animate_bricks
from brickwall.animation.clock import FrameClock
from brickwall.animation.driver import BrickWallAnimator, FinishedCallback
from brickwall.animation.spec import AnimationConfig
from brickwall.defaults import (
    default_animation_config,
    default_colors,
    default_dimensions,
    default_mortar,
)
from brickwall.dispersion import WallPaints, resolve_paints
from brickwall.geometry import BrickGrid, WallDimensions, build_bricks
from brickwall.paint import Paint
from brickwall.rendering.canvas import Canvas, SurfaceCanvas
from brickwall.rendering.mortar import Mortar
from brickwall.rendering.renderer import draw_brick_wall

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WallConfig:
    dimensions: WallDimensions = default_dimensions()
    mortar: Optional[Mortar] = default_mortar()
    colors: WallPaints = default_colors()
    start_animation: bool = True
    build_instantly: bool = False
    animation_config: AnimationConfig = default_animation_config()


class AnimatedBrickWall:
    def __init__(
        self,
        config: WallConfig = WallConfig(),
        on_finished: Optional[FinishedCallback] = None,
        clock: Optional[FrameClock] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config
        self._on_finished = on_finished
        self._clock = clock
        self._rng = rng

        # Fails fast on a malformed paint grid, before any brick exists.
        self.paint_grid: List[List[Paint]] = resolve_paints(
            config.colors, config.dimensions, rng
        )
        self.bricks: BrickGrid = build_bricks(config.dimensions, self.paint_grid)
        self.animated_bricks: List[List[AnimatedBrick]] = animate_bricks(
            self.bricks, config.build_instantly
        )
        self.animator = BrickWallAnimator(
            self.animated_bricks,
            config.animation_config,
            on_finished=on_finished,
            enabled=config.start_animation,
            clock=clock,
        )

        logger.debug(
            "Built wall: %d rows, %d bricks",
            config.dimensions.brick_rows,
            sum(len(row) for row in self.bricks),
        )

    @property
    def dimensions(self) -> WallDimensions:
        return self.config.dimensions

    @property
    def mortar(self) -> Optional[Mortar]:
        return self.config.mortar

    @property
    def is_finished(self) -> bool:
        return self.animator.is_finished

    def progress_grid(self) -> List[List[float]]:
        return [[animated.progress for animated in row] for row in self.animated_bricks]

    def draw(self, target: Canvas | pygame.Surface) -> None:
        canvas = SurfaceCanvas(target) if isinstance(target, pygame.Surface) else target
        draw_brick_wall(canvas, self.animated_bricks, self.dimensions, self.mortar)

    def start(self) -> Optional[asyncio.Task[None]]:
        """Launch the growth sequence on the running loop (None if disabled)."""
        return self.animator.start()

    async def run(self) -> None:
        await self.animator.run()

    async def cancel(self) -> None:
        await self.animator.cancel()

    def rebuild(self, **changes: Any) -> AnimatedBrickWall:
        """
        A new wall with `changes` applied to the configuration.
        The caller cancels this wall's animation if it is still running.
        """
        return AnimatedBrickWall(
            replace(self.config, **changes),
            on_finished=self._on_finished,
            clock=self._clock,
            rng=self._rng,
        )


def animated_brick_wall(
    dimensions: WallDimensions = default_dimensions(),
    mortar: Optional[Mortar] = default_mortar(),
    colors: WallPaints = default_colors(),
    start_animation: bool = True,
    build_instantly: bool = False,
    animation_config: AnimationConfig = default_animation_config(),
    on_finished: Optional[FinishedCallback] = None,
    clock: Optional[FrameClock] = None,
    rng: Optional[np.random.Generator] = None,
) -> AnimatedBrickWall:
    config = WallConfig(
        dimensions=dimensions,
        mortar=mortar,
        colors=colors,
        start_animation=start_animation,
        build_instantly=build_instantly,
        animation_config=animation_config,
    )
    return AnimatedBrickWall(config, on_finished=on_finished, clock=clock, rng=rng)
