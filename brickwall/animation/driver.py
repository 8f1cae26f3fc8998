# brickwall/animation/driver.py
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Sequence

from brickwall.animation.animatable import AnimatedBrick
from brickwall.animation.clock import FrameClock
from brickwall.animation.spec import AnimationConfig

logger = logging.getLogger(__name__)

FinishedCallback = Callable[[], None]


class BrickWallAnimator:
    """
    Grows the bricks of a wall one after another.

    Bricks launch bottom row first, left to right within a row, with
    `config.delay_ms` between launches. Each brick animates in its own task;
    the driver never waits for one brick before launching the next.
    `on_finished` runs once, after the last delay has elapsed and every
    brick has settled.
    """

    def __init__(
        self,
        bricks: Sequence[Sequence[AnimatedBrick]],
        config: AnimationConfig,
        on_finished: Optional[FinishedCallback] = None,
        enabled: bool = True,
        clock: Optional[FrameClock] = None,
    ) -> None:
        self._bricks = bricks
        self._config = config
        self._on_finished = on_finished
        self._enabled = enabled
        self._clock = clock or FrameClock()

        self._task: Optional[asyncio.Task[None]] = None
        self._owns_task = False
        self._started = False
        self._finished = False
        self._cancelled = False
        self._stopped = asyncio.Event()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_running(self) -> bool:
        return self._started and not self._finished and not self.is_cancelled

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def is_cancelled(self) -> bool:
        if self._cancelled:
            return True
        # Cancelled before `run` got its first step.
        return (
            not self._finished
            and self._task is not None
            and self._task.cancelled()
        )

    async def run(self) -> None:
        """
        Run the whole sequence in the current task.

        The task is remembered so `cancel` also stops a sequence the caller
        scheduled itself.
        """
        if not self._enabled:
            return
        if self._started:
            raise RuntimeError("A brick wall animation can only run once.")
        self._started = True
        if self._task is None:
            self._task = asyncio.current_task()

        spec = self._config.animation_spec
        delay = self._config.delay_seconds

        try:
            # Leaving the group waits for every brick; cancelling the driver
            # cancels every brick still growing.
            async with asyncio.TaskGroup() as group:
                for row in self._bricks:
                    for animated in row:
                        brick = animated.brick
                        group.create_task(
                            animated.animatable.animate_to(1.0, spec, self._clock),
                            name=f"brick-{brick.row}-{brick.col}",
                        )
                        logger.debug(
                            "Launched brick row=%d col=%d", brick.row, brick.col
                        )
                        await asyncio.sleep(delay)
        except asyncio.CancelledError:
            self._cancelled = True
            logger.info("Brick wall animation cancelled")
            raise
        finally:
            self._stopped.set()

        self._finished = True
        logger.info("Brick wall animation finished")
        if self._on_finished is not None:
            self._on_finished()

    def start(self) -> Optional[asyncio.Task[None]]:
        """
        Schedule `run` on the running loop and return its task.
        Returns None when the animation is disabled.
        """
        if not self._enabled:
            return None
        if self._task is None:
            self._task = asyncio.create_task(self.run(), name="brick-wall-animator")
            self._owns_task = True
        return self._task

    async def cancel(self) -> None:
        """
        Stop the sequence and every brick still growing, whether it was
        launched with `start` or awaited through `run`. Never fires
        `on_finished`.
        """
        task = self._task
        if task is None or task.done() or self._stopped.is_set():
            return

        task.cancel()
        if task is asyncio.current_task():
            return

        if not self._owns_task:
            # The caller's task outlives the sequence; only wait for `run`.
            await self._stopped.wait()
            return

        try:
            await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
