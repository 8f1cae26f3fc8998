# brickwall/animation/animatable.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from brickwall.animation.clock import FrameClock
from brickwall.animation.spec import AnimationSpec
from brickwall.geometry import Brick


class Animatable:
    """
    A single float animated over time.

    Only the task running `animate_to` writes the value; readers get a plain
    snapshot and never block.
    """

    __slots__ = ("_value", "_target", "_running")

    def __init__(self, initial_value: float) -> None:
        self._value = float(initial_value)
        self._target = float(initial_value)
        self._running = False

    @property
    def value(self) -> float:
        return self._value

    @property
    def target_value(self) -> float:
        return self._target

    @property
    def is_running(self) -> bool:
        return self._running

    def snap_to(self, value: float) -> None:
        self._value = float(value)
        self._target = float(value)

    async def animate_to(
        self, target_value: float, spec: AnimationSpec, clock: FrameClock
    ) -> None:
        """
        Move from the current value to `target_value` along `spec`.
        The final value is set to the target exactly.
        """
        start = self._value
        self._target = float(target_value)
        began = clock.now()
        total = spec.duration_seconds

        self._running = True
        try:
            while True:
                elapsed = clock.now() - began
                fraction = 1.0 if total <= 0.0 else min(elapsed / total, 1.0)

                if fraction >= 1.0:
                    self._value = self._target
                    return

                self._value = start + (self._target - start) * spec.transform(
                    fraction
                )
                await clock.next_frame()
        finally:
            self._running = False


@dataclass(frozen=True)
class AnimatedBrick:
    brick: Brick
    animatable: Animatable

    @property
    def progress(self) -> float:
        return self.animatable.value


def animate_bricks(
    bricks: Sequence[Sequence[Brick]], build_instantly: bool
) -> List[List[AnimatedBrick]]:
    """Wrap every brick with its own progress, fully grown when `build_instantly`."""
    initial = 1.0 if build_instantly else 0.0
    return [
        [AnimatedBrick(brick=brick, animatable=Animatable(initial)) for brick in row]
        for row in bricks
    ]
