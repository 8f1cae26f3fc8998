# brickwall/animation/clock.py
import asyncio
from dataclasses import dataclass


@dataclass
class FrameClock:
    """
    Paces animations on the running event loop.

    Animatables sample `now()` once per frame and yield with `next_frame()`.
    """

    target_fps: int = 60

    _dt: float = 0.0

    def __post_init__(self):
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")
        self._dt = 1.0 / self.target_fps

    @property
    def dt(self) -> float:
        """The frame interval (e.g., 0.0166 for 60fps)."""
        return self._dt

    def now(self) -> float:
        return asyncio.get_running_loop().time()

    async def next_frame(self) -> float:
        await asyncio.sleep(self._dt)
        return self.now()
