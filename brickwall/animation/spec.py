# brickwall/animation/spec.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from brickwall.animation.easing import Easing, FastOutSlowInEasing
from brickwall.errors import WallConfigurationError


class AnimationSpec(Protocol):
    """
    Anything that can drive a value from start to target.

    `transform` maps the elapsed fraction of `duration_seconds` to the
    fraction of the distance covered.
    """

    @property
    def duration_seconds(self) -> float: ...

    def transform(self, fraction: float) -> float: ...


@dataclass(frozen=True, slots=True)
class Tween:
    duration_ms: int = 300
    delay_ms: int = 0
    easing: Easing = FastOutSlowInEasing

    def __post_init__(self):
        if self.duration_ms < 0 or self.delay_ms < 0:
            raise WallConfigurationError(
                f"Tween timings must be non-negative, got duration={self.duration_ms}ms, "
                f"delay={self.delay_ms}ms"
            )

    @property
    def duration_seconds(self) -> float:
        return (self.delay_ms + self.duration_ms) / 1000.0

    def transform(self, fraction: float) -> float:
        play_time_ms = max(0.0, min(fraction, 1.0)) * (self.delay_ms + self.duration_ms)
        if play_time_ms < self.delay_ms:
            return 0.0
        if self.duration_ms == 0:
            return 1.0
        return self.easing((play_time_ms - self.delay_ms) / self.duration_ms)


@dataclass(frozen=True, slots=True)
class AnimationConfig:
    """How each brick grows and how long to wait between brick launches."""

    animation_spec: AnimationSpec
    delay_ms: int

    def __post_init__(self):
        if self.delay_ms < 0:
            raise WallConfigurationError(
                f"Inter-brick delay must be non-negative, got {self.delay_ms}ms"
            )

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0
