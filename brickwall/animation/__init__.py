# brickwall/animation/__init__.py
from brickwall.animation.animatable import AnimatedBrick, Animatable, animate_bricks
from brickwall.animation.clock import FrameClock
from brickwall.animation.driver import BrickWallAnimator
from brickwall.animation.easing import (
    CubicBezierEasing,
    Easing,
    FastOutLinearInEasing,
    FastOutSlowInEasing,
    LinearEasing,
    LinearOutSlowInEasing,
)
from brickwall.animation.spec import AnimationConfig, AnimationSpec, Tween

__all__ = [
    "Animatable",
    "AnimatedBrick",
    "AnimationConfig",
    "AnimationSpec",
    "BrickWallAnimator",
    "CubicBezierEasing",
    "Easing",
    "FastOutLinearInEasing",
    "FastOutSlowInEasing",
    "FrameClock",
    "LinearEasing",
    "LinearOutSlowInEasing",
    "Tween",
    "animate_bricks",
]
