import asyncio
import logging

import pytest

from brickwall.animation.animatable import animate_bricks
from brickwall.animation.driver import BrickWallAnimator
from brickwall.animation.spec import AnimationConfig, Tween
from brickwall.geometry import WallDimensions, build_bricks
from brickwall.paint import ColorPaint
from brickwall.types import Vector2

from tests.conftest import RED


def make_bricks(rows=3, per_row=2, instantly=False):
    dims = WallDimensions(Vector2(0.0, 1.0), 1.0, 1.0, rows, per_row)
    grid = [[ColorPaint(RED)] * dims.columns_in_row(r) for r in range(rows)]
    return animate_bricks(build_bricks(dims, grid), instantly)


def progress(bricks):
    return [b.progress for row in bricks for b in row]


@pytest.mark.anyio
async def test_finished_callback_fires_once_after_every_brick(fast_clock):
    bricks = make_bricks()
    snapshots = []

    animator = BrickWallAnimator(
        bricks,
        AnimationConfig(Tween(duration_ms=20), delay_ms=1),
        on_finished=lambda: snapshots.append(progress(bricks)),
        clock=fast_clock,
    )
    await animator.run()

    assert len(snapshots) == 1
    assert all(p == 1.0 for p in snapshots[0])
    assert animator.is_finished
    assert not animator.is_running


@pytest.mark.anyio
async def test_bricks_launch_bottom_to_top_left_to_right(fast_clock, caplog):
    bricks = make_bricks(rows=3, per_row=2)
    animator = BrickWallAnimator(
        bricks, AnimationConfig(Tween(duration_ms=5), delay_ms=0), clock=fast_clock
    )

    with caplog.at_level(logging.DEBUG, logger="brickwall.animation.driver"):
        await animator.run()

    launches = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Launched")]
    assert launches == [
        "Launched brick row=0 col=0",
        "Launched brick row=0 col=1",
        "Launched brick row=1 col=0",
        "Launched brick row=1 col=1",
        "Launched brick row=1 col=2",
        "Launched brick row=2 col=0",
        "Launched brick row=2 col=1",
    ]


@pytest.mark.anyio
async def test_bricks_grow_concurrently(fast_clock):
    bricks = make_bricks()
    animator = BrickWallAnimator(
        bricks, AnimationConfig(Tween(duration_ms=5000), delay_ms=0), clock=fast_clock
    )

    animator.start()
    await asyncio.sleep(0.05)

    # Every brick launched without waiting for the previous one.
    assert all(b.animatable.is_running for row in bricks for b in row)
    assert animator.is_running

    await animator.cancel()


@pytest.mark.anyio
async def test_disabled_animation_never_launches(fast_clock):
    bricks = make_bricks()
    calls = []
    animator = BrickWallAnimator(
        bricks,
        AnimationConfig(Tween(duration_ms=5), delay_ms=0),
        on_finished=lambda: calls.append(True),
        enabled=False,
        clock=fast_clock,
    )

    assert animator.start() is None
    await animator.run()

    assert calls == []
    assert progress(bricks) == [0.0] * 7
    assert not animator.is_finished


@pytest.mark.anyio
async def test_built_instantly_stays_built_without_animation(fast_clock):
    bricks = make_bricks(instantly=True)
    animator = BrickWallAnimator(
        bricks, AnimationConfig(Tween(), delay_ms=0), enabled=False, clock=fast_clock
    )

    await animator.run()

    assert progress(bricks) == [1.0] * 7


@pytest.mark.anyio
async def test_cancel_mid_sequence_skips_callback(fast_clock):
    bricks = make_bricks()
    calls = []
    animator = BrickWallAnimator(
        bricks,
        AnimationConfig(Tween(duration_ms=200), delay_ms=20),
        on_finished=lambda: calls.append(True),
        clock=fast_clock,
    )

    animator.start()
    await asyncio.sleep(0.03)
    await animator.cancel()

    assert calls == []
    assert animator.is_cancelled
    assert not animator.is_finished
    assert not any(b.animatable.is_running for row in bricks for b in row)
    # The top row was never reached.
    assert [b.progress for b in bricks[-1]] == [0.0, 0.0]

    # Nothing keeps running after the cancel.
    frozen = progress(bricks)
    await asyncio.sleep(0.05)
    assert progress(bricks) == frozen


@pytest.mark.anyio
async def test_cancel_before_start_is_a_no_op(fast_clock):
    animator = BrickWallAnimator(
        make_bricks(), AnimationConfig(Tween(), delay_ms=0), clock=fast_clock
    )

    await animator.cancel()

    assert not animator.is_cancelled


@pytest.mark.anyio
async def test_run_only_once(fast_clock):
    animator = BrickWallAnimator(
        make_bricks(rows=1, per_row=1),
        AnimationConfig(Tween(duration_ms=1), delay_ms=0),
        clock=fast_clock,
    )
    await animator.run()

    with pytest.raises(RuntimeError):
        await animator.run()


@pytest.mark.anyio
async def test_start_returns_the_same_task(fast_clock):
    animator = BrickWallAnimator(
        make_bricks(rows=1, per_row=1),
        AnimationConfig(Tween(duration_ms=1), delay_ms=0),
        clock=fast_clock,
    )

    task = animator.start()
    assert animator.start() is task

    await task
    assert animator.is_finished


@pytest.mark.anyio
async def test_cancel_stops_a_sequence_scheduled_through_run(fast_clock):
    bricks = make_bricks()
    calls = []
    animator = BrickWallAnimator(
        bricks,
        AnimationConfig(Tween(duration_ms=200), delay_ms=20),
        on_finished=lambda: calls.append(True),
        clock=fast_clock,
    )

    task = asyncio.create_task(animator.run())
    await asyncio.sleep(0.03)
    await animator.cancel()

    assert task.cancelled()
    assert animator.is_cancelled
    assert not animator.is_running
    assert not any(b.animatable.is_running for row in bricks for b in row)

    frozen = progress(bricks)
    await asyncio.sleep(0.3)
    assert progress(bricks) == frozen
    assert calls == []


@pytest.mark.anyio
async def test_cancelling_the_run_task_marks_the_animator_cancelled(fast_clock):
    animator = BrickWallAnimator(
        make_bricks(),
        AnimationConfig(Tween(duration_ms=200), delay_ms=20),
        clock=fast_clock,
    )

    task = asyncio.create_task(animator.run())
    await asyncio.sleep(0.03)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert animator.is_cancelled
    assert not animator.is_running
    assert not animator.is_finished

    # Already stopped, so there is nothing left to cancel.
    await animator.cancel()
