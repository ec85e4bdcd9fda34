"""Trajectory sampling for animation drivers.

The samplers evaluate the same closed-form position equations the solvers use
at increasing elapsed time. They are generators: a driver pulls one sample per
frame and can stop at any point (cancellation is just not pulling).
"""

from __future__ import annotations

import math
from typing import Iterator

from core.domain.models import KinematicResult, ProjectileResult, TrajectorySample
from core.solvers.kinematics import earliest_time_to

DEFAULT_TOLERANCE = 0.01
DEFAULT_MAX_FRAMES = 10_000


def kinematic_position(v0: float, a: float, elapsed: float) -> float:
    return v0 * elapsed + 0.5 * a * elapsed * elapsed


def projectile_position(
    v0: float,
    g: float,
    h0: float,
    angle_deg: float,
    elapsed: float,
) -> tuple[float, float]:
    """(x, y) of a launch at `elapsed` seconds; `g` is the gravity magnitude."""

    angle_rad = math.radians(angle_deg)
    x = v0 * math.cos(angle_rad) * elapsed
    y = h0 + v0 * math.sin(angle_rad) * elapsed - 0.5 * g * elapsed * elapsed
    return x, y


def animation_time_scale(
    t_flight: float,
    target_seconds: float = 4.0,
    bounds: tuple[float, float] = (0.1, 10.0),
) -> float:
    """Physics seconds per wall-clock second so a flight lasts ~`target_seconds`."""

    if t_flight <= 0:
        return 1.0
    low, high = bounds
    return max(low, min(high, target_seconds / t_flight))


def _reached_displacement(x: float, d: float, tolerance: float) -> bool:
    return abs(x) >= abs(d) - tolerance and math.copysign(1, x) == math.copysign(1, d) and x != 0


def _time_to_reach(v0: float, a: float, d: float) -> float | None:
    if 0.5 * a != 0:
        return earliest_time_to(v0, a, d)
    if v0 != 0:
        t = d / v0
        return t if t >= 0 else None
    return 0.0 if d == 0 else None


def iter_kinematic_samples(
    result: KinematicResult,
    *,
    frame_rate: float = 60.0,
    tolerance: float = DEFAULT_TOLERANCE,
    max_frames: int = DEFAULT_MAX_FRAMES,
) -> Iterator[TrajectorySample]:
    """Yield x(t) = v0*t + 0.5*a*t^2 until the solved time or displacement.

    Stops once `elapsed >= t - tolerance`, or once `|x|` reaches `|d|` on the
    same side as `d`. The last sample sits exactly at `d` when known. When
    `max_frames` runs out first, the last sample emitted is marked final.

    Raises:
        ValueError: `v0`/`a` are unknown, neither `t` nor `d` is known, or
            `d` is never reached by this motion.
    """

    if result.v0 is None or result.a is None:
        raise ValueError("Initial velocity and acceleration must be solved before animating.")
    if result.t is None and result.d is None:
        raise ValueError("Time or displacement must be solved before animating.")
    if frame_rate <= 0:
        raise ValueError("frame_rate must be positive.")

    stop_time = result.t
    if stop_time is None:
        stop_time = _time_to_reach(result.v0, result.a, result.d)
        if stop_time is None:
            raise ValueError("The displacement is never reached with this initial velocity and acceleration.")

    for frame in range(max_frames):
        elapsed = frame / frame_rate
        x = kinematic_position(result.v0, result.a, elapsed)
        done_by_time = elapsed >= stop_time - tolerance
        done_by_distance = result.d is not None and result.d != 0 and _reached_displacement(x, result.d, tolerance)
        if done_by_time or done_by_distance:
            final_elapsed = stop_time if done_by_time else elapsed
            final_x = result.d if result.d is not None else kinematic_position(result.v0, result.a, final_elapsed)
            yield TrajectorySample(elapsed=max(final_elapsed, 0.0), x=final_x, final=True)
            return
        yield TrajectorySample(elapsed=elapsed, x=x, final=frame == max_frames - 1)


def iter_projectile_samples(
    result: ProjectileResult,
    *,
    frame_rate: float = 60.0,
    time_scale: float = 1.0,
    tolerance: float = DEFAULT_TOLERANCE,
    max_frames: int = DEFAULT_MAX_FRAMES,
) -> Iterator[TrajectorySample]:
    """Yield (x, y) positions of a solved launch until it lands.

    Physics time advances by `time_scale / frame_rate` per frame. Stops at
    `elapsed >= t_flight - tolerance` or when the body dips below `-tolerance`,
    with a final sample at (range, 0). When `max_frames` runs out first, the
    last sample emitted is marked final.

    Raises:
        ValueError: the result carries an error message.
    """

    if not result.ok:
        raise ValueError(result.error_message)
    if frame_rate <= 0 or time_scale <= 0:
        raise ValueError("frame_rate and time_scale must be positive.")

    gravity = -result.a
    step = time_scale / frame_rate
    for frame in range(max_frames):
        elapsed = frame * step
        x, y = projectile_position(result.v0, gravity, result.h0, result.angle, elapsed)
        if elapsed >= result.t - tolerance or y < -tolerance:
            yield TrajectorySample(elapsed=result.t, x=result.d, y=0.0, final=True)
            return
        yield TrajectorySample(elapsed=elapsed, x=x, y=y, final=frame == max_frames - 1)
