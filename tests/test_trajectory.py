from __future__ import annotations

import pytest

from core.domain.models import KinematicResult
from core.solvers.kinematics import solve_kinematics
from core.solvers.projectile import solve_projectile
from core.solvers.trajectory import (
    animation_time_scale,
    iter_kinematic_samples,
    iter_projectile_samples,
    kinematic_position,
    projectile_position,
)


def test_kinematic_position():
    assert kinematic_position(10.0, 2.0, 5.0) == pytest.approx(75.0)
    assert kinematic_position(10.0, 2.0, 0.0) == 0.0


def test_projectile_position_at_flight_time_is_on_the_ground():
    result = solve_projectile(20.0, 9.81, 5.0, 35.0)

    x, y = projectile_position(20.0, 9.81, 5.0, 35.0, result.t)

    assert x == pytest.approx(result.d)
    assert y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "t_flight, expected",
    [
        (2.0, 2.0),
        (100.0, 0.1),
        (0.1, 10.0),
        (0.0, 1.0),
    ],
)
def test_animation_time_scale_is_clamped(t_flight, expected):
    assert animation_time_scale(t_flight) == pytest.approx(expected)


def test_kinematic_samples_stop_at_solved_time():
    result = solve_kinematics(v0=10.0, a=2.0, t=5.0)

    samples = list(iter_kinematic_samples(result, frame_rate=10.0))

    assert len(samples) == 51
    assert [s.final for s in samples].count(True) == 1
    last = samples[-1]
    assert last.final
    assert last.elapsed == pytest.approx(5.0)
    assert last.x == pytest.approx(75.0)
    elapsed = [s.elapsed for s in samples]
    assert elapsed == sorted(elapsed)
    assert all(s.y == 0.0 for s in samples)


def test_kinematic_samples_stop_at_displacement_without_time():
    result = KinematicResult(v0=2.0, a=0.0, d=10.0, solved_count=3)

    samples = list(iter_kinematic_samples(result, frame_rate=10.0))

    assert samples[-1].final
    assert samples[-1].x == 10.0
    assert samples[-1].elapsed == pytest.approx(5.0, abs=0.1)


def test_backward_displacement_is_reached_on_the_negative_side():
    result = KinematicResult(v0=-3.0, a=0.0, d=-6.0, solved_count=3)

    samples = list(iter_kinematic_samples(result, frame_rate=20.0))

    assert samples[-1].x == -6.0
    assert all(s.x <= 0 for s in samples)


def test_samplers_are_bounded_and_still_end_with_a_final_sample():
    result = KinematicResult(v0=1.0, a=0.0, t=1000.0, solved_count=3)

    samples = list(iter_kinematic_samples(result, frame_rate=10.0, max_frames=25))

    assert len(samples) == 25
    assert samples[-1].final
    assert [s.final for s in samples].count(True) == 1


def test_projectile_sampler_bound_marks_last_sample_final():
    result = solve_projectile(20.0, 9.81, 0.0, 45.0)

    samples = list(iter_projectile_samples(result, frame_rate=30.0, max_frames=5))

    assert len(samples) == 5
    assert samples[-1].final
    assert not any(s.final for s in samples[:-1])


def test_unreachable_displacement_is_rejected():
    # Turns back at x = 0.5 m, so d = 100 m never happens.
    result = solve_kinematics(v0=1.0, a=-1.0, d=100.0)
    assert result.t is None

    with pytest.raises(ValueError, match="never reached"):
        list(iter_kinematic_samples(result, max_frames=25))


def test_displacement_without_time_uses_the_earliest_crossing():
    # x(t) = 4t - t^2 crosses 3 m at t = 1 and t = 3.
    result = KinematicResult(v0=4.0, a=-2.0, d=3.0, solved_count=3)

    samples = list(iter_kinematic_samples(result, frame_rate=100.0))

    assert samples[-1].final
    assert samples[-1].x == 3.0
    assert samples[-1].elapsed == pytest.approx(1.0, abs=0.02)


@pytest.mark.parametrize(
    "result",
    [
        KinematicResult(a=1.0, t=2.0),
        KinematicResult(v0=1.0, t=2.0),
        KinematicResult(v0=1.0, a=1.0),
    ],
)
def test_kinematic_sampler_rejects_unanimatable_results(result):
    with pytest.raises(ValueError):
        list(iter_kinematic_samples(result))


def test_projectile_samples_land_at_range():
    result = solve_projectile(20.0, 9.81, 0.0, 45.0)

    samples = list(iter_projectile_samples(result, frame_rate=30.0))

    last = samples[-1]
    assert last.final
    assert (last.x, last.y) == (pytest.approx(result.d), 0.0)
    assert last.elapsed == pytest.approx(result.t)
    assert all(s.y >= -0.01 for s in samples)
    assert max(s.y for s in samples) <= result.peak_height + 1e-9


def test_time_scale_speeds_up_sampling():
    result = solve_projectile(20.0, 9.81, 0.0, 45.0)

    slow = list(iter_projectile_samples(result, frame_rate=30.0, time_scale=1.0))
    fast = list(iter_projectile_samples(result, frame_rate=30.0, time_scale=2.0))

    assert len(fast) < len(slow)


def test_projectile_sampler_rejects_errored_result():
    result = solve_projectile(20.0, 0.0, 0.0, 45.0)

    with pytest.raises(ValueError):
        list(iter_projectile_samples(result))
