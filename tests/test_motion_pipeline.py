from __future__ import annotations

import pytest

from core.config import AppSettings
from core.domain.models import MotionMode
from core.services.motion_pipeline import (
    INSUFFICIENT_CONSTANT_VELOCITY_INPUT,
    INSUFFICIENT_KINEMATIC_INPUT,
    KINEMATIC_START_MESSAGE,
    PROJECTILE_START_MESSAGE,
    CalculationRequest,
    PipelineHooks,
    apply_constant_velocity,
    calculate_readiness,
    parse_quantity,
    run_calculation,
    simulation_readiness,
)
from core.solvers.projectile import INVALID_INPUT_MESSAGE


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.5", 3.5),
        ("  -2 ", -2.0),
        ("1e3", 1000.0),
        (4, 4.0),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("inf", None),
        ("nan", None),
        (None, None),
    ],
)
def test_parse_quantity(text, expected):
    assert parse_quantity(text) == expected


def test_apply_constant_velocity_mirrors_final_velocity():
    values = apply_constant_velocity({"v0": 4.0, "vf": None, "a": 2.0, "t": 3.0, "d": None})

    assert values["a"] == 0.0
    assert values["vf"] == 4.0


def test_calculate_readiness_needs_three_knowns():
    values = {"v0": 1.0, "vf": None, "a": 2.0, "t": None, "d": None}

    assert calculate_readiness(MotionMode.KINEMATICS, values) == INSUFFICIENT_KINEMATIC_INPUT
    assert calculate_readiness(MotionMode.KINEMATICS, {**values, "t": 3.0}) is None


def test_calculate_readiness_with_constant_velocity():
    values = {"v0": 5.0, "vf": None, "a": None, "t": None, "d": None}

    assert (
        calculate_readiness(MotionMode.KINEMATICS, values, constant_velocity=True)
        == INSUFFICIENT_CONSTANT_VELOCITY_INPUT
    )
    assert calculate_readiness(MotionMode.KINEMATICS, {**values, "d": 10.0}, constant_velocity=True) is None


def test_calculate_readiness_for_projectile():
    ok = {"v0": 10.0, "g": 9.81, "h0": 0.0, "angle": 30.0}

    assert calculate_readiness(MotionMode.PROJECTILE, ok) is None
    assert calculate_readiness(MotionMode.PROJECTILE, {**ok, "angle": None}) == INVALID_INPUT_MESSAGE


@pytest.mark.parametrize(
    "values, constant_velocity, ready",
    [
        ({"v0": 1.0, "a": 2.0}, False, True),
        ({"v0": 1.0, "t": 2.0}, False, True),
        ({"v0": 1.0}, False, False),
        ({"vf": 5.0, "a": 1.0, "t": 2.0}, False, True),
        ({"vf": 5.0, "a": 1.0}, False, False),
        ({}, False, False),
        ({"v0": 3.0, "d": 9.0}, True, True),
        ({"v0": 3.0, "a": 0.0}, True, False),
    ],
)
def test_simulation_readiness_for_kinematics(values, constant_velocity, ready):
    message = simulation_readiness(MotionMode.KINEMATICS, values, constant_velocity=constant_velocity)

    assert (message is None) is ready
    if not ready:
        assert message == KINEMATIC_START_MESSAGE


def test_simulation_readiness_for_projectile():
    values = {"v0": 10.0, "g": 9.81, "h0": -1.0, "angle": 30.0}

    assert simulation_readiness(MotionMode.PROJECTILE, values) == PROJECTILE_START_MESSAGE


def test_run_kinematics_from_text():
    request = CalculationRequest(raw={"v0": "10", "vf": "", "a": "2", "t": "5", "d": ""})

    outcome = run_calculation(settings=AppSettings(), request=request)

    assert outcome.ok
    assert outcome.kinematics.vf == pytest.approx(20.0)
    assert outcome.kinematics.d == pytest.approx(75.0)
    assert outcome.inputs["vf"] is None


def test_unparseable_text_is_reported_through_hooks():
    seen: list[str] = []
    request = CalculationRequest(raw={"v0": "10", "vf": "fast", "a": "2", "t": "5"})

    outcome = run_calculation(settings=AppSettings(), request=request, hooks=PipelineHooks(warning=seen.append))

    assert outcome.ok
    assert len(seen) == 1
    assert "vf" in seen[0]
    assert outcome.warnings == seen


def test_blocked_calculation_solves_nothing():
    request = CalculationRequest(raw={"v0": "10", "a": "2"})

    outcome = run_calculation(settings=AppSettings(), request=request)

    assert outcome.error_message == INSUFFICIENT_KINEMATIC_INPUT
    assert outcome.kinematics is None


def test_simulation_request_uses_start_rules():
    request = CalculationRequest(raw={"v0": "10", "a": "2"}, for_simulation=True)

    outcome = run_calculation(settings=AppSettings(), request=request)

    # Allowed to start, but the solver cannot finish with two knowns.
    assert outcome.kinematics is not None
    assert outcome.kinematics.solved_count == 2


def test_constant_velocity_warns_about_ignored_acceleration():
    seen: list[str] = []
    request = CalculationRequest(raw={"v0": "5", "a": "3", "t": "4"}, constant_velocity=True)

    outcome = run_calculation(settings=AppSettings(), request=request, hooks=PipelineHooks(warning=seen.append))

    assert seen
    assert outcome.kinematics.a == 0.0
    assert outcome.kinematics.d == pytest.approx(20.0)


def test_projectile_uses_configured_gravity_when_missing():
    settings = AppSettings(default_gravity=10.0)
    request = CalculationRequest(mode=MotionMode.PROJECTILE, raw={"v0": "20", "h0": "0", "angle": "90"})

    outcome = run_calculation(settings=settings, request=request)

    assert outcome.ok
    assert outcome.projectile.a == -10.0
    assert outcome.projectile.t == pytest.approx(4.0)


def test_projectile_with_complementary_launch():
    request = CalculationRequest(
        mode=MotionMode.PROJECTILE,
        raw={"v0": "20", "g": "9.81", "h0": "0", "angle": "30"},
        include_complementary=True,
    )

    outcome = run_calculation(settings=AppSettings(), request=request)

    assert outcome.complementary is not None
    assert outcome.complementary.d == pytest.approx(outcome.projectile.d)


def test_projectile_errors_surface_on_the_outcome():
    request = CalculationRequest(mode=MotionMode.PROJECTILE, raw={"v0": "20", "g": "9.81", "h0": "0", "angle": "0"})

    outcome = run_calculation(settings=AppSettings(), request=request)

    assert not outcome.ok
    assert outcome.projectile is not None
    assert outcome.error_message == outcome.projectile.error_message
