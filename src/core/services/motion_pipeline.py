"""Calculation orchestration utilities.

This module holds the glue between raw user input and the pure solvers:
text parsing, constant-velocity handling, readiness checks for the calculate
and simulate actions, and dispatch by mode. The CLI delegates all of it here,
which keeps printing out of the core logic and makes the flow testable
without a terminal.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Mapping

from core.config import AppSettings
from core.domain.models import KinematicResult, KinematicState, MotionMode, ProjectileResult
from core.solvers.kinematics import solve_state
from core.solvers.projectile import complementary_launch, solve_projectile, validate_projectile_inputs

logger = logging.getLogger(__name__)

KINEMATIC_FIELDS: tuple[str, ...] = ("v0", "vf", "a", "t", "d")
PROJECTILE_FIELDS: tuple[str, ...] = ("v0", "g", "h0", "angle")

INSUFFICIENT_KINEMATIC_INPUT = "Please enter at least three known values to calculate the others."
INSUFFICIENT_CONSTANT_VELOCITY_INPUT = (
    "Constant velocity needs Initial Velocity and one of Time or Displacement."
)
KINEMATIC_START_MESSAGE = (
    "Please enter sufficient values to start the kinematic simulation. Generally, Initial Velocity "
    "and at least one of Acceleration, Time, or Displacement are needed."
)
PROJECTILE_START_MESSAGE = (
    "Please enter valid positive numbers for Initial Velocity, Initial Height, Gravity, and a "
    "Launch Angle between 0-90 degrees to start the projectile simulation."
)


def parse_quantity(text: str | float | None) -> float | None:
    """Parse a user-entered number; empty, unparseable or non-finite -> None."""

    if text is None:
        return None
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        cleaned = text.strip()
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def parse_inputs(raw: Mapping[str, str | float | None], names: tuple[str, ...]) -> dict[str, float | None]:
    return {name: parse_quantity(raw.get(name)) for name in names}


def count_known(values: Mapping[str, float | None]) -> int:
    return sum(1 for value in values.values() if value is not None)


def apply_constant_velocity(values: Mapping[str, float | None]) -> dict[str, float | None]:
    """Force a = 0 and mirror vf from v0 when vf was left blank."""

    out = dict(values)
    out["a"] = 0.0
    if out.get("vf") is None and out.get("v0") is not None:
        out["vf"] = out["v0"]
    return out


def calculate_readiness(
    mode: MotionMode,
    values: Mapping[str, float | None],
    *,
    constant_velocity: bool = False,
) -> str | None:
    """Why the calculate action cannot run yet, or None when it can.

    Kinematics needs three knowns. With constant velocity, acceleration and
    final velocity are implied, so v0 plus time or displacement is enough.
    Projectile needs all four inputs inside their domains.
    """

    if mode is MotionMode.PROJECTILE:
        return validate_projectile_inputs(values.get("v0"), values.get("g"), values.get("h0"), values.get("angle"))

    if constant_velocity:
        if values.get("v0") is None or (values.get("t") is None and values.get("d") is None):
            return INSUFFICIENT_CONSTANT_VELOCITY_INPUT
        return None

    if count_known({name: values.get(name) for name in KINEMATIC_FIELDS}) < 3:
        return INSUFFICIENT_KINEMATIC_INPUT
    return None


def simulation_readiness(
    mode: MotionMode,
    values: Mapping[str, float | None],
    *,
    constant_velocity: bool = False,
) -> str | None:
    """Why an animation cannot start from these inputs, or None when it can."""

    if mode is MotionMode.PROJECTILE:
        error = validate_projectile_inputs(values.get("v0"), values.get("g"), values.get("h0"), values.get("angle"))
        return PROJECTILE_START_MESSAGE if error else None

    v0 = values.get("v0")
    a = values.get("a")
    t = values.get("t")
    d = values.get("d")
    vf = values.get("vf")

    if constant_velocity:
        ready = v0 is not None and (t is not None or d is not None)
    elif v0 is not None and (a is not None or t is not None or d is not None):
        ready = True
    elif vf is not None:
        ready = count_known({"vf": vf, "a": a, "t": t, "d": d}) >= 3
    else:
        ready = False
    return None if ready else KINEMATIC_START_MESSAGE


@dataclass
class CalculationRequest:
    """Parameters that control one calculation."""

    mode: MotionMode = MotionMode.KINEMATICS
    raw: Mapping[str, str | float | None] = field(default_factory=dict)
    constant_velocity: bool = False
    include_complementary: bool = False
    for_simulation: bool = False


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class CalculationOutcome:
    """Output of a pipeline invocation.

    `error_message` holds a readiness failure (nothing was solved) or the
    solver's own message.
    """

    mode: MotionMode
    inputs: dict[str, float | None]
    kinematics: KinematicResult | None = None
    projectile: ProjectileResult | None = None
    complementary: ProjectileResult | None = None
    error_message: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error_message is None


def run_calculation(
    *,
    settings: AppSettings,
    request: CalculationRequest,
    hooks: PipelineHooks | None = None,
) -> CalculationOutcome:
    hooks = hooks or PipelineHooks()
    warnings: list[str] = []

    def warn(message: str) -> None:
        warnings.append(message)
        logger.warning(message)
        if hooks.warning:
            hooks.warning(message)

    names = PROJECTILE_FIELDS if request.mode is MotionMode.PROJECTILE else KINEMATIC_FIELDS
    values = parse_inputs(request.raw, names)
    for name in names:
        raw_value = request.raw.get(name)
        if values[name] is None and isinstance(raw_value, str) and raw_value.strip():
            warn(f"Ignoring unparseable value for {name}: {raw_value!r}")

    if request.mode is MotionMode.PROJECTILE and values["g"] is None:
        values["g"] = settings.default_gravity

    if request.mode is MotionMode.KINEMATICS and request.constant_velocity:
        if values.get("a") not in (None, 0.0):
            warn("Constant velocity mode ignores the given acceleration.")
        values = apply_constant_velocity(values)

    readiness = simulation_readiness if request.for_simulation else calculate_readiness
    blocked = readiness(request.mode, values, constant_velocity=request.constant_velocity)
    if blocked:
        logger.info("calculation blocked: %s", blocked)
        return CalculationOutcome(mode=request.mode, inputs=values, error_message=blocked, warnings=warnings)

    if request.mode is MotionMode.PROJECTILE:
        result = solve_projectile(values["v0"], values["g"], values["h0"], values["angle"])
        complementary = None
        if request.include_complementary and result.ok:
            complementary = complementary_launch(values["v0"], values["g"], values["h0"], values["angle"])
        return CalculationOutcome(
            mode=request.mode,
            inputs=values,
            projectile=result,
            complementary=complementary,
            error_message=result.error_message,
            warnings=warnings,
        )

    state = KinematicState(**{name: values[name] for name in KINEMATIC_FIELDS})
    kinematics = solve_state(
        state,
        constant_velocity=request.constant_velocity,
        max_passes=settings.max_passes,
    )
    return CalculationOutcome(
        mode=request.mode,
        inputs=values,
        kinematics=kinematics,
        error_message=kinematics.error_message,
        warnings=warnings,
    )
