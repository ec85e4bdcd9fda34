"""Projectile solver (parabolic trajectory, no drag).

Closed form, single pass: all four inputs are known by precondition, and only
the time of flight needs root-finding.

Coordinate convention: y points up, so gravity enters the equations as
``g_eff = -g`` and the ground is ``y = 0``.
"""

from __future__ import annotations

import logging
import math

from core.domain.models import ProjectileResult
from core.solvers.quadratic import quadratic_roots

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = (
    "Please enter valid positive numbers for Initial Velocity, Gravity, Initial Height, "
    "and a Launch Angle between 0-90 degrees."
)
NO_FLIGHT_TIME_MESSAGE = (
    "No valid flight time found for given parameters. "
    "Projectile might not hit the ground or inputs are invalid."
)


def validate_projectile_inputs(
    v0: float | None,
    g: float | None,
    h0: float | None,
    angle_deg: float | None,
) -> str | None:
    """Return an error message when a precondition fails, else None."""

    values = (v0, g, h0, angle_deg)
    if any(value is None or not math.isfinite(value) for value in values):
        return INVALID_INPUT_MESSAGE
    if v0 < 0 or g <= 0 or h0 < 0 or angle_deg < 0 or angle_deg > 90:
        return INVALID_INPUT_MESSAGE
    return None


def solve_projectile(
    v0: float | None,
    g: float | None,
    h0: float | None,
    angle_deg: float | None,
) -> ProjectileResult:
    """Time of flight, range and impact speed of a launch from height `h0`.

    `g` is the gravity magnitude (positive). Invalid input returns a result
    carrying only `error_message`.
    """

    error = validate_projectile_inputs(v0, g, h0, angle_deg)
    if error:
        logger.debug("projectile input rejected: v0=%r g=%r h0=%r angle=%r", v0, g, h0, angle_deg)
        return ProjectileResult(error_message=error)

    g_eff = -g
    angle_rad = math.radians(angle_deg)
    v0x = v0 * math.cos(angle_rad)
    v0y = v0 * math.sin(angle_rad)

    # y(t) = h0 + v0y*t + 0.5*g_eff*t^2 = 0
    roots = quadratic_roots(0.5 * g_eff, v0y, h0)
    flight_times = [root for root in roots if root > 0]
    if not flight_times:
        logger.debug("no positive flight time among roots %r", roots)
        return ProjectileResult(error_message=NO_FLIGHT_TIME_MESSAGE)

    # Earliest ground contact; with h0 >= 0 there is at most one positive root.
    t_flight = min(flight_times)

    flight_range = v0x * t_flight
    vf_y = v0y + g_eff * t_flight
    vf = math.sqrt(vf_y * vf_y + v0x * v0x)

    if v0y > 0:
        time_to_peak = v0y / g
        peak_height = h0 + v0y * v0y / (2 * g)
    else:
        time_to_peak = 0.0
        peak_height = h0

    logger.debug("projectile solved: t=%r range=%r vf=%r", t_flight, flight_range, vf)
    return ProjectileResult(
        v0=v0,
        vf=vf,
        a=g_eff,
        t=t_flight,
        d=flight_range,
        h0=h0,
        angle=angle_deg,
        vf_y=vf_y,
        peak_height=peak_height,
        time_to_peak=time_to_peak,
    )


def complementary_launch(
    v0: float | None,
    g: float | None,
    h0: float | None,
    angle_deg: float | None,
) -> ProjectileResult | None:
    """Solve the same launch at ``90 - angle_deg``.

    From ground level both angles land at the same range. Returns None when
    the inputs are invalid, when the complementary angle is not strictly
    positive, or when it equals the original angle (45 degrees).
    """

    if validate_projectile_inputs(v0, g, h0, angle_deg):
        return None
    other = 90.0 - angle_deg
    if other <= 0 or math.isclose(other, angle_deg):
        return None
    return solve_projectile(v0, g, h0, other)
