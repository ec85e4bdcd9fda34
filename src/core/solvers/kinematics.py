"""Kinematics solver (1-D uniformly-accelerated motion).

Given any subset of {v0, vf, a, t, d}, derives the unknowns by constraint
propagation over four equations:

- Eq1: vf = v0 + a*t
- Eq2: d = v0*t + 0.5*a*t^2
- Eq3: vf^2 = v0^2 + 2*a*d
- Eq4: d = 0.5*(v0 + vf)*t

Each equation relates four of the five variables, so it can derive its one
missing variable once the other three are known. A pass applies the equations
in that fixed order, and values derived earlier in a pass are visible to later
equations. Passes repeat until one derives nothing. Every productive pass
fixes at least one of at most five unknowns, so the fixed point is reached
within five passes; `max_passes` is only a safety bound.

Policies:
- Square roots (vf or v0 from Eq3) keep the principal, non-negative root and
  are skipped when the radicand is negative. Backward-moving solutions are
  discarded on purpose.
- Time from Eq2 keeps the smallest non-negative root (earliest event).
- Division by a zero t, a, d or (v0 + vf) skips that direction; it is not an
  error. The same holds when a denominator underflows to 0.0.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from core.domain.models import KINEMATIC_VARIABLES, KinematicResult, KinematicState, SolveStep
from core.solvers.quadratic import quadratic_roots

logger = logging.getLogger(__name__)

DEFAULT_MAX_PASSES = 10

UNSOLVED_MESSAGE = "Could not solve for all unknowns with the given inputs. Check your values."

Values = dict[str, float | None]


def _always(_: Values) -> bool:
    return True


@dataclass(frozen=True)
class _Direction:
    """Solve one equation for `target`; `compute` may return None to reject."""

    target: str
    compute: Callable[[Values], float | None]
    guard: Callable[[Values], bool] = _always


@dataclass(frozen=True)
class _Equation:
    label: str
    variables: tuple[str, ...]
    directions: tuple[_Direction, ...]


def _principal_sqrt(radicand: float) -> float | None:
    if radicand < 0:
        return None
    return math.sqrt(radicand)


def earliest_time_to(v0: float, a: float, d: float) -> float | None:
    """Smallest t >= 0 with v0*t + 0.5*a*t^2 == d, or None if d is never reached.

    `a` must be non-zero once halved; the linear case is left to the caller.
    """

    roots = quadratic_roots(0.5 * a, v0, -d)
    candidates = [root for root in roots if root >= 0]
    if not candidates:
        return None
    # abs() turns a -0.0 root into 0.0
    return abs(min(candidates))


def _earliest_time(v: Values) -> float | None:
    return earliest_time_to(v["v0"], v["a"], v["d"])


_EQUATIONS: tuple[_Equation, ...] = (
    _Equation(
        label="Eq1",
        variables=("v0", "vf", "a", "t"),
        directions=(
            _Direction("vf", lambda v: v["v0"] + v["a"] * v["t"]),
            _Direction("v0", lambda v: v["vf"] - v["a"] * v["t"]),
            _Direction("a", lambda v: (v["vf"] - v["v0"]) / v["t"], lambda v: v["t"] != 0),
            _Direction("t", lambda v: (v["vf"] - v["v0"]) / v["a"], lambda v: v["a"] != 0),
        ),
    ),
    _Equation(
        label="Eq2",
        variables=("v0", "a", "t", "d"),
        directions=(
            _Direction("d", lambda v: v["v0"] * v["t"] + 0.5 * v["a"] * v["t"] * v["t"]),
            _Direction(
                "v0",
                lambda v: (v["d"] - 0.5 * v["a"] * v["t"] * v["t"]) / v["t"],
                lambda v: v["t"] != 0,
            ),
            _Direction(
                "a",
                lambda v: 2 * (v["d"] - v["v0"] * v["t"]) / (v["t"] * v["t"]),
                lambda v: v["t"] * v["t"] != 0,
            ),
            # a == 0 would make the quadratic degenerate; Eq4 covers that case.
            _Direction("t", _earliest_time, lambda v: 0.5 * v["a"] != 0),
        ),
    ),
    _Equation(
        label="Eq3",
        variables=("v0", "vf", "a", "d"),
        directions=(
            _Direction("vf", lambda v: _principal_sqrt(v["v0"] * v["v0"] + 2 * v["a"] * v["d"])),
            _Direction("v0", lambda v: _principal_sqrt(v["vf"] * v["vf"] - 2 * v["a"] * v["d"])),
            _Direction(
                "a",
                lambda v: (v["vf"] * v["vf"] - v["v0"] * v["v0"]) / (2 * v["d"]),
                lambda v: v["d"] != 0,
            ),
            _Direction(
                "d",
                lambda v: (v["vf"] * v["vf"] - v["v0"] * v["v0"]) / (2 * v["a"]),
                lambda v: v["a"] != 0,
            ),
        ),
    ),
    _Equation(
        label="Eq4",
        variables=("v0", "vf", "t", "d"),
        directions=(
            _Direction("d", lambda v: 0.5 * (v["v0"] + v["vf"]) * v["t"]),
            _Direction("v0", lambda v: 2 * v["d"] / v["t"] - v["vf"], lambda v: v["t"] != 0),
            _Direction("vf", lambda v: 2 * v["d"] / v["t"] - v["v0"], lambda v: v["t"] != 0),
            _Direction(
                "t",
                lambda v: 2 * v["d"] / (v["v0"] + v["vf"]),
                lambda v: v["v0"] + v["vf"] != 0,
            ),
        ),
    ),
)


def _as_known(value: float | None) -> float | None:
    """Map NaN / infinities to "unknown"."""

    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def _apply(equation: _Equation, values: Values, pass_index: int) -> SolveStep | None:
    """Derive at most one variable from `equation`.

    A direction is eligible only when its target is the single unknown among
    the equation's four variables, so at most one direction can fire.
    """

    for direction in equation.directions:
        if values[direction.target] is not None:
            continue
        others = [name for name in equation.variables if name != direction.target]
        if any(values[name] is None for name in others):
            continue
        if not direction.guard(values):
            return None
        try:
            result = direction.compute(values)
        except ZeroDivisionError:
            # a denominator underflowed to 0.0 although the guard passed
            logger.debug("%s -> %s skipped: denominator underflow", equation.label, direction.target)
            return None
        if result is None or not math.isfinite(result):
            return None
        values[direction.target] = result
        return SolveStep(
            pass_index=pass_index,
            equation=equation.label,
            variable=direction.target,
            value=result,
        )
    return None


def solve_state(
    state: KinematicState,
    *,
    constant_velocity: bool = False,
    max_passes: int = DEFAULT_MAX_PASSES,
) -> KinematicResult:
    """Derive every reachable unknown of `state`.

    Never raises for unsolvable input: the caller reads `solved_count` and
    `error_message`. With `constant_velocity`, `a` is forced to 0 first.
    """

    values: Values = {name: _as_known(value) for name, value in state.as_dict().items()}
    if constant_velocity:
        values["a"] = 0.0
    logger.debug("solving with %d known value(s)", state.known_count)

    steps: list[SolveStep] = []
    passes = 0
    for pass_index in range(1, max_passes + 1):
        passes = pass_index
        derived = [step for step in (_apply(eq, values, pass_index) for eq in _EQUATIONS) if step]
        steps.extend(derived)
        for step in derived:
            logger.debug("pass %d: %s -> %s = %r", pass_index, step.equation, step.variable, step.value)
        if not derived:
            logger.debug("fixed point reached after %d pass(es)", pass_index)
            break

    solved_count = sum(1 for name in KINEMATIC_VARIABLES if values[name] is not None)
    error_message = UNSOLVED_MESSAGE if solved_count < len(KINEMATIC_VARIABLES) else None
    if error_message:
        unknown = [name for name in KINEMATIC_VARIABLES if values[name] is None]
        logger.debug("unsolved variables: %s", ", ".join(unknown))

    return KinematicResult(
        **values,
        solved_count=solved_count,
        passes=passes,
        steps=steps,
        error_message=error_message,
    )


def solve_kinematics(
    v0: float | None = None,
    vf: float | None = None,
    a: float | None = None,
    t: float | None = None,
    d: float | None = None,
    *,
    constant_velocity: bool = False,
    max_passes: int = DEFAULT_MAX_PASSES,
) -> KinematicResult:
    """Keyword front-end of `solve_state`."""

    state = KinematicState(v0=v0, vf=vf, a=a, t=t, d=d)
    return solve_state(state, constant_velocity=constant_velocity, max_passes=max_passes)
