"""Closed-form motion solvers.

Why a package:
- Groups the pure functions (no I/O, no shared state) the CLI and pipeline
  call into.
- Each module is one solver; the quadratic utility is shared by both.
"""

from core.solvers.kinematics import earliest_time_to, solve_kinematics, solve_state
from core.solvers.projectile import complementary_launch, solve_projectile, validate_projectile_inputs
from core.solvers.quadratic import quadratic_roots

__all__ = [
    "complementary_launch",
    "earliest_time_to",
    "quadratic_roots",
    "solve_kinematics",
    "solve_projectile",
    "solve_state",
    "validate_projectile_inputs",
]
