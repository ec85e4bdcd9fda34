"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y campos autodocumentados (Field) sin acoplar el core a
  librerías de I/O.
- Los resultados se serializan a JSON para la CLI sin pegamento extra.

Nota:
- Estos modelos describen *qué* es un problema de movimiento, no *cómo* se
  resuelve.
- Todos son inmutables (frozen): un resultado es una foto de una resolución.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


KINEMATIC_VARIABLES: tuple[str, ...] = ("v0", "vf", "a", "t", "d")


class MotionMode(str, Enum):
    """Which solver a calculation request is routed to."""

    KINEMATICS = "kinematics"
    PROJECTILE = "projectile"


class KinematicState(BaseModel):
    """Las cinco variables del movimiento rectilíneo uniformemente acelerado.

    `None` significa "desconocido". Es la entrada de `solve_state`; se construye
    de nuevo a partir del input del usuario en cada resolución.
    """

    model_config = ConfigDict(frozen=True)

    v0: float | None = Field(default=None, description="Initial velocity (m/s).")
    vf: float | None = Field(default=None, description="Final velocity (m/s).")
    a: float | None = Field(default=None, description="Acceleration (m/s^2).")
    t: float | None = Field(default=None, description="Time (s).")
    d: float | None = Field(default=None, description="Displacement (m).")

    def as_dict(self) -> dict[str, float | None]:
        return {name: getattr(self, name) for name in KINEMATIC_VARIABLES}

    @property
    def known_count(self) -> int:
        return sum(1 for value in self.as_dict().values() if value is not None)


class SolveStep(BaseModel):
    """One derivation performed by the kinematics solver."""

    model_config = ConfigDict(frozen=True)

    pass_index: int = Field(..., ge=1, description="1-based propagation pass.")
    equation: str = Field(..., min_length=1, description="Equation label, e.g. 'Eq1'.")
    variable: str = Field(..., min_length=1, description="Variable that became known.")
    value: float = Field(..., description="Derived value.")


class KinematicResult(BaseModel):
    """Salida de `solve_state` / `solve_kinematics`.

    Por qué un modelo separado de `KinematicState`:
    - El resultado lleva la contabilidad del solver (conteo, pasadas, pasos,
      error), que no tiene sentido en un registro de entrada.
    """

    model_config = ConfigDict(frozen=True)

    v0: float | None = None
    vf: float | None = None
    a: float | None = None
    t: float | None = None
    d: float | None = None
    solved_count: int = Field(
        default=0,
        ge=0,
        le=5,
        description="How many of the five variables are known at termination.",
    )
    passes: int = Field(
        default=0,
        ge=0,
        description="Propagation passes executed (including the last, unproductive one).",
    )
    steps: list[SolveStep] = Field(
        default_factory=list,
        description="Derivations in the order they happened.",
    )
    error_message: str | None = Field(
        default=None,
        description="Set when not every unknown could be derived.",
    )

    @property
    def ok(self) -> bool:
        return self.error_message is None


class ProjectileResult(BaseModel):
    """Salida de `solve_projectile`.

    Contrato: quien llama revisa primero `error_message`. Si está presente,
    todos los campos numéricos son `None`.
    """

    model_config = ConfigDict(frozen=True)

    v0: float | None = Field(default=None, description="Launch speed (m/s).")
    vf: float | None = Field(default=None, description="Impact speed (m/s).")
    a: float | None = Field(default=None, description="Signed gravity (negative, m/s^2).")
    t: float | None = Field(default=None, description="Time of flight (s).")
    d: float | None = Field(default=None, description="Horizontal range (m).")
    h0: float | None = Field(default=None, description="Initial height (m).")
    angle: float | None = Field(default=None, description="Launch angle (degrees).")
    vf_y: float | None = Field(default=None, description="Vertical velocity at impact (m/s).")
    peak_height: float | None = Field(default=None, description="Maximum height reached (m).")
    time_to_peak: float | None = Field(default=None, description="Time to reach the peak (s).")
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_message is None


class TrajectorySample(BaseModel):
    """A position evaluated by a sampler at a given elapsed physics time."""

    model_config = ConfigDict(frozen=True)

    elapsed: float = Field(..., ge=0, description="Physics time since launch (s).")
    x: float = Field(..., description="Horizontal position / displacement (m).")
    y: float = Field(default=0.0, description="Height (m); 0 for rectilinear motion.")
    final: bool = Field(default=False, description="True for the landing/stop sample.")
