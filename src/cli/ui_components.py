"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Mantiene la lógica de comandos separada de los detalles visuales.
- Varios comandos reutilizan las mismas tablas y paneles.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import KINEMATIC_VARIABLES, KinematicResult, ProjectileResult, SolveStep, TrajectorySample

_KINEMATIC_LABELS: dict[str, tuple[str, str]] = {
    "v0": ("Initial velocity", "m/s"),
    "vf": ("Final velocity", "m/s"),
    "a": ("Acceleration", "m/s²"),
    "t": ("Time", "s"),
    "d": ("Displacement", "m"),
}

_PROJECTILE_ROWS: tuple[tuple[str, str, str], ...] = (
    ("v0", "Initial velocity", "m/s"),
    ("angle", "Launch angle", "°"),
    ("h0", "Initial height", "m"),
    ("a", "Acceleration (gravity)", "m/s²"),
    ("t", "Time of flight", "s"),
    ("d", "Range", "m"),
    ("vf", "Impact speed", "m/s"),
    ("vf_y", "Impact vertical velocity", "m/s"),
    ("peak_height", "Peak height", "m"),
    ("time_to_peak", "Time to peak", "s"),
)


def format_value(value: float | None, decimals: int = 2) -> str:
    """Fixed-point text, or "-" for an unknown value."""

    if value is None:
        return "-"
    return f"{value:.{decimals}f}"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Los modos no interactivos (JSON) pueden omitirlo.
    """

    title = Text("kinecalc", style="bold cyan")
    subtitle = Text("Kinematics • Projectile motion • Trajectories", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_kinematics_table(
    result: KinematicResult,
    *,
    inputs: Mapping[str, float | None],
    decimals: int = 2,
) -> Table:
    """One row per variable, with where its value came from."""

    derived_by = {step.variable: step.equation for step in result.steps}

    table = Table(title="Kinematics")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value", style="white", justify="right")
    table.add_column("Unit", style="dim")
    table.add_column("Source", style="magenta")
    for name in KINEMATIC_VARIABLES:
        label, unit = _KINEMATIC_LABELS[name]
        value = getattr(result, name)
        if name in derived_by:
            source = derived_by[name]
        elif inputs.get(name) is not None or value is not None:
            source = "given"
        else:
            source = "unknown"
        table.add_row(f"{label} ({name})", format_value(value, decimals), unit, source)
    return table


def build_steps_table(steps: Iterable[SolveStep], *, decimals: int = 2) -> Table:
    table = Table(title="Derivation steps")
    table.add_column("Pass", justify="right", style="dim")
    table.add_column("Equation", style="magenta")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", justify="right")
    for step in steps:
        table.add_row(str(step.pass_index), step.equation, step.variable, format_value(step.value, decimals))
    return table


def build_projectile_table(result: ProjectileResult, *, title: str = "Projectile", decimals: int = 2) -> Table:
    table = Table(title=title)
    table.add_column("Quantity", style="cyan", no_wrap=True)
    table.add_column("Value", style="white", justify="right")
    table.add_column("Unit", style="dim")
    for name, label, unit in _PROJECTILE_ROWS:
        table.add_row(label, format_value(getattr(result, name), decimals), unit)
    return table


def build_samples_table(samples: Iterable[TrajectorySample], *, every: int = 1, decimals: int = 2) -> Table:
    """Tabulate every `every`-th sample, always keeping the final one."""

    table = Table(title="Trajectory samples")
    table.add_column("#", justify="right", style="dim")
    table.add_column("t (s)", justify="right")
    table.add_column("x (m)", justify="right", style="cyan")
    table.add_column("y (m)", justify="right", style="cyan")
    for index, sample in enumerate(samples):
        if index % every and not sample.final:
            continue
        marker = " (end)" if sample.final else ""
        table.add_row(
            f"{index}{marker}",
            format_value(sample.elapsed, decimals),
            format_value(sample.x, decimals),
            format_value(sample.y, decimals),
        )
    return table


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message), title=Text("Error", style="bold red"), border_style="red")
