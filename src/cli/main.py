"""kinecalc command-line interface.

The CLI plays the role of the calculator's UI layer: it collects raw text
values, hands them to `core.services.motion_pipeline`, and renders the
structured result. No physics happens here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import render_outcome_json
from adapters.text_canvas import TextTrackRenderer
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_kinematics_table,
    build_projectile_table,
    build_samples_table,
    build_steps_table,
)
from core.config import AppSettings
from core.domain.models import KinematicResult, MotionMode, ProjectileResult, TrajectorySample
from core.logging_config import setup_logging
from core.services.animation import drive_animation
from core.services.motion_pipeline import CalculationOutcome, CalculationRequest, PipelineHooks, run_calculation
from core.solvers.trajectory import (
    animation_time_scale,
    iter_kinematic_samples,
    iter_projectile_samples,
    kinematic_position,
)

app = typer.Typer(no_args_is_help=True, help="Solve kinematics and projectile-motion problems.")
simulate_app = typer.Typer(no_args_is_help=True, help="Sample (and optionally animate) a solved trajectory.")
app.add_typer(simulate_app, name="simulate")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger("kinecalc")

_V0 = typer.Option("", "--v0", help="Initial velocity (m/s). Leave empty if unknown.")
_VF = typer.Option("", "--vf", help="Final velocity (m/s). Leave empty if unknown.")
_A = typer.Option("", "--a", help="Acceleration (m/s²). Leave empty if unknown.")
_T = typer.Option("", "--t", help="Time (s). Leave empty if unknown.")
_D = typer.Option("", "--d", help="Displacement (m). Leave empty if unknown.")
_CONSTANT = typer.Option(False, "--constant-velocity", help="Force acceleration to 0.")
_LAUNCH_V0 = typer.Option("", "--v0", help="Launch speed (m/s).")
_G = typer.Option("", "--g", help="Gravity magnitude (m/s²). Defaults to the configured value.")
_H0 = typer.Option("0", "--h0", help="Initial height (m).")
_ANGLE = typer.Option("", "--angle", help="Launch angle in degrees (0-90).")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log solver details (DEBUG)."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file."),
) -> None:
    """kinecalc: closed-form motion solver."""

    settings = AppSettings()
    setup_logging(level="DEBUG" if verbose else settings.log_level, log_file=log_file or settings.log_file)


def _hooks() -> PipelineHooks:
    return PipelineHooks(warning=lambda message: _err_console.print(f"[yellow]Warning:[/yellow] {message}"))


def _fail(message: str) -> None:
    _console.print(build_error_panel(message))
    raise typer.Exit(code=1)


def _render(outcome: CalculationOutcome, *, settings: AppSettings, as_json: bool, show_steps: bool = False) -> None:
    if as_json:
        typer.echo(render_outcome_json(outcome))
        if not outcome.ok:
            raise typer.Exit(code=1)
        return

    if outcome.kinematics is not None:
        _console.print(build_kinematics_table(outcome.kinematics, inputs=outcome.inputs, decimals=settings.decimals))
        if show_steps and outcome.kinematics.steps:
            _console.print(build_steps_table(outcome.kinematics.steps, decimals=settings.decimals))
    if outcome.projectile is not None and outcome.projectile.ok:
        _console.print(build_projectile_table(outcome.projectile, decimals=settings.decimals))
    if outcome.complementary is not None and outcome.complementary.ok:
        angle = outcome.complementary.angle
        _console.print(
            build_projectile_table(
                outcome.complementary,
                title=f"Complementary launch ({angle:.{settings.decimals}f}°)",
                decimals=settings.decimals,
            )
        )
    if outcome.error_message:
        _fail(outcome.error_message)


@app.command()
def kinematics(
    v0: str = _V0,
    vf: str = _VF,
    a: str = _A,
    t: str = _T,
    d: str = _D,
    constant_velocity: bool = _CONSTANT,
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    show_steps: bool = typer.Option(False, "--steps", help="Show which equation derived each value."),
) -> None:
    """Solve for the unknowns among v0, vf, a, t and d (give at least three)."""

    settings = AppSettings()
    request = CalculationRequest(
        mode=MotionMode.KINEMATICS,
        raw={"v0": v0, "vf": vf, "a": a, "t": t, "d": d},
        constant_velocity=constant_velocity,
    )
    outcome = run_calculation(settings=settings, request=request, hooks=_hooks())
    _render(outcome, settings=settings, as_json=as_json, show_steps=show_steps)


@app.command()
def projectile(
    v0: str = _LAUNCH_V0,
    g: str = _G,
    h0: str = _H0,
    angle: str = _ANGLE,
    complementary: bool = typer.Option(False, "--complementary", help="Also solve the 90° - angle launch."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Time of flight, range and impact speed of a launch."""

    settings = AppSettings()
    request = CalculationRequest(
        mode=MotionMode.PROJECTILE,
        raw={"v0": v0, "g": g, "h0": h0, "angle": angle},
        include_complementary=complementary,
    )
    outcome = run_calculation(settings=settings, request=request, hooks=_hooks())
    _render(outcome, settings=settings, as_json=as_json)


def _play(
    samples: list[TrajectorySample],
    *,
    settings: AppSettings,
    animate: bool,
    every: int,
    x_extent: float,
    y_extent: float = 0.0,
    height: int = 1,
) -> None:
    if not animate:
        _console.print(build_samples_table(samples, every=every, decimals=settings.decimals))
        return

    renderer = TextTrackRenderer(
        _console,
        x_extent=x_extent,
        y_extent=y_extent,
        height=height,
        decimals=settings.decimals,
    )
    try:
        drive_animation(samples, renderer, frame_rate=settings.frame_rate)
    except KeyboardInterrupt:
        _console.print("[yellow]Animation stopped.[/yellow]")
        raise typer.Exit(code=130)


def _kinematic_extent(result: KinematicResult) -> float:
    if result.d is not None:
        return result.d
    return kinematic_position(result.v0, result.a, result.t)


@simulate_app.command("kinematics")
def simulate_kinematics(
    v0: str = _V0,
    vf: str = _VF,
    a: str = _A,
    t: str = _T,
    d: str = _D,
    constant_velocity: bool = _CONSTANT,
    animate: bool = typer.Option(False, "--animate", help="Animate in the terminal instead of printing a table."),
    every: int = typer.Option(10, "--every", min=1, help="Tabulate every N-th sample."),
) -> None:
    """Sample x(t) = v0·t + ½·a·t² up to the solved time or displacement."""

    settings = AppSettings()
    request = CalculationRequest(
        mode=MotionMode.KINEMATICS,
        raw={"v0": v0, "vf": vf, "a": a, "t": t, "d": d},
        constant_velocity=constant_velocity,
        for_simulation=True,
    )
    outcome = run_calculation(settings=settings, request=request, hooks=_hooks())
    if outcome.kinematics is None:
        _fail(outcome.error_message or "Nothing to simulate.")

    result = outcome.kinematics
    try:
        samples = list(
            iter_kinematic_samples(
                result,
                frame_rate=settings.frame_rate,
                tolerance=settings.tolerance,
                max_frames=settings.max_frames,
            )
        )
    except ValueError as exc:
        _fail(f"{result.error_message or 'Cannot animate.'} {exc}".strip())

    if result.error_message:
        _err_console.print(f"[yellow]Warning:[/yellow] {result.error_message}")
    _play(samples, settings=settings, animate=animate, every=every, x_extent=_kinematic_extent(result))


@simulate_app.command("projectile")
def simulate_projectile(
    v0: str = _LAUNCH_V0,
    g: str = _G,
    h0: str = _H0,
    angle: str = _ANGLE,
    animate: bool = typer.Option(False, "--animate", help="Animate in the terminal instead of printing a table."),
    every: int = typer.Option(10, "--every", min=1, help="Tabulate every N-th sample."),
) -> None:
    """Sample (x, y) of a launch until it lands."""

    settings = AppSettings()
    request = CalculationRequest(
        mode=MotionMode.PROJECTILE,
        raw={"v0": v0, "g": g, "h0": h0, "angle": angle},
        for_simulation=True,
    )
    outcome = run_calculation(settings=settings, request=request, hooks=_hooks())
    result: ProjectileResult | None = outcome.projectile
    if result is None or not result.ok:
        _fail(outcome.error_message or "Nothing to simulate.")

    time_scale = animation_time_scale(
        result.t,
        target_seconds=settings.target_animation_seconds,
        bounds=(settings.min_time_scale, settings.max_time_scale),
    )
    logger.debug("projectile animation time scale: %r", time_scale)
    samples = list(
        iter_projectile_samples(
            result,
            frame_rate=settings.frame_rate,
            time_scale=time_scale,
            tolerance=settings.tolerance,
            max_frames=settings.max_frames,
        )
    )
    _play(
        samples,
        settings=settings,
        animate=animate,
        every=every,
        x_extent=result.d,
        y_extent=result.peak_height,
        height=10,
    )


def run() -> None:
    app()
