"""Doctor command for environment diagnostics."""

from __future__ import annotations

import math

import typer
from rich.console import Console
from rich.table import Table

from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars
from core.solvers.kinematics import solve_kinematics
from core.solvers.projectile import solve_projectile

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_kinematics() -> tuple[bool, str]:
    """Solve a textbook problem with a known answer (v0=10, a=2, t=5)."""

    result = solve_kinematics(v0=10.0, a=2.0, t=5.0)
    ok = result.ok and math.isclose(result.vf, 20.0) and math.isclose(result.d, 75.0)
    return ok, f"vf={result.vf} d={result.d} passes={result.passes}"


def _check_projectile(gravity: float) -> tuple[bool, str]:
    """Cross-check the range of a 45° launch against v0²·sin(2θ)/g."""

    result = solve_projectile(20.0, gravity, 0.0, 45.0)
    if not result.ok:
        return False, result.error_message or "unknown error"
    expected = 20.0 ** 2 / gravity
    ok = math.isclose(result.d, expected, rel_tol=1e-9)
    return ok, f"range={result.d:.6f} expected={expected:.6f}"


@app.command()
def run() -> None:
    """Show the effective configuration and run solver self-checks."""

    settings = AppSettings()

    table = Table(title="kinecalc Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    stored = read_user_env_vars(env_file)
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", f"{env_file} ({len(stored)} keys)")
    table.add_row("Decimals", "OK", str(settings.decimals))
    table.add_row("Default gravity", "OK", f"{settings.default_gravity} m/s²")
    table.add_row("Max passes", "OK", str(settings.max_passes))
    table.add_row("Frame rate", "OK", f"{settings.frame_rate} fps")
    table.add_row("Log level", "OK", settings.log_level)

    # Solvers
    ok_kin, detail_kin = _check_kinematics()
    table.add_row("Kinematics solver", "OK" if ok_kin else "FAIL", detail_kin)
    ok_proj, detail_proj = _check_projectile(settings.default_gravity)
    table.add_row("Projectile solver", "OK" if ok_proj else "FAIL", detail_proj)

    print_banner(_console)
    _console.print(table)

    if not (ok_kin and ok_proj):
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores defaults in the user config .env)."""

    settings = AppSettings()

    gravity = typer.prompt("Default gravity (m/s²)", default=settings.default_gravity, type=float)
    decimals = typer.prompt("Decimal places", default=settings.decimals, type=int)

    if gravity <= 0:
        raise typer.BadParameter("gravity must be positive")
    if not 0 <= decimals <= 10:
        raise typer.BadParameter("decimals must be between 0 and 10")

    env_path = write_user_env_vars(
        {
            "KINECALC_DEFAULT_GRAVITY": str(gravity),
            "KINECALC_DECIMALS": str(decimals),
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
