"""Configuración del Core.

Por qué aquí:
- Centraliza las variables de entorno (pydantic-settings) sin filtrarlas a la
  CLI.
- Solvers, samplers y CLI leen los mismos valores numéricos por defecto.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_DIR_NAME = "kinecalc"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (APPDATA, macOS o XDG)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars(path: Path | None = None) -> dict[str, str]:
    """Pares KEY=value de un .env; ignora comentarios y líneas mal formadas."""

    env_path = path or get_user_env_file()
    if not env_path.is_file():
        return {}

    pairs: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        pairs[key] = value.strip().strip("\"'")
    return pairs


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Mezcla `values` en el .env global del usuario (claves ordenadas)."""

    env_path = get_user_env_file()
    merged = read_user_env_vars(env_path)
    merged.update((key, value) for key, value in values.items() if value is not None)

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("# kinecalc user config (.env)\n" + body, encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Settings centrales de la aplicación.

    Por qué pydantic-settings:
    - Valores tipados y validados en el borde (env vars) sin ensuciar los
      solvers con lógica de parsing.
    - Un único contrato de configuración para CLI, pipeline y samplers.
    """

    model_config = SettingsConfigDict(
        env_prefix="KINECALC_",
        extra="ignore",
        case_sensitive=False,
        # Orden: primero el proyecto (dev), luego la config global del usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    decimals: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Decimal places used when rendering results.",
    )
    max_passes: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Safety cap on propagation passes of the kinematics solver.",
    )
    default_gravity: float = Field(
        default=9.81,
        gt=0,
        description="Gravity magnitude (m/s^2) used when --g is omitted.",
    )
    tolerance: float = Field(
        default=0.01,
        ge=0,
        description="Stop tolerance for trajectory sampling (seconds / metres).",
    )

    frame_rate: float = Field(
        default=60.0,
        gt=0,
        le=1000,
        description="Frames per second of the animation driver.",
    )
    target_animation_seconds: float = Field(
        default=4.0,
        gt=0,
        description="Wall-clock duration a projectile flight is stretched/shrunk to.",
    )
    min_time_scale: float = Field(
        default=0.1,
        gt=0,
        description="Lower clamp for the projectile animation time scale.",
    )
    max_time_scale: float = Field(
        default=10.0,
        gt=0,
        description="Upper clamp for the projectile animation time scale.",
    )
    max_frames: int = Field(
        default=10_000,
        ge=1,
        description="Hard bound on the number of samples a sampler may emit.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level for the 'kinecalc' logger namespace.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional path where logs are also written.",
    )
