"""Punto de entrada de desarrollo de kinecalc.

Uso sin instalar el paquete:
- `python main.py kinematics --v0 10 --a 2 --t 5`
- `python main.py simulate projectile --v0 20 --angle 45 --animate`

Agrega `src/` al path y delega en `cli.main.run`, el mismo callable que
expone el script `kinecalc` de pyproject.toml.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
