"""Ejecución de kinecalc desde `src/` (`python -m main ...`).

Las tablas usan símbolos como "°", "²" y "½"; en consolas Windows con cp1252
se fuerza UTF-8 antes de importar la CLI.
"""

from __future__ import annotations

import sys

if sys.platform == "win32":
    for stream in (sys.stdout, sys.stderr):
        stream.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
