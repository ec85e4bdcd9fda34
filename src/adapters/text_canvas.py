"""Sustituto en terminal del canvas de animación.

Implementa `core.interfaces.renderer.TrajectoryRenderer` con rich: el cuerpo
es un marcador sobre una pista de ancho fijo (movimiento rectilíneo) o sobre
una pequeña grilla de caracteres (proyectil).
"""

from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.text import Text

from core.domain.models import TrajectorySample
from core.interfaces.renderer import TrajectoryRenderer

_BODY = "●"


class TextTrackRenderer(TrajectoryRenderer):
    """Draws samples into a rich `Live` region.

    `x_extent` / `y_extent` are the world sizes (metres) mapped onto the
    `width` x `height` character grid. With `height == 1` only x is drawn.
    """

    def __init__(
        self,
        console: Console,
        *,
        x_extent: float,
        y_extent: float = 0.0,
        width: int = 60,
        height: int = 1,
        decimals: int = 2,
    ) -> None:
        self._console = console
        self._x_extent = abs(x_extent) or 1.0
        self._y_extent = abs(y_extent) or 1.0
        self._width = max(width, 2)
        self._height = max(height, 1)
        self._decimals = decimals
        self._negative = x_extent < 0
        self._live: Live | None = None

    def _column(self, x: float) -> int:
        fraction = abs(x) / self._x_extent
        column = round(fraction * (self._width - 1))
        column = min(max(column, 0), self._width - 1)
        return self._width - 1 - column if self._negative else column

    def _row(self, y: float) -> int:
        fraction = y / self._y_extent
        row = round(fraction * (self._height - 1))
        return min(max(row, 0), self._height - 1)

    def frame(self, sample: TrajectorySample) -> Text:
        """Build the text for one sample (exposed for tests)."""

        grid = [[" "] * self._width for _ in range(self._height)]
        grid[self._height - 1 - self._row(sample.y)][self._column(sample.x)] = _BODY
        lines = ["".join(row) for row in grid]
        ground = "─" * self._width
        fmt = f"{{:.{self._decimals}f}}"
        status = f"t={fmt.format(sample.elapsed)} s  x={fmt.format(sample.x)} m"
        if self._height > 1:
            status += f"  y={fmt.format(sample.y)} m"
        return Text("\n".join([*lines, ground, status]))

    def clear(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def draw(self, sample: TrajectorySample) -> None:
        if self._live is None:
            self._live = Live(self.frame(sample), console=self._console, auto_refresh=False, transient=False)
            self._live.start(refresh=True)
        else:
            self._live.update(self.frame(sample), refresh=True)
        if sample.final:
            self.clear()
