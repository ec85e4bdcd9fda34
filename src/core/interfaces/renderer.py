"""Contrato de renderers de trayectoria.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite intercambiar renderers (pista en terminal, stub de tests) sin acoplar
  el driver de animación a una salida concreta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TrajectorySample


@runtime_checkable
class TrajectoryRenderer(Protocol):
    """Contrato mínimo para algo que dibuja un cuerpo en movimiento.

    Reglas de diseño:
    - `clear` se llama una vez antes del primer frame y otra después del último
      (también al cancelar).
    - `draw` recibe muestras en tiempo creciente; la última trae `final=True`.
    """

    def clear(self) -> None:
        """Borra lo dibujado."""

        ...

    def draw(self, sample: TrajectorySample) -> None:
        """Dibuja el cuerpo en la posición de la muestra."""

        ...
