"""Exportación JSON de los resultados.

Por qué JSON:
- Interoperabilidad con scripts y otras herramientas (`--json` | jq).
- Salida legible por máquinas sin depender de las tablas de rich.
"""

from __future__ import annotations

import json
from typing import Any

from core.services.motion_pipeline import CalculationOutcome


def outcome_payload(outcome: CalculationOutcome) -> dict[str, Any]:
    """Vista en dict plano de un `CalculationOutcome`."""

    payload: dict[str, Any] = {
        "mode": outcome.mode.value,
        "inputs": dict(outcome.inputs),
        "error_message": outcome.error_message,
        "warnings": list(outcome.warnings),
    }
    if outcome.kinematics is not None:
        payload["result"] = outcome.kinematics.model_dump(mode="json")
    if outcome.projectile is not None:
        payload["result"] = outcome.projectile.model_dump(mode="json")
    if outcome.complementary is not None:
        payload["complementary"] = outcome.complementary.model_dump(mode="json")
    return payload


def render_outcome_json(outcome: CalculationOutcome) -> str:
    """JSON UTF-8 con formato estable (claves ordenadas, indentación de 2)."""

    return json.dumps(outcome_payload(outcome), ensure_ascii=False, indent=2, sort_keys=True)
