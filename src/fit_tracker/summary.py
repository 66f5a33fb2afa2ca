"""Tabla resumen de un lote procesado (una fila por línea de entrada)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from fit_tracker.actioninfo import ActionResult

SUMMARY_COLUMNS = [
    "line_no",
    "line",
    "kind",
    "steps",
    "duration_h",
    "distance_km",
    "speed_kmh",
    "calories_kcal",
    "error",
]

_METRIC_COLUMNS = ["duration_h", "distance_km", "speed_kmh", "calories_kcal"]


@dataclass(frozen=True)
class BatchTotals:
    """Aggregates over a processed batch."""

    reported: int
    skipped: int
    distance_km: float
    calories_kcal: float


def _result_row(result: ActionResult) -> dict[str, object]:
    """Convierte un ActionResult en fila; métricas vacías si hubo error."""
    m = result.metrics
    return {
        "line_no": result.line_no,
        "line": result.line,
        "kind": m.kind_label if m else None,
        "steps": m.steps if m else None,
        "duration_h": m.duration_h if m else None,
        "distance_km": m.distance_km if m else None,
        "speed_kmh": m.speed_kmh if m else None,
        "calories_kcal": m.calories_kcal if m else None,
        "error": str(result.error) if result.error else None,
    }


def results_to_frame(results: Sequence[ActionResult]) -> pd.DataFrame:
    """Tabulate dispatcher results, metrics rounded to 2 decimals."""
    if not results:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame([_result_row(r) for r in results], columns=SUMMARY_COLUMNS)
    df["steps"] = pd.to_numeric(df["steps"], errors="coerce").astype("Int64")
    for col in _METRIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce").round(2)
    return df.sort_values("line_no").reset_index(drop=True)


def batch_totals(frame: pd.DataFrame) -> BatchTotals:
    """Count reported/skipped lines and sum distance and calories.

    Args:
        frame: Output of ``results_to_frame``.

    Returns:
        Totals over the reported lines.
    """
    if frame.empty:
        return BatchTotals(reported=0, skipped=0, distance_km=0.0, calories_kcal=0.0)

    reported = frame[frame["error"].isna()]
    return BatchTotals(
        reported=len(reported),
        skipped=len(frame) - len(reported),
        distance_km=round(float(reported["distance_km"].sum()), 2),
        calories_kcal=round(float(reported["calories_kcal"].sum()), 2),
    )
