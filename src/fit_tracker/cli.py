"""CLI para calcular reportes de actividad a partir de líneas de texto."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from dateutil import tz

from fit_tracker.actioninfo import info
from fit_tracker.excel_writer import ExcelLayout, write_report_xlsx
from fit_tracker.logging_config import setup_logging
from fit_tracker.model import PersonalProfile
from fit_tracker.records.base import ActivityRecord
from fit_tracker.records.daysteps import DaySteps
from fit_tracker.records.training import Training
from fit_tracker.summary import batch_totals, results_to_frame

_LOCAL_TZ = tz.tzlocal()

RECORD_KINDS: dict[str, type[ActivityRecord]] = {
    "steps": DaySteps,
    "training": Training,
}


@dataclass(frozen=True)
class TrackerConfig:
    """Run configuration built from the command line."""

    profile: PersonalProfile
    kind: str
    input_path: Path | None
    export_dir: Path | None
    log_level: str | None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Distancia, velocidad y calorías a partir de registros de actividad."
    )
    parser.add_argument("--name", default="", help="Nombre del usuario.")
    parser.add_argument(
        "--weight", type=float, required=True, help="Peso en kg (ej. 75.5)."
    )
    parser.add_argument(
        "--height", type=float, required=True, help="Altura en metros (ej. 1.80)."
    )
    parser.add_argument(
        "--kind",
        choices=sorted(RECORD_KINDS),
        default="steps",
        help="steps: '<pasos>,<duración>'; training: '<pasos>,<tipo>,<duración>'.",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Archivo con una línea por registro (default: stdin).",
    )
    parser.add_argument(
        "--export-dir",
        default=None,
        help="Si se indica, exporta el resumen a Excel en este directorio.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nivel de log (default: $LOG_LEVEL o INFO).",
    )
    return parser.parse_args(argv)


def build_config(ns: argparse.Namespace) -> TrackerConfig:
    """Build the run configuration from parsed arguments."""
    return TrackerConfig(
        profile=PersonalProfile(name=ns.name, weight=ns.weight, height=ns.height),
        kind=ns.kind,
        input_path=Path(ns.input).expanduser() if ns.input else None,
        export_dir=Path(ns.export_dir).expanduser() if ns.export_dir else None,
        log_level=ns.log_level,
    )


def read_lines(path: Path | None) -> list[str]:
    """Read non-empty lines from a file, or stdin when ``path`` is None.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    if path is None:
        text = sys.stdin.read()
    else:
        if not path.exists():
            raise FileNotFoundError(str(path))
        text = path.read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tracker CLI.

    Returns:
        Exit code (0 on success, 1 if the input file is missing or the log
        level is unknown).
    """
    config = build_config(parse_args(argv))
    try:
        setup_logging(config.log_level)
    except ValueError as exc:
        print(exc)
        return 1

    try:
        lines = read_lines(config.input_path)
    except FileNotFoundError as exc:
        print(f"No se encontró el archivo de entrada: {exc}")
        return 1

    print(config.profile.describe())
    record = RECORD_KINDS[config.kind](config.profile)
    results = info(lines, record)

    frame = results_to_frame(results)
    totals = batch_totals(frame)
    print(
        f"OK: reportes: {totals.reported}, omitidos: {totals.skipped}, "
        f"distancia: {totals.distance_km:.2f} km, "
        f"calorías: {totals.calories_kcal:.2f} kcal"
    )

    if config.export_dir is not None:
        ts = datetime.now(tz=_LOCAL_TZ).strftime("%Y-%m-%d_%H-%M-%S")
        out_path = config.export_dir / f"reporte_actividad_{ts}.xlsx"
        write_report_xlsx(frame, out_path, ExcelLayout())
        print(f"OK: Output: {out_path}")
    return 0
