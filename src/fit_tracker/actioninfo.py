"""Procesamiento secuencial de líneas de actividad y registro de reportes."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fit_tracker.errors import TrackerError
from fit_tracker.model import ActivityMetrics
from fit_tracker.records.base import ActivityRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one input line: a report or the error that skipped it."""

    line_no: int
    line: str
    report: str | None = None
    metrics: ActivityMetrics | None = None
    error: TrackerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def info(dataset: Iterable[str], record: ActivityRecord) -> list[ActionResult]:
    """Parse and report every line of a dataset, in order.

    A line that fails to parse or compute is logged and skipped; the batch
    always runs to the end.

    Args:
        dataset: Raw lines ("1000,1h30m" or "1000,Бег,1h").
        record: Record variant reused for every line (DaySteps or Training).

    Returns:
        One result per input line, in input order.
    """
    results: list[ActionResult] = []
    for line_no, line in enumerate(dataset, start=1):
        try:
            record.parse(line)
            metrics = record.metrics()
        except TrackerError as exc:
            logger.warning("[actioninfo][skip] line=%d err=%s", line_no, exc)
            results.append(ActionResult(line_no=line_no, line=line, error=exc))
            continue

        report = record.render(metrics)
        logger.info("[actioninfo][report] line=%d\n%s", line_no, report)
        results.append(
            ActionResult(line_no=line_no, line=line, report=report, metrics=metrics)
        )
    return results
