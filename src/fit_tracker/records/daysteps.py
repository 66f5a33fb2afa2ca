"""Registro de pasos diarios: "<pasos>,<duración>"."""

from __future__ import annotations

from fit_tracker import energy
from fit_tracker.model import ActivityMetrics
from fit_tracker.records.base import (
    ActivityRecord,
    parse_positive_duration,
    parse_steps,
)


class DaySteps(ActivityRecord):
    """Daily walking activity (step count and duration)."""

    line_format = "count,duration"

    def parse(self, line: str) -> None:
        """Parse a line like "1000,1h30m".

        Raises:
            InvalidFormatError: If the line does not have 2 fields.
            InvalidCountError: If the step count is not a positive integer.
            InvalidDurationError: If the duration is invalid or not positive.
        """
        steps_raw, duration_raw = self._split(line, 2)
        steps = parse_steps(steps_raw)
        duration = parse_positive_duration(duration_raw)

        self.steps = steps
        self.duration = duration

    def metrics(self) -> ActivityMetrics:
        """Compute metrics; calories use the walking formula."""
        calories = energy.walking_spent_calories(
            self.steps, self.profile.weight, self.profile.height, self.duration
        )
        return ActivityMetrics(
            steps=self.steps,
            duration_h=self.duration.total_seconds() / 3600,
            distance_km=energy.distance(self.steps, self.profile.height),
            speed_kmh=energy.mean_speed(
                self.steps, self.profile.height, self.duration
            ),
            calories_kcal=calories,
        )

    def render(self, metrics: ActivityMetrics) -> str:
        """Render the daily report.

        Example:
            Количество шагов: 792.
            Дистанция составила 0.51 км.
            Вы сожгли 221.33 ккал.
        """
        return (
            f"Количество шагов: {metrics.steps}.\n"
            f"Дистанция составила {metrics.distance_km:.2f} км.\n"
            f"Вы сожгли {metrics.calories_kcal:.2f} ккал.\n"
        )
