"""Registro de entrenamiento: "<pasos>,<tipo>,<duración>"."""

from __future__ import annotations

from fit_tracker import energy
from fit_tracker.model import ActivityMetrics, PersonalProfile, TrainingKind
from fit_tracker.records.base import (
    ActivityRecord,
    parse_positive_duration,
    parse_steps,
)


class Training(ActivityRecord):
    """Walking or running training session."""

    line_format = "count,training_type,duration"

    def __init__(self, profile: PersonalProfile) -> None:
        super().__init__(profile)
        self.training_type = ""

    def parse(self, line: str) -> None:
        """Parse a line like "3000,Бег,0h45m".

        The training type is stored as given and only checked when the
        report is built.

        Raises:
            InvalidFormatError: If the line does not have 3 fields.
            InvalidCountError: If the step count is not a positive integer.
            InvalidDurationError: If the duration is invalid or not positive.
        """
        steps_raw, training_type, duration_raw = self._split(line, 3)
        steps = parse_steps(steps_raw)
        duration = parse_positive_duration(duration_raw)

        self.steps = steps
        self.training_type = training_type
        self.duration = duration

    def metrics(self) -> ActivityMetrics:
        """Compute metrics with the calorie formula of the training type.

        Raises:
            InvalidTrainingKindError: If the training type is unknown.
            InvalidParamsError: If profile or parsed values are not positive.
        """
        weight, height = self.profile.weight, self.profile.height
        distance_km = energy.distance(self.steps, height)
        speed_kmh = energy.mean_speed(self.steps, height, self.duration)

        kind = TrainingKind.from_label(self.training_type)
        if kind is TrainingKind.WALKING:
            calories = energy.walking_spent_calories(
                self.steps, weight, height, self.duration
            )
        else:
            calories = energy.running_spent_calories(
                self.steps, weight, height, self.duration
            )

        return ActivityMetrics(
            steps=self.steps,
            duration_h=self.duration.total_seconds() / 3600,
            distance_km=distance_km,
            speed_kmh=speed_kmh,
            calories_kcal=calories,
            kind_label=self.training_type,
        )

    def render(self, metrics: ActivityMetrics) -> str:
        """Render the training report.

        Example:
            Тип тренировки: Ходьба
            Длительность: 1.50 ч.
            Дистанция: 3.25 км.
            Скорость: 2.17 км/ч
            Сожгли калорий: 215.50
        """
        return (
            f"Тип тренировки: {metrics.kind_label}\n"
            f"Длительность: {metrics.duration_h:.2f} ч.\n"
            f"Дистанция: {metrics.distance_km:.2f} км.\n"
            f"Скорость: {metrics.speed_kmh:.2f} км/ч\n"
            f"Сожгли калорий: {metrics.calories_kcal:.2f}\n"
        )
