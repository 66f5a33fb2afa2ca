"""Cálculo de distancia, velocidad media y calorías gastadas."""

from __future__ import annotations

from datetime import timedelta

from fit_tracker.errors import InvalidParamsError

M_IN_KM = 1000
MIN_IN_H = 60
STEP_LENGTH_COEFFICIENT = 0.45
WALKING_CALORIES_COEFFICIENT = 0.5


def _hours(duration: timedelta) -> float:
    return duration.total_seconds() / 3600


def _minutes(duration: timedelta) -> float:
    return duration.total_seconds() / 60


def distance(steps: int, height: float) -> float:
    """Distance covered in km.

    Step length is estimated as ``height * STEP_LENGTH_COEFFICIENT``.

    Args:
        steps: Number of steps.
        height: User height in meters.

    Returns:
        Distance in kilometers.
    """
    step_length = height * STEP_LENGTH_COEFFICIENT
    return steps * step_length / M_IN_KM


def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """Mean speed in km/h; 0 when the duration is not positive."""
    if duration <= timedelta(0):
        return 0.0
    return distance(steps, height) / _hours(duration)


def running_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calories burned while running.

    Args:
        steps: Number of steps.
        weight: User weight in kg.
        height: User height in meters.
        duration: Training duration.

    Returns:
        Calories (kcal).

    Raises:
        InvalidParamsError: If any argument is not positive.
    """
    if steps <= 0 or weight <= 0 or height <= 0 or duration.total_seconds() <= 0:
        raise InvalidParamsError(
            f"steps={steps}, weight={weight}, height={height}, duration={duration}"
        )
    avg_speed = mean_speed(steps, height, duration)
    return weight * avg_speed * _minutes(duration) / MIN_IN_H


def walking_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calories burned while walking (running calories scaled down)."""
    calories = running_spent_calories(steps, weight, height, duration)
    return calories * WALKING_CALORIES_COEFFICIENT
