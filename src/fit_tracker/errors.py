"""Errores de validación de registros y parámetros de actividad."""

from __future__ import annotations


class TrackerError(ValueError):
    """Base error for a single activity line that cannot be reported."""

    message = "invalid activity data"

    def __init__(self, detail: str | None = None) -> None:
        """Create the error.

        Args:
            detail: Optional context appended to the fixed message.
        """
        self.detail = detail
        text = f"{self.message}: {detail}" if detail else self.message
        super().__init__(text)


class InvalidFormatError(TrackerError):
    """Wrong number of comma-separated fields."""

    message = "input has the wrong number of fields"


class InvalidCountError(TrackerError):
    """Step count is not a positive integer."""

    message = "count must be a positive integer"


class InvalidDurationError(TrackerError):
    """Duration is unparsable or not positive."""

    message = "duration must be a valid duration (e.g., '3h50m', '0h50m')"


class InvalidParamsError(TrackerError):
    """Non-positive steps, weight, height or duration reached a formula."""

    message = "steps, weight, height and duration must be positive values"


class InvalidTrainingKindError(TrackerError):
    """Training type label is not one of the known kinds."""

    message = "неизвестный тип тренировки"
