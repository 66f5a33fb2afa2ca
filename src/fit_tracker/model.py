"""Modelos tipados: datos personales, tipos de entrenamiento y métricas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fit_tracker.errors import InvalidTrainingKindError


@dataclass(frozen=True)
class PersonalProfile:
    """User body metrics shared by every record of a session."""

    name: str
    weight: float
    height: float

    def describe(self) -> str:
        """Return the user card (name, weight in kg, height in m)."""
        return (
            f"Имя: {self.name}\n"
            f"Вес: {self.weight:.2f} кг.\n"
            f"Рост: {self.height:.2f} м.\n"
        )


class TrainingKind(Enum):
    """Training types with their display label."""

    WALKING = "Ходьба"
    RUNNING = "Бег"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, text: str) -> TrainingKind:
        """Resolve a raw training type string.

        Accepts the display label ("Ходьба", "Бег") or the English name
        ("Walking", "Running"), case-sensitive.

        Raises:
            InvalidTrainingKindError: If the text matches no kind.
        """
        for kind in cls:
            if text in (kind.value, kind.name.capitalize()):
                return kind
        raise InvalidTrainingKindError(repr(text))


@dataclass(frozen=True)
class ActivityMetrics:
    """Computed numbers behind one report."""

    steps: int
    duration_h: float
    distance_km: float
    speed_kmh: float
    calories_kcal: float
    kind_label: str | None = None
