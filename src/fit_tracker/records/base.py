"""Clase base para registros de actividad leídos desde texto."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

import pandas as pd

from fit_tracker.durations import parse_duration
from fit_tracker.errors import (
    InvalidCountError,
    InvalidDurationError,
    InvalidFormatError,
)
from fit_tracker.model import ActivityMetrics, PersonalProfile

_INT_RX = re.compile(r"[+-]?[0-9]+")
MAX_STEPS = 2**63 - 1


class ActivityRecord(ABC):
    """Abstract activity record.

    A record is bound to one profile and reused across lines: every
    successful ``parse`` replaces the parsed fields, a failed one leaves
    them untouched.
    """

    #: Field layout used in format error messages.
    line_format = ""

    def __init__(self, profile: PersonalProfile) -> None:
        """Create a record.

        Args:
            profile: Body metrics used by every formula.
        """
        self.profile = profile
        self.steps = 0
        self.duration = pd.Timedelta(0)

    @abstractmethod
    def parse(self, line: str) -> None:
        """Parse one comma-separated line into this record.

        Raises:
            TrackerError: If the line is malformed.
        """

    @abstractmethod
    def metrics(self) -> ActivityMetrics:
        """Compute distance, speed and calories for the parsed line.

        Raises:
            TrackerError: If the values cannot be evaluated.
        """

    @abstractmethod
    def render(self, metrics: ActivityMetrics) -> str:
        """Render the human-readable report for computed metrics."""

    def action_info(self) -> str:
        """Compute and render the report for the parsed line.

        Raises:
            TrackerError: If the metrics cannot be computed.
        """
        return self.render(self.metrics())

    def _split(self, line: str, expected: int) -> list[str]:
        parts = line.split(",")
        if len(parts) != expected:
            raise InvalidFormatError(
                f"expected '{self.line_format}', got {len(parts)} parts"
            )
        return parts


def parse_steps(raw: str) -> int:
    """Parse a positive step count (signed ASCII integer, no spaces)."""
    if not _INT_RX.fullmatch(raw):
        raise InvalidCountError(f"invalid literal {raw!r}")
    steps = int(raw)
    if steps > MAX_STEPS:
        raise InvalidCountError(f"value out of range {raw!r}")
    if steps <= 0:
        raise InvalidCountError(f"got {steps}")
    return steps


def parse_positive_duration(raw: str) -> pd.Timedelta:
    """Parse a duration and reject zero or negative values."""
    duration = parse_duration(raw)
    if duration.total_seconds() <= 0:
        raise InvalidDurationError(f"got {raw!r}")
    return duration
