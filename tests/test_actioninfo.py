"""Tests for the sequential report dispatcher."""

from __future__ import annotations

import logging

import pytest

from fit_tracker.actioninfo import info
from fit_tracker.errors import (
    InvalidCountError,
    InvalidDurationError,
    InvalidFormatError,
    InvalidTrainingKindError,
)
from fit_tracker.model import PersonalProfile
from fit_tracker.records.daysteps import DaySteps
from fit_tracker.records.training import Training


@pytest.fixture
def profile() -> PersonalProfile:
    return PersonalProfile(name="Иван Иванов", weight=75.5, height=1.80)


def test_info_skips_bad_line_and_keeps_order(
    profile: PersonalProfile, caplog: pytest.LogCaptureFixture
) -> None:
    dataset = ["678,0h50m", "792,1h14m", "1078,1h30m,x", "7830,2h40m", "1200,1h"]
    with caplog.at_level(logging.INFO, logger="fit_tracker.actioninfo"):
        results = info(dataset, DaySteps(profile))

    assert [r.line_no for r in results] == [1, 2, 3, 4, 5]
    assert [r.ok for r in results] == [True, True, False, True, True]
    assert isinstance(results[2].error, InvalidFormatError)
    assert results[2].report is None

    messages = [rec.getMessage() for rec in caplog.records]
    reports = [msg for msg in messages if "[actioninfo][report]" in msg]
    skips = [rec for rec in caplog.records if "[actioninfo][skip]" in rec.getMessage()]
    assert len(reports) == 4
    assert len(skips) == 1
    assert skips[0].levelno == logging.WARNING
    assert "line=3" in skips[0].getMessage()
    assert "Количество шагов: 7830." in reports[2]


def test_info_results_carry_report_and_metrics(profile: PersonalProfile) -> None:
    results = info(["1000,Бег,1h"], Training(profile))
    (result,) = results
    assert result.ok
    assert result.report is not None
    assert result.report.startswith("Тип тренировки: Бег\n")
    assert result.metrics is not None
    assert result.metrics.distance_km == pytest.approx(0.81)


def test_info_logs_report_time_errors(profile: PersonalProfile) -> None:
    results = info(["1000,Плавание,1h", "0,Бег,1h", "500,Ходьба,30m"], Training(profile))
    assert isinstance(results[0].error, InvalidTrainingKindError)
    assert isinstance(results[1].error, InvalidCountError)
    assert results[2].ok


def test_info_failed_line_does_not_leak_previous_values(
    profile: PersonalProfile,
) -> None:
    results = info(["1000,1h", "abc,1h"], DaySteps(profile))
    assert results[1].metrics is None
    assert results[1].report is None


def test_info_empty_dataset(profile: PersonalProfile) -> None:
    assert info([], DaySteps(profile)) == []


def test_info_out_of_range_values_do_not_stop_batch(
    profile: PersonalProfile,
) -> None:
    dataset = [
        "1000,1h",
        "1000,9999999999h",
        "1" + "0" * 400 + ",1h",
        "1000,Бег,1h",
        "1000,1h",
    ]
    results = info(dataset, DaySteps(profile))

    assert len(results) == 5
    assert [r.ok for r in results] == [True, False, False, False, True]
    assert isinstance(results[1].error, InvalidDurationError)
    assert isinstance(results[2].error, InvalidCountError)
    assert isinstance(results[3].error, InvalidFormatError)
    assert results[4].report is not None
    assert results[4].report.startswith("Количество шагов: 1000.")
