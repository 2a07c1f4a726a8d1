import pytest

from tally.service.forecast import calculate_forecast
from tally.service.summary import (
    coerce_identity_score,
    commute_efficiency,
    delta_status,
    identity_alignment_label,
    overall_delta,
    pace_verdict,
    record_delta,
    schedule_status_text,
    total_hours,
    trend_label,
    week_hours,
    weekly_status,
    weeks_with_logs,
)


def test_totals(sample_logs):
    assert total_hours(sample_logs) == 37
    assert total_hours([]) == 0
    assert overall_delta(sample_logs) == -463
    assert overall_delta(sample_logs, target_hours=30) == 7
    assert record_delta(6) == -2
    assert record_delta(9.5, daily_target_hours=8) == 1.5


def test_week_hours(sample_logs):
    assert week_hours(sample_logs, 1, "2026-01-26") == 24
    assert week_hours(sample_logs, 2, "2026-01-26") == 13
    assert week_hours(sample_logs, 3, "2026-01-26") == 0


def test_weeks_with_logs_newest_first(sample_logs):
    assert weeks_with_logs(sample_logs, "2026-01-26") == [2, 1]
    assert weeks_with_logs([], "2026-01-26") == []


@pytest.mark.parametrize(
    "delta, expected",
    [(-1, "warning"), (0, "warning"), (1, "neutral"), (2, "neutral"), (2.5, "good")],
)
def test_delta_status(delta, expected):
    assert delta_status(delta) == expected


@pytest.mark.parametrize(
    "delta, previous, expected",
    [
        (1, None, "No previous record"),
        (1, 0, "Improved"),
        (-1, 0, "Declined"),
        (0, 0, "Same as before"),
    ],
)
def test_trend_label(delta, previous, expected):
    assert trend_label(delta, previous) == expected


@pytest.mark.parametrize(
    "hours, expected", [(0, "warning"), (27.9, "warning"), (28, "good"), (56, "excellent")]
)
def test_weekly_status(hours, expected):
    assert weekly_status(hours, 8) == expected


def test_schedule_status_text(sample_logs, program):
    behind = calculate_forecast(sample_logs, today="2026-02-10", **program)
    assert schedule_status_text(behind) == "Behind (-75.0h)"

    ahead = calculate_forecast(
        [{"date": "2026-01-26", "hours": 10}], today="2026-01-26", **program
    )
    assert schedule_status_text(ahead) == "Ahead (+2.0h)"

    on_track = calculate_forecast(
        [{"date": "2026-01-26", "hours": 8}], today="2026-01-26", **program
    )
    assert schedule_status_text(on_track) == "On Track"


def test_pace_verdict(sample_logs, program):
    behind = calculate_forecast(sample_logs, today="2026-02-10", **program)
    assert pace_verdict(behind, 7) == "Below Target Pace"
    assert pace_verdict(behind, 8) == "Behind Schedule"

    ahead = calculate_forecast(
        [{"date": "2026-01-26", "hours": 10}], today="2026-01-26", **program
    )
    assert pace_verdict(ahead, 8) == "On Track"


@pytest.mark.parametrize(
    "score, expected",
    [
        (None, "Not Set"),
        (0, "Not Set"),
        (1, "1 - Drifting"),
        ("3", "3 - Aligned"),
        (5, "5 - Mission Locked"),
        (9, "Not Set"),
        ("high", "Not Set"),
    ],
)
def test_identity_alignment_label(score, expected):
    assert identity_alignment_label(score) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(4, 4), ("2", 2), (3.9, 3), (0, None), (None, None), ("x", None), (True, None)],
)
def test_coerce_identity_score(value, expected):
    assert coerce_identity_score(value) == expected


def test_commute_efficiency():
    assert commute_efficiency({"commute_total": 2, "commute_productive": 1.5}) == 75
    assert commute_efficiency({"commute_total": 0, "commute_productive": 1}) is None
    assert commute_efficiency({}) is None
