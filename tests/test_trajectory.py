import pytest

from tally.service.forecast import calculate_forecast
from tally.service.trajectory import build_trajectory_series, round_half_up

FEB_10 = 15
FEB_11 = 16
FEB_12 = 17
FEB_13 = 18


@pytest.mark.parametrize(
    "value, expected", [(52.5, 53.0), (44.4, 44.0), (0.5, 1.0), (2.5, 3.0), (7.0, 7.0)]
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_series_covers_every_program_day(sample_logs, program):
    series = build_trajectory_series(sample_logs, today="2026-02-10", **program)

    assert len(series["label_date_keys"]) == 90
    assert series["label_date_keys"][0] == "2026-01-26"
    assert series["label_date_keys"][-1] == "2026-04-25"
    assert series["label_date_keys"][FEB_10] == "2026-02-10"
    assert series["labels"][0] == "Jan 26"
    for channel in (
        "labels",
        "actual_cumulative",
        "projected_cumulative",
        "ideal_cumulative",
    ):
        assert len(series[channel]) == 90


def test_actual_and_projected_never_overlap(sample_logs, program):
    series = build_trajectory_series(sample_logs, today="2026-02-10", **program)
    for actual, projected in zip(
        series["actual_cumulative"], series["projected_cumulative"]
    ):
        assert (actual is None) != (projected is None)


def test_ideal_line_skips_sundays_and_is_capped(program):
    series = build_trajectory_series([], today="2026-02-10", **program)
    ideal = series["ideal_cumulative"]
    assert ideal[0] == 8
    # Feb 1 is a Sunday
    assert ideal[6] == ideal[5] == 48
    assert ideal[-1] == 500
    assert all(later >= earlier for earlier, later in zip(ideal, ideal[1:]))


def test_empty_logs_project_from_zero(program):
    series = build_trajectory_series([], pace_override=8, today="2026-02-10", **program)
    assert series["actual_cumulative"][: FEB_10 + 1] == [0.0] * (FEB_10 + 1)
    assert series["projected_cumulative"][FEB_11] == 8


def test_projection_continues_from_last_logged_total(sample_logs, program):
    series = build_trajectory_series(sample_logs, today="2026-02-10", **program)
    assert series["actual_cumulative"][FEB_10] == 37
    assert series["projected_cumulative"][FEB_10] is None
    # 37 + 7.4 and 37 + 2 * 7.4, rounded
    assert series["projected_cumulative"][FEB_11] == 44
    assert series["projected_cumulative"][FEB_12] == 52


def test_projection_does_not_grow_on_sundays(sample_logs, program):
    series = build_trajectory_series(
        sample_logs, pace_override=8, today="2026-02-10", **program
    )
    projected = series["projected_cumulative"]
    saturday, sunday, monday = (
        series["label_date_keys"].index(key)
        for key in ("2026-02-14", "2026-02-15", "2026-02-16")
    )
    assert projected[sunday] == projected[saturday]
    assert projected[monday] == projected[sunday] + 8


def test_future_log_moves_projection_start(sample_logs, program):
    logs = sample_logs + [{"date": "2026-02-12", "hours": 8}]
    series = build_trajectory_series(logs, today="2026-02-10", **program)

    assert series["actual_cumulative"][FEB_11] == 37
    assert series["actual_cumulative"][FEB_12] == 45
    assert series["projected_cumulative"][FEB_12] is None
    assert series["forecast"]["pace_used"] == pytest.approx(7.5)
    # 45 + 7.5 rounds half up
    assert series["projected_cumulative"][FEB_13] == 53


def test_duplicate_days_are_summed(program):
    logs = [{"date": "2026-01-26", "hours": 4}, {"date": "2026-01-26", "hours": 4}]
    series = build_trajectory_series(logs, today="2026-01-27", **program)
    assert series["actual_cumulative"][0] == 8
    assert series["forecast"]["total_actual_hours"] == 8


def test_embedded_forecast_matches_standalone_forecast(sample_logs, program):
    series = build_trajectory_series(
        sample_logs, pace_override=6, today="2026-02-10", **program
    )
    assert series["forecast"] == calculate_forecast(
        sample_logs, pace_override=6, today="2026-02-10", **program
    )


def test_inverted_program_gives_empty_series(sample_logs):
    series = build_trajectory_series(
        sample_logs,
        start_date="2026-04-25",
        deadline_date="2026-01-26",
        today="2026-02-10",
    )
    assert series["label_date_keys"] == []
    assert series["actual_cumulative"] == []
    assert series["forecast"]["total_actual_hours"] == 37


def test_unusable_program_dates_give_empty_series(sample_logs):
    series = build_trajectory_series(
        sample_logs, start_date="garbage", deadline_date="2026-04-25", today="2026-02-10"
    )
    assert series["labels"] == []
