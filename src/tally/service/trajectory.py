# SPDX-License-Identifier: MIT

import math
from typing import Any, Iterable, Optional

from tally.configuration import (
    DAILY_TARGET_HOURS,
    DEFAULT_OJT_START,
    DEFAULT_SEMESTER_END,
    MASTER_TARGET_HOURS,
)
from tally.model.forecast import TrajectorySeries
from tally.model.log import LogEntry
from tally.service.calendar import is_workday, iter_days
from tally.service.forecast import calculate_forecast, normalize_logs, resolve_today
from tally.time import LABEL_FORMAT_SHORT, format_date_label, to_date_key, to_day_start


def round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def build_trajectory_series(
    logs: Optional[Iterable[LogEntry]],
    pace_override: Any = None,
    start_date: Any = DEFAULT_OJT_START,
    deadline_date: Any = DEFAULT_SEMESTER_END,
    today: Any = None,
    target_hours: float = MASTER_TARGET_HOURS,
    daily_target_hours: float = DAILY_TARGET_HOURS,
) -> TrajectorySeries:
    """
    Build the per-day cumulative actual, projected and ideal lines.

    Every list covers each calendar day from start_date to deadline_date
    inclusive. Up to the projection start (the later of today and the last
    logged day) a day carries an actual sum and no projection; after it, a
    projection rounded to whole hours and no actual sum.
    """
    normalized_logs = normalize_logs(logs)
    current_day = resolve_today(today)
    forecast = calculate_forecast(
        normalized_logs,
        pace_override=pace_override,
        start_date=start_date,
        deadline_date=deadline_date,
        today=current_day,
        target_hours=target_hours,
        daily_target_hours=daily_target_hours,
    )
    pace = forecast["pace_used"]

    start = to_day_start(start_date)
    deadline = to_day_start(deadline_date)

    last_log_day = (
        to_day_start(normalized_logs[-1]["date_key"]) if normalized_logs else None
    )
    projection_start = current_day
    if last_log_day is not None and last_log_day > current_day:
        projection_start = last_log_day

    hours_by_day: dict[str, float] = {}
    for log in normalized_logs:
        hours_by_day[log["date_key"]] = (
            hours_by_day.get(log["date_key"], 0.0) + log["hours"]
        )

    series: TrajectorySeries = {
        "labels": [],
        "label_date_keys": [],
        "actual_cumulative": [],
        "projected_cumulative": [],
        "ideal_cumulative": [],
        "forecast": forecast,
    }

    current_sum = 0.0
    projected_sum = 0.0
    ideal_sum = 0.0

    for day in iter_days(start, deadline):
        date_key = to_date_key(day) or ""
        series["label_date_keys"].append(date_key)
        series["labels"].append(format_date_label(day, LABEL_FORMAT_SHORT))

        current_sum += hours_by_day.get(date_key, 0.0)

        if day <= projection_start:
            series["actual_cumulative"].append(current_sum)
            series["projected_cumulative"].append(None)
            # The projection picks up from the last day that has real data.
            if last_log_day is None or day <= last_log_day:
                projected_sum = current_sum
        else:
            series["actual_cumulative"].append(None)
            if is_workday(day):
                projected_sum += pace
            series["projected_cumulative"].append(round_half_up(projected_sum))

        if is_workday(day):
            ideal_sum += daily_target_hours
        series["ideal_cumulative"].append(min(target_hours, ideal_sum))

    return series
