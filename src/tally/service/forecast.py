# SPDX-License-Identifier: MIT

import math
from typing import Any, Iterable, Mapping, Optional, cast

import pendulum

from tally.configuration import (
    DAILY_TARGET_HOURS,
    DEFAULT_OJT_START,
    DEFAULT_SEMESTER_END,
    MASTER_TARGET_HOURS,
)
from tally.model.forecast import Forecast
from tally.model.log import LogEntry, NormalizedLog
from tally.service.calendar import count_workdays, diff_days, is_workday, step_day
from tally.time import (
    LABEL_FORMAT_LONG,
    format_date_label,
    to_date_key,
    to_day_start,
    today_start,
)

MIN_PACE = 0.1
RECENT_LOG_COUNT = 7

# Upper bound on projected days; at the minimum pace a 500h target needs
# more than this, which is reported as a capped projection.
MAX_PROJECTION_DAYS = 5000


def coerce_hours(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(hours) or hours < 0:
        return 0.0
    return hours


def parse_pace_override(value: Any) -> Optional[float]:
    """Return the override as a float, or None if it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        pace = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(pace):
        return None
    return pace


def normalize_logs(logs: Optional[Iterable[LogEntry]]) -> list[NormalizedLog]:
    """
    Attach a canonical date key to every usable entry and coerce its hours.

    Entries whose date cannot be resolved are dropped. The result is sorted
    by date key; entries sharing a key are all kept, in input order.
    """
    normalized: list[NormalizedLog] = []
    for entry in logs or []:
        if not isinstance(entry, Mapping):
            continue
        date_key = to_date_key(entry.get("date"))
        if date_key is None:
            continue
        normalized_log = {
            **entry,
            "date_key": date_key,
            "hours": coerce_hours(entry.get("hours")),
        }
        normalized.append(cast(NormalizedLog, normalized_log))
    normalized.sort(key=lambda log: log["date_key"])
    return normalized


def infer_pace(
    normalized_logs: list[NormalizedLog],
    daily_target_hours: float = DAILY_TARGET_HOURS,
) -> float:
    """Mean hours of the most recent entries (not calendar days), floored."""
    recent_logs = normalized_logs[-RECENT_LOG_COUNT:]
    if not recent_logs:
        recent_average = daily_target_hours
    else:
        recent_average = sum(log["hours"] for log in recent_logs) / len(recent_logs)
    return max(MIN_PACE, recent_average)


def resolve_today(today: Any = None) -> pendulum.DateTime:
    if today is not None:
        resolved = to_day_start(today)
        if resolved is not None:
            return resolved
    return today_start()


def ideal_hours_to_date(
    start: Optional[pendulum.DateTime],
    today: pendulum.DateTime,
    target_hours: float,
    daily_target_hours: float,
) -> float:
    return min(target_hours, count_workdays(start, today) * daily_target_hours)


def project_completion(
    today: pendulum.DateTime,
    total_actual_hours: float,
    target_hours: float,
    pace: float,
) -> tuple[pendulum.DateTime, bool]:
    """
    Step forward from today, adding ``pace`` on every workday, until the
    running total reaches the target.

    Returns the stopping day and whether the projection gave up, either at
    the iteration ceiling or at the end of the representable calendar.
    """
    projected_date = today
    projected_total = total_actual_hours
    if projected_total >= target_hours:
        return projected_date, False

    for _ in range(MAX_PROJECTION_DAYS):
        next_day = step_day(projected_date, 1)
        if next_day is None:
            # Ran off the end of the calendar
            return projected_date, True
        projected_date = next_day
        if is_workday(projected_date):
            projected_total += pace
        if projected_total >= target_hours:
            return projected_date, False
    return projected_date, True


def calculate_forecast(
    logs: Optional[Iterable[LogEntry]],
    pace_override: Any = None,
    start_date: Any = DEFAULT_OJT_START,
    deadline_date: Any = DEFAULT_SEMESTER_END,
    today: Any = None,
    target_hours: float = MASTER_TARGET_HOURS,
    daily_target_hours: float = DAILY_TARGET_HOURS,
) -> Forecast:
    """
    Snapshot of progress against the hour target.

    Args:
        logs: Entries with at least "date" and "hours"
        pace_override: Hours per workday to project with instead of the
            inferred pace; anything that is not a finite number is ignored
        start_date: First day of the program
        deadline_date: Last day of the program (inclusive)
        today: The current moment; the system clock is read when omitted
        target_hours: Overall hour target
        daily_target_hours: Hours expected on each workday

    Returns:
        A new Forecast; nothing is cached between calls
    """
    normalized_logs = normalize_logs(logs)
    total_actual_hours = sum(log["hours"] for log in normalized_logs)
    remaining_hours = max(0.0, target_hours - total_actual_hours)

    start = to_day_start(start_date)
    deadline = to_day_start(deadline_date)
    current_day = resolve_today(today)

    ideal = ideal_hours_to_date(start, current_day, target_hours, daily_target_hours)
    current_status_delta = total_actual_hours - ideal

    work_days_remaining = 0
    calendar_days_remaining = 0
    if deadline is not None:
        work_days_remaining = count_workdays(step_day(current_day, 1), deadline)
        calendar_days_remaining = max(0, diff_days(current_day, deadline))
    required_rate = (
        remaining_hours / work_days_remaining if work_days_remaining > 0 else 0.0
    )

    override = parse_pace_override(pace_override)
    if override is not None:
        pace_used = max(MIN_PACE, override)
    else:
        pace_used = infer_pace(normalized_logs, daily_target_hours)

    if remaining_hours > 0:
        projected_date, projection_capped = project_completion(
            current_day, total_actual_hours, target_hours, pace_used
        )
    else:
        projected_date, projection_capped = current_day, False

    return {
        "target_hours": target_hours,
        "total_actual_hours": total_actual_hours,
        "remaining_hours": remaining_hours,
        "ideal_hours_to_date": ideal,
        "current_status_delta": current_status_delta,
        "is_ahead": total_actual_hours >= ideal,
        "work_days_remaining": work_days_remaining,
        "calendar_days_remaining": calendar_days_remaining,
        "required_rate": required_rate,
        "pace_used": pace_used,
        "projected_date": projected_date,
        "projected_date_key": cast(str, to_date_key(projected_date)),
        "projected_date_label": format_date_label(projected_date, LABEL_FORMAT_LONG),
        "projection_capped": projection_capped,
    }
