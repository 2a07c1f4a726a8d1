# SPDX-License-Identifier: MIT

from typing import Any, Iterable, Literal, Mapping, Optional

from tally.configuration import (
    DAILY_TARGET_HOURS,
    DEFAULT_OJT_START,
    GREAT_DELTA_THRESHOLD,
    MASTER_TARGET_HOURS,
)
from tally.model.forecast import Forecast
from tally.model.log import LogEntry
from tally.service.calendar import DAYS_PER_WEEK, week_number
from tally.service.forecast import coerce_hours, normalize_logs

StatusType = Literal["neutral", "warning", "good", "excellent"]

IDENTITY_SCORE_MIN = 1
IDENTITY_SCORE_MAX = 5
IDENTITY_ALIGNMENT_LABELS = {
    0: "Not Set",
    1: "1 - Drifting",
    2: "2 - Re-centering",
    3: "3 - Aligned",
    4: "4 - Compounding",
    5: "5 - Mission Locked",
}


def total_hours(logs: Optional[Iterable[LogEntry]]) -> float:
    return sum(log["hours"] for log in normalize_logs(logs))


def overall_delta(
    logs: Optional[Iterable[LogEntry]], target_hours: float = MASTER_TARGET_HOURS
) -> float:
    return total_hours(logs) - target_hours


def record_delta(hours: float, daily_target_hours: float = DAILY_TARGET_HOURS) -> float:
    return hours - daily_target_hours


def week_hours(
    logs: Optional[Iterable[LogEntry]], week: int, reference: Any = DEFAULT_OJT_START
) -> float:
    return sum(
        log["hours"]
        for log in normalize_logs(logs)
        if week_number(log["date_key"], reference) == week
    )


def weeks_with_logs(
    logs: Optional[Iterable[LogEntry]], reference: Any = DEFAULT_OJT_START
) -> list[int]:
    """Program weeks that have at least one entry, newest first."""
    weeks = {week_number(log["date_key"], reference) for log in normalize_logs(logs)}
    return sorted(weeks, reverse=True)


def delta_status(delta: float) -> StatusType:
    if delta <= 0:
        return "warning"
    if delta > GREAT_DELTA_THRESHOLD:
        return "good"
    return "neutral"


def trend_label(delta: float, previous_delta: Optional[float]) -> str:
    if previous_delta is None:
        return "No previous record"
    if delta > previous_delta:
        return "Improved"
    if delta < previous_delta:
        return "Declined"
    return "Same as before"


def weekly_status(
    hours: float, daily_target_hours: float = DAILY_TARGET_HOURS
) -> StatusType:
    max_weekly_hours = daily_target_hours * DAYS_PER_WEEK
    if hours < max_weekly_hours * 0.5:
        return "warning"
    if hours < max_weekly_hours:
        return "good"
    return "excellent"


def schedule_status_text(forecast: Forecast) -> str:
    delta = forecast["current_status_delta"]
    if delta > 0:
        return f"Ahead (+{abs(delta):.1f}h)"
    if delta < 0:
        return f"Behind (-{abs(delta):.1f}h)"
    return "On Track"


def pace_verdict(forecast: Forecast, pace: float) -> str:
    """How a chosen pace compares with what the deadline requires."""
    if forecast["remaining_hours"] > 0 and forecast["required_rate"] > pace:
        return "Below Target Pace"
    if forecast["is_ahead"]:
        return "On Track"
    return "Behind Schedule"


def coerce_identity_score(value: Any) -> Optional[int]:
    """Whole-number score, or None for 0, missing and unparseable input."""
    if value is None or isinstance(value, bool):
        return None
    try:
        score = int(value)
    except (OverflowError, TypeError, ValueError):
        return None
    if score == 0:
        return None
    return score


def identity_alignment_label(score: Any) -> str:
    return IDENTITY_ALIGNMENT_LABELS.get(
        coerce_identity_score(score) or 0, IDENTITY_ALIGNMENT_LABELS[0]
    )


def commute_efficiency(record: Mapping[str, Any]) -> Optional[float]:
    """Productive share of the commute in percent; None without a commute."""
    commute_total = coerce_hours(record.get("commute_total"))
    if commute_total <= 0:
        return None
    return coerce_hours(record.get("commute_productive")) / commute_total * 100
