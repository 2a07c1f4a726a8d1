# SPDX-License-Identifier: MIT

import math
from typing import Any, Iterator, Optional

import pendulum

from tally.time import (
    LABEL_FORMAT_LONG,
    SECONDS_PER_DAY,
    format_date_label,
    from_date_key,
    shift_to_fixed_offset,
    to_date_key,
    to_day_start,
    warn_invalid_date_input,
)

SUNDAY = 0
SATURDAY = 6

# The one weekday that never counts as a workday.
REST_DAY = SUNDAY

DAYS_PER_WEEK = 7


def weekday_of(instant: Optional[pendulum.DateTime]) -> int:
    """Weekday in the UTC+8 calendar, 0 = Sunday through 6 = Saturday."""
    if instant is None:
        return 0
    try:
        shifted = shift_to_fixed_offset(instant)
    except OverflowError:
        warn_invalid_date_input(instant)
        return REST_DAY
    return shifted.isoweekday() % DAYS_PER_WEEK


def is_workday(instant: Optional[pendulum.DateTime]) -> bool:
    if instant is None:
        return False
    return weekday_of(instant) != REST_DAY


def step_day(instant: Any, n: int) -> Optional[pendulum.DateTime]:
    """Return the start of the calendar day ``n`` days after ``instant``.

    The input is canonicalized first, so the result always sits on a day
    boundary even when ``instant`` does not. Negative ``n`` walks backward.
    Returns None when either day falls outside the representable range.
    """
    base = to_day_start(instant)
    if base is None:
        return None
    try:
        stepped = base.add(days=n)
    except OverflowError:
        warn_invalid_date_input(f"{to_date_key(base)} {n:+d} days")
        return None
    if to_date_key(stepped) is None:
        return None
    return stepped


def iter_days(
    start: Optional[pendulum.DateTime], end_inclusive: Optional[pendulum.DateTime]
) -> Iterator[pendulum.DateTime]:
    """Yield the start of every calendar day from ``start`` to ``end_inclusive``."""
    if start is None or end_inclusive is None:
        return
    day = to_day_start(start)
    while day is not None and day <= end_inclusive:
        yield day
        day = step_day(day, 1)


def count_workdays(
    start: Optional[pendulum.DateTime], end_inclusive: Optional[pendulum.DateTime]
) -> int:
    return sum(1 for day in iter_days(start, end_inclusive) if is_workday(day))


def diff_days(
    a: Optional[pendulum.DateTime], b: Optional[pendulum.DateTime]
) -> int:
    """Whole days from ``a`` to ``b``, floored; 0 when either is missing."""
    if a is None or b is None:
        return 0
    return math.floor((b.timestamp() - a.timestamp()) / SECONDS_PER_DAY)


def week_number(value: Any, reference: Any) -> int:
    """
    Program week that a date falls in, counting from ``reference``.

    The first seven calendar days starting at ``reference`` are week 1.
    Dates before the reference, and anything that cannot be read as a
    date, fall back to week 1.
    """
    day = to_day_start(value)
    ref = to_day_start(reference)
    if day is None or ref is None:
        return 1
    elapsed = diff_days(ref, day)
    if elapsed < 0:
        return 1
    return elapsed // DAYS_PER_WEEK + 1


def week_date_range(
    week: int, reference: Any
) -> Optional[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """Start and end (inclusive) day instants of a program week."""
    ref = to_day_start(reference)
    if ref is None:
        return None
    start = step_day(ref, (week - 1) * DAYS_PER_WEEK)
    end = step_day(start, DAYS_PER_WEEK - 1)
    if start is None or end is None:
        return None
    return start, end


def week_date_range_labels(week: int, reference: Any) -> Optional[tuple[str, str]]:
    date_range = week_date_range(week, reference)
    if date_range is None:
        return None
    start, end = date_range
    return (
        format_date_label(start, LABEL_FORMAT_LONG),
        format_date_label(end, LABEL_FORMAT_LONG),
    )


def is_date_key_workday(date_key: str) -> bool:
    return is_workday(from_date_key(date_key))
