# SPDX-License-Identifier: MIT

import datetime
import logging
import math
import re
from typing import Any, Optional, cast

import pendulum

logger = logging.getLogger(__name__)

DateKey = str

UTC_OFFSET_HOURS = 8
SECONDS_PER_DAY = 24 * 60 * 60

DATE_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

LABEL_FORMAT_SHORT = "MMM D"
LABEL_FORMAT_LONG = "MMM D, YYYY"

# Written once per offending value, only used to keep repeated renders quiet.
_warned_inputs: set[str] = set()


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def warn_invalid_date_input(value: Any) -> None:
    key = str(value)
    if key in _warned_inputs:
        return
    _warned_inputs.add(key)
    logger.warning("Skipping invalid date input: %r", value)


def shift_to_fixed_offset(instant: pendulum.DateTime) -> pendulum.DateTime:
    """Move an instant forward by the fixed offset, keeping it labelled UTC.

    The calendar fields of the result are the wall-clock fields of the
    original instant in the UTC+8 frame.
    """
    return instant.in_tz("UTC").add(hours=UTC_OFFSET_HOURS)


def _to_instant(value: Any) -> Optional[pendulum.DateTime]:
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz="UTC")
        try:
            return pendulum.instance(value).in_tz("UTC")
        except OverflowError:
            return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return pendulum.from_timestamp(value, tz="UTC")
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value.strip())
            if isinstance(parsed, pendulum.DateTime):
                return parsed.in_tz("UTC")
        except (OverflowError, ValueError):
            return None
        return None
    return None


def to_date_key(value: Any) -> Optional[DateKey]:
    """Reduce a date-like value to its ``YYYY-MM-DD`` key in the UTC+8 calendar.

    Strings already in ``YYYY-MM-DD`` form are authoritative and returned
    unchanged. Plain ``datetime.date`` values are calendar days already and
    are formatted directly. Everything else is read as an absolute instant
    (naive datetimes and ISO strings without an offset are taken as UTC,
    numbers as POSIX seconds) and shifted into the fixed-offset frame.

    Returns None for None and for anything that cannot be resolved; the
    latter is reported once per distinct value.
    """
    if value is None:
        return None

    if isinstance(value, str):
        match = DATE_KEY_PATTERN.match(value)
        if match:
            return f"{match.group(1)}-{match.group(2)}-{match.group(3)}"

    if isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
        return value.strftime("%Y-%m-%d")

    instant = _to_instant(value)
    if instant is None:
        warn_invalid_date_input(value)
        return None

    try:
        shifted = shift_to_fixed_offset(instant)
    except OverflowError:
        # The instant is valid but its UTC+8 day is past year 9999
        warn_invalid_date_input(value)
        return None
    return f"{shifted.year:04d}-{shifted.month:02d}-{shifted.day:02d}"


def from_date_key(date_key: Any) -> Optional[pendulum.DateTime]:
    """Parse a ``YYYY-MM-DD`` key to the UTC instant of its UTC+8 midnight."""
    if not isinstance(date_key, str):
        warn_invalid_date_input(date_key)
        return None
    match = DATE_KEY_PATTERN.match(date_key)
    if not match:
        warn_invalid_date_input(date_key)
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        midnight = pendulum.datetime(year, month, day, tz="UTC")
        return midnight.subtract(hours=UTC_OFFSET_HOURS)
    except (OverflowError, ValueError):
        warn_invalid_date_input(date_key)
        return None


def to_day_start(value: Any) -> Optional[pendulum.DateTime]:
    """Canonicalize any date-like value to the instant its calendar day starts."""
    date_key = to_date_key(value)
    if date_key is None:
        return None
    return from_date_key(date_key)


def today_start(now: Optional[pendulum.DateTime] = None) -> pendulum.DateTime:
    return cast(pendulum.DateTime, to_day_start(now if now is not None else now_utc()))


def format_date_label(value: Any, fmt: str = LABEL_FORMAT_SHORT) -> str:
    """Format the calendar day of a date-like value, e.g. ``Feb 11, 2026``."""
    date_key = to_date_key(value)
    if date_key is None:
        return ""
    instant = from_date_key(date_key)
    if instant is None:
        return ""
    return shift_to_fixed_offset(instant).format(fmt)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))
