import datetime
import logging

import pendulum
import pytest

from tally.time import (
    LABEL_FORMAT_LONG,
    format_date_label,
    from_date_key,
    to_date_key,
    to_day_start,
    today_start,
)


def test_instant_late_in_utc_day_rolls_over_to_next_date():
    assert to_date_key(pendulum.datetime(2026, 2, 10, 16, 30, tz="UTC")) == "2026-02-11"
    assert to_date_key("2026-02-10T16:30:00Z") == "2026-02-11"


def test_instant_early_in_utc_day_keeps_date():
    assert to_date_key(pendulum.datetime(2026, 2, 10, 1, 0, tz="UTC")) == "2026-02-10"
    assert to_date_key("2026-02-10T01:00:00Z") == "2026-02-10"


def test_date_key_string_is_returned_unchanged():
    assert to_date_key("2026-02-10") == "2026-02-10"
    # No validation on the fast path; the parser rejects it later
    assert to_date_key("2026-02-30") == "2026-02-30"


def test_naive_datetime_is_read_as_utc():
    assert to_date_key(datetime.datetime(2026, 2, 10, 16, 30)) == "2026-02-11"
    assert to_date_key(datetime.datetime(2026, 2, 10, 15, 59)) == "2026-02-10"


def test_aware_datetime_in_other_zone():
    plus_eight = datetime.timezone(datetime.timedelta(hours=8))
    minus_five = datetime.timezone(datetime.timedelta(hours=-5))
    assert (
        to_date_key(datetime.datetime(2026, 2, 11, 0, 30, tzinfo=plus_eight))
        == "2026-02-11"
    )
    # 20:00 at UTC-5 is 09:00 the next day at UTC+8
    assert (
        to_date_key(datetime.datetime(2026, 2, 10, 20, 0, tzinfo=minus_five))
        == "2026-02-11"
    )


def test_plain_date_and_timestamp():
    assert to_date_key(datetime.date(2026, 2, 10)) == "2026-02-10"
    assert to_date_key(0) == "1970-01-01"
    assert to_date_key(16 * 60 * 60) == "1970-01-02"


@pytest.mark.parametrize(
    "value", ["not a date", "", True, float("nan"), object(), [2026, 2, 10]]
)
def test_unresolvable_input_returns_none(value):
    assert to_date_key(value) is None


def test_none_returns_none_without_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="tally.time"):
        assert to_date_key(None) is None
    assert caplog.records == []


def test_invalid_input_is_warned_once(caplog):
    with caplog.at_level(logging.WARNING, logger="tally.time"):
        for _ in range(3):
            assert to_date_key("garbage") is None
        assert to_date_key("other garbage") is None
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 2
    assert all("Skipping invalid date input" in message for message in messages)


def test_from_date_key_is_midnight_at_utc_plus_eight():
    instant = from_date_key("2026-02-10")
    assert instant == pendulum.datetime(2026, 2, 9, 16, 0, tz="UTC")


@pytest.mark.parametrize(
    "value", ["2026/02/10", "2026-2-10", "2026-02-10T00:00:00Z", "2026-02-30", 20260210]
)
def test_from_date_key_rejects_anything_else(value):
    assert from_date_key(value) is None


@pytest.mark.parametrize(
    "date_key",
    ["2026-01-26", "2026-02-28", "2026-03-01", "2024-02-29", "2026-12-31", "2027-01-01"],
)
def test_round_trip(date_key):
    assert to_date_key(from_date_key(date_key)) == date_key


def test_round_trip_of_converted_instants():
    start = pendulum.datetime(2026, 1, 1, 7, 13, tz="UTC")
    for hours in range(0, 24 * 40, 5):
        date_key = to_date_key(start.add(hours=hours))
        assert to_date_key(from_date_key(date_key)) == date_key


def test_to_day_start_aligns_to_day_boundary():
    day = to_day_start(pendulum.datetime(2026, 2, 10, 16, 30, tz="UTC"))
    assert day == pendulum.datetime(2026, 2, 10, 16, 0, tz="UTC")
    assert to_day_start("nonsense") is None


def test_today_start_uses_given_clock():
    now = pendulum.datetime(2026, 2, 10, 20, 0, tz="UTC")
    assert to_date_key(today_start(now)) == "2026-02-11"


def test_format_date_label():
    assert format_date_label("2026-02-11") == "Feb 11"
    assert format_date_label("2026-02-11", LABEL_FORMAT_LONG) == "Feb 11, 2026"
    assert format_date_label("bad input") == ""


def test_calendar_edges():
    assert from_date_key("0001-01-01") is None
    assert to_date_key(from_date_key("9999-12-31")) == "9999-12-31"
    assert to_date_key(datetime.datetime.min) == "0001-01-01"
    assert to_date_key(datetime.datetime.max) is None
    assert to_date_key(pendulum.datetime(9999, 12, 31, 20, 0, tz="UTC")) is None
    assert to_day_start("0001-01-01") is None
    assert format_date_label("0001-01-01") == ""


def test_out_of_range_aware_datetime_is_unresolvable():
    plus_eight = datetime.timezone(datetime.timedelta(hours=8))
    assert to_date_key(datetime.datetime.min.replace(tzinfo=plus_eight)) is None
    assert to_date_key("0001-01-01T00:00:00+08:00") is None
