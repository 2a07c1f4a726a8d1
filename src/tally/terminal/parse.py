# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from tally.service.calendar import step_day
from tally.time import DateKey, from_date_key, to_date_key, today_start


def parse_date(date_param: Optional[str | int]) -> Optional[DateKey]:
    """
    Parse a CLI date into a calendar key.

    Accepts YYYY-MM-DD, an ISO datetime, today/t, yesterday/y, tomorrow/o,
    or a day offset from today like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^-?\d+$", date):
        days_offset = int(date)
        return to_date_key(step_day(today_start(), days_offset))

    if date == "today" or date == "t":
        return to_date_key(today_start())
    if date == "yesterday" or date == "y":
        return to_date_key(step_day(today_start(), -1))
    if date == "tomorrow" or date == "o":
        return to_date_key(step_day(today_start(), 1))

    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        date_key = to_date_key(date)
        if date_key is not None and from_date_key(date_key) is not None:
            return date_key

    raise typer.BadParameter("Incorrect date format")


def parse_list(values: Optional[list[str]]) -> Optional[list[str]]:
    """Split repeated and comma-separated options into one deduplicated list."""
    if values is None:
        return None
    items: list[str] = []
    for value in values:
        items.extend(item.strip() for item in value.split(",") if item.strip())
    if not items:
        return None
    return list(dict.fromkeys(items))
