# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tally.time import DateKey

# Daily telemetry logged next to the rendered hours, all in hours
TELEMETRY_HOURS_FIELDS = (
    "personal_hours",
    "sleep_hours",
    "recovery_hours",
    "commute_total",
    "commute_productive",
)


class DailyRecord(TypedDict):
    date: DateKey
    hours: float
    reflection: Optional[str]
    accomplishments: Optional[list[str]]
    tools: Optional[list[str]]
    personal_hours: float
    sleep_hours: float
    recovery_hours: float
    commute_total: float
    commute_productive: float
    identity_score: Optional[int]  # 1-5, None when not set
    created: pendulum.DateTime
    updated: pendulum.DateTime


class DailyRecords(TypedDict):
    records: list[DailyRecord]
