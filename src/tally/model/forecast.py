# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tally.time import DateKey


class Forecast(TypedDict):
    target_hours: float
    total_actual_hours: float
    remaining_hours: float
    ideal_hours_to_date: float
    current_status_delta: float  # positive = ahead of the ideal line
    is_ahead: bool
    work_days_remaining: int
    calendar_days_remaining: int
    required_rate: float  # hours per workday to land exactly on the deadline
    pace_used: float
    projected_date: pendulum.DateTime
    projected_date_key: DateKey
    projected_date_label: str
    projection_capped: bool  # projection gave up at the iteration ceiling


class TrajectorySeries(TypedDict):
    labels: list[str]
    label_date_keys: list[DateKey]
    actual_cumulative: list[Optional[float]]
    projected_cumulative: list[Optional[float]]
    ideal_cumulative: list[float]
    forecast: Forecast
