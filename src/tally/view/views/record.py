# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tally.model.record import DailyRecord
from tally.service.calendar import week_number
from tally.service.summary import (
    commute_efficiency,
    delta_status,
    identity_alignment_label,
    record_delta,
    trend_label,
)
from tally.view.util import colorize, format_hours, format_list, format_signed_hours
from tally.view.views.header import header

TELEMETRY_COLUMNS = {
    "personal": "personal_hours",
    "sleep": "sleep_hours",
    "recovery": "recovery_hours",
}


def records_view(
    program_range: str,
    records: list[DailyRecord],
    ojt_start_date: str,
    daily_target_hours: float,
    columns: list[str] = ["date", "week", "hours", "delta", "trend"],
    no_wrap: bool = False,
) -> None:
    """Display daily records in a table, oldest first."""
    header(program_range, "records")

    records_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column not in ("date", "week"):
            records_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            records_table.add_column(column)

    previous_delta: Optional[float] = None
    for record in records:
        delta = record_delta(record["hours"], daily_target_hours)
        row = []
        for column in columns:
            column_value = ""
            if column == "date":
                column_value = record["date"]
            elif column == "week":
                column_value = str(week_number(record["date"], ojt_start_date))
            elif column == "hours":
                column_value = format_hours(record["hours"], precision=2)
            elif column == "delta":
                column_value = colorize(format_signed_hours(delta), delta_status(delta))
            elif column == "trend":
                column_value = trend_label(delta, previous_delta)
            elif column in ("accomplishments", "tools"):
                column_value = format_list(record[column])  # type: ignore[literal-required]
            elif column == "reflection":
                column_value = record["reflection"] or ""
            elif column in TELEMETRY_COLUMNS:
                column_value = format_hours(record[TELEMETRY_COLUMNS[column]])  # type: ignore[literal-required]
            elif column == "commute":
                efficiency = commute_efficiency(record)
                column_value = format_hours(record["commute_total"])
                if efficiency is not None:
                    column_value += f" ({efficiency:.0f}%)"
            elif column == "identity":
                column_value = identity_alignment_label(record["identity_score"])
            row.append(column_value)
        records_table.add_row(*row)
        previous_delta = delta

    console = Console()
    console.print(records_table)
