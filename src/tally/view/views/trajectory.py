# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tally.model.forecast import TrajectorySeries
from tally.service.calendar import is_date_key_workday
from tally.view.util import format_hours
from tally.view.views.header import header


def trajectory_view(
    program_range: str,
    series: TrajectorySeries,
    workdays_only: bool = False,
) -> None:
    """Display the cumulative actual, projected and ideal lines day by day."""
    header(program_range, "trajectory")

    trajectory_table = Table(box=box.SIMPLE)
    trajectory_table.add_column("date")
    trajectory_table.add_column("day")
    trajectory_table.add_column("actual", justify="right")
    trajectory_table.add_column("projected", justify="right", style="dim")
    trajectory_table.add_column("ideal", justify="right", style="plum1")

    for index, date_key in enumerate(series["label_date_keys"]):
        is_workday = is_date_key_workday(date_key)
        if workdays_only and not is_workday:
            continue
        label = series["labels"][index]
        if not is_workday:
            label = f"[dim]{label}[/dim]"
        trajectory_table.add_row(
            date_key,
            label,
            format_hours(series["actual_cumulative"][index]),
            format_hours(series["projected_cumulative"][index], precision=0),
            format_hours(series["ideal_cumulative"][index], precision=0),
        )

    console = Console()
    console.print(trajectory_table)
