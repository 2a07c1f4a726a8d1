# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tally.service.calendar import DAYS_PER_WEEK
from tally.service.summary import StatusType
from tally.view.util import colorize
from tally.view.views.header import header


def week_view(
    program_range: str,
    week: int,
    date_range: tuple[str, str],
    hours: float,
    status: StatusType,
    daily_target_hours: float,
) -> None:
    header(program_range, f"week {week}")

    week_table = Table(box=box.SIMPLE)
    week_table.add_column("property")
    week_table.add_column("value")

    max_weekly_hours = daily_target_hours * DAYS_PER_WEEK
    week_table.add_row("week", str(week))
    week_table.add_row("range", f"{date_range[0]} - {date_range[1]}")
    week_table.add_row(
        "hours", colorize(f"{hours:g} / {max_weekly_hours:g}", status)
    )

    console = Console()
    console.print(week_table)
