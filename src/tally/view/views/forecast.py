# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tally.model.forecast import Forecast
from tally.service.summary import pace_verdict, schedule_status_text
from tally.view.util import format_hours
from tally.view.views.header import header


def forecast_view(
    program_range: str,
    forecast: Forecast,
    report_name: str = "forecast",
    simulated_pace: Optional[float] = None,
) -> None:
    """Display the forecast snapshot as a property/value table."""
    header(program_range, report_name)

    status_color = "green" if forecast["is_ahead"] else "yellow"

    forecast_table = Table(box=box.SIMPLE)
    forecast_table.add_column("property")
    forecast_table.add_column("value")

    forecast_table.add_row(
        "status",
        f"[{status_color}]{schedule_status_text(forecast)}[/{status_color}]",
    )
    forecast_table.add_row(
        "total rendered",
        f"{format_hours(forecast['total_actual_hours'])} / "
        f"{format_hours(forecast['target_hours'])}",
    )
    forecast_table.add_row("remaining", format_hours(forecast["remaining_hours"]))
    forecast_table.add_row("ideal to date", format_hours(forecast["ideal_hours_to_date"]))
    forecast_table.add_row("work days left", str(forecast["work_days_remaining"]))
    forecast_table.add_row(
        "calendar days left", str(forecast["calendar_days_remaining"])
    )
    forecast_table.add_row(
        "need pace", f"{math.ceil(forecast['required_rate'])}h/day"
    )
    forecast_table.add_row("pace used", f"{forecast['pace_used']:.1f}h/day")

    projected = forecast["projected_date_label"]
    if forecast["projection_capped"]:
        projected = f"[red]after {projected}[/red]"
    forecast_table.add_row("projected", projected)

    if simulated_pace is not None:
        forecast_table.add_row(
            "simulation", pace_verdict(forecast, simulated_pace)
        )

    console = Console()
    console.print(forecast_table)
