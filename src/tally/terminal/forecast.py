# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from tally.repository.configuration import CONFIGURATION_REPO
from tally.repository.record import RECORD_REPO
from tally.service.calendar import week_date_range_labels, week_number
from tally.service.forecast import calculate_forecast
from tally.service.simulate import simulate_logs
from tally.service.summary import (
    total_hours,
    week_hours,
    weekly_status,
    weeks_with_logs,
)
from tally.service.trajectory import build_trajectory_series
from tally.terminal.parse import parse_date
from tally.terminal.settings import forecast_settings, program_range_label
from tally.time import DateKey
from tally.view.views.forecast import forecast_view
from tally.view.views.trajectory import trajectory_view
from tally.view.views.week import week_view

PaceOption = Annotated[
    Optional[float],
    typer.Option(
        "--pace",
        "-p",
        help="hours per workday to project with instead of the recent average",
    ),
]
TodayOption = Annotated[
    Optional[DateKey],
    typer.Option(
        "--today",
        parser=parse_date,
        help="treat this day as today; valid inputs: YYYY-MM-DD or day offset like -1",
    ),
]


def forecast(pace: PaceOption = None, today: TodayOption = None) -> None:
    """
    Show progress against the hour target and the projected finish date.
    """
    config = CONFIGURATION_REPO.get_config()
    result = calculate_forecast(
        RECORD_REPO.get_all_records(),
        pace_override=pace,
        today=today,
        **forecast_settings(config),
    )
    forecast_view(program_range_label(config), result)


def trajectory(
    pace: PaceOption = None,
    today: TodayOption = None,
    workdays_only: Annotated[
        bool,
        typer.Option("--workdays-only", "-wd", help="Hide rest days"),
    ] = False,
) -> None:
    """
    Show the day-by-day actual, projected and ideal cumulative hours.
    """
    config = CONFIGURATION_REPO.get_config()
    series = build_trajectory_series(
        RECORD_REPO.get_all_records(),
        pace_override=pace,
        today=today,
        **forecast_settings(config),
    )
    if not series["label_date_keys"]:
        Console().print("[yellow]The program has no days to show.[/yellow]")
        raise typer.Exit(0)
    trajectory_view(program_range_label(config), series, workdays_only=workdays_only)


def week(
    week_number_param: Annotated[
        Optional[int],
        typer.Argument(
            metavar="WEEK",
            help="program week, defaults to the week of the latest record",
        ),
    ] = None,
) -> None:
    """
    Show the hours rendered in one program week.
    """
    config = CONFIGURATION_REPO.get_config()
    records = RECORD_REPO.get_all_records()
    reference = config["ojt_start_date"]

    selected_week = week_number_param
    if selected_week is None:
        weeks = weeks_with_logs(records, reference)
        if weeks:
            selected_week = weeks[0]
        else:
            selected_week = week_number(parse_date("today"), reference)
    if selected_week < 1:
        raise typer.BadParameter("Week must be 1 or greater")

    date_range = week_date_range_labels(selected_week, reference)
    if date_range is None:
        raise typer.BadParameter("Program start date is not a valid date")

    hours = week_hours(records, selected_week, reference)
    week_view(
        program_range_label(config),
        selected_week,
        date_range,
        hours,
        weekly_status(hours, config["daily_target_hours"]),
        config["daily_target_hours"],
    )


def simulate(
    hours: Annotated[
        float, typer.Option("--hours", "-hr", help="hours per simulated day")
    ] = 8.0,
    days: Annotated[
        int, typer.Option("--days", "-d", help="number of days to simulate")
    ] = 5,
    pace: PaceOption = None,
    today: TodayOption = None,
) -> None:
    """
    Forecast with extra what-if days appended after the latest record.

    Nothing is saved.
    """
    if days < 0:
        raise typer.BadParameter("Days must be 0 or greater")
    if hours < 0:
        raise typer.BadParameter("Hours must be 0 or greater")

    config = CONFIGURATION_REPO.get_config()
    records = RECORD_REPO.get_all_records()
    simulated = simulate_logs(records, hours, days, today=today)
    result = calculate_forecast(
        simulated,
        pace_override=pace,
        today=today,
        **forecast_settings(config),
    )

    forecast_view(
        program_range_label(config),
        result,
        report_name=f"simulation: {days} days @ {hours:g}h",
        simulated_pace=pace if pace is not None else hours,
    )
    Console().print(
        "[dim]Simulated data is temporary. "
        f"Cumulative: {total_hours(simulated):.1f}h[/dim]"
    )
