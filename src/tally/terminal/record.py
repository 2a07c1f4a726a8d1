# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from tally.repository.configuration import CONFIGURATION_REPO
from tally.repository.record import RECORD_REPO
from tally.template.record import get_record_template
from tally.terminal.custom_typer import AliasedTyperGroup
from tally.terminal.parse import parse_date, parse_list
from tally.terminal.settings import program_range_label
from tally.time import DateKey
from tally.view.views.record import records_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    hours: Annotated[float, typer.Argument(help="hours rendered that day")],
    date: Annotated[
        Optional[DateKey],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    reflection: Annotated[
        Optional[str], typer.Option("--reflection", "-r")
    ] = None,
    accomplishments: Annotated[
        Optional[list[str]],
        typer.Option(
            "--accomplishment",
            "-acc",
            help="accepts multiple options or a comma-separated list",
        ),
    ] = None,
    tools: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tool",
            "-tl",
            help="accepts multiple options or a comma-separated list",
        ),
    ] = None,
    personal_hours: Annotated[
        float, typer.Option("--personal", "-ph", min=0, help="personal hours")
    ] = 0.0,
    sleep_hours: Annotated[
        float, typer.Option("--sleep", "-sl", min=0, help="hours slept")
    ] = 0.0,
    recovery_hours: Annotated[
        float, typer.Option("--recovery", "-rc", min=0, help="recovery hours")
    ] = 0.0,
    commute_total: Annotated[
        float, typer.Option("--commute", "-cm", min=0, help="total commute hours")
    ] = 0.0,
    commute_productive: Annotated[
        float,
        typer.Option(
            "--commute-productive",
            "-cp",
            min=0,
            help="commute hours spent productively",
        ),
    ] = 0.0,
    identity_score: Annotated[
        Optional[int],
        typer.Option(
            "--identity",
            "-id",
            min=0,
            max=5,
            help="identity alignment from 1 to 5, 0 unsets",
        ),
    ] = None,
) -> None:
    """
    Add a daily record. An existing record for the same day is replaced.
    """
    record = get_record_template()
    record["date"] = date if date is not None else parse_date("today") or ""
    record["hours"] = hours
    record["reflection"] = reflection
    record["accomplishments"] = parse_list(accomplishments)
    record["tools"] = parse_list(tools)
    record["personal_hours"] = personal_hours
    record["sleep_hours"] = sleep_hours
    record["recovery_hours"] = recovery_hours
    record["commute_total"] = commute_total
    record["commute_productive"] = commute_productive
    record["identity_score"] = identity_score

    try:
        date_key = RECORD_REPO.save_record(record)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    Console().print(f"[green]Recorded {hours:g}h for {date_key}[/green]")


@app.command("list, ls")
def list_records(
    show_details: Annotated[
        bool,
        typer.Option(
            "--details/--no-details",
            help="Include reflection, accomplishments, tools and telemetry",
        ),
    ] = False,
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", help="Truncate long columns")
    ] = False,
) -> None:
    """
    List daily records with their delta against the daily target.
    """
    config = CONFIGURATION_REPO.get_config()
    columns = ["date", "week", "hours", "delta", "trend"]
    if show_details:
        columns += [
            "reflection",
            "accomplishments",
            "tools",
            "personal",
            "sleep",
            "recovery",
            "commute",
            "identity",
        ]

    records_view(
        program_range_label(config),
        RECORD_REPO.get_all_records(),
        config["ojt_start_date"],
        config["daily_target_hours"],
        columns=columns,
        no_wrap=no_wrap,
    )


@app.command("remove, rm")
def remove(
    date: Annotated[
        str,
        typer.Argument(
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
) -> None:
    """
    Remove the record for a day.
    """
    if not RECORD_REPO.delete_record(date):
        Console().print(f"[yellow]No record for {date}[/yellow]")
        raise typer.Exit(1)
    Console().print(f"[green]Removed record for {date}[/green]")
