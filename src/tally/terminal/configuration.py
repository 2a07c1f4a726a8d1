# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tally import configuration
from tally.repository.configuration import CONFIGURATION_REPO
from tally.terminal.custom_typer import AliasedTyperGroup
from tally.terminal.parse import parse_date
from tally.time import DateKey

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("ojt_start_date", config["ojt_start_date"])
    table.add_row("semester_end_date", config["semester_end_date"])
    table.add_row("required_hours", f"{config['required_hours']:g}")
    table.add_row("daily_target_hours", f"{config['daily_target_hours']:g}")
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    ojt_start_date: Annotated[
        Optional[DateKey],
        typer.Option(
            "--start",
            parser=parse_date,
            help="First day of the program (YYYY-MM-DD)",
        ),
    ] = None,
    semester_end_date: Annotated[
        Optional[DateKey],
        typer.Option(
            "--deadline",
            parser=parse_date,
            help="Last day of the program (YYYY-MM-DD)",
        ),
    ] = None,
    required_hours: Annotated[
        Optional[float],
        typer.Option("--required-hours", help="Overall hour target"),
    ] = None,
    daily_target_hours: Annotated[
        Optional[float],
        typer.Option("--daily-target", help="Hours expected on each workday"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory for records.yaml"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
) -> None:
    """Update configuration settings."""
    try:
        CONFIGURATION_REPO.update_config(
            ojt_start_date=ojt_start_date,
            semester_end_date=semester_end_date,
            required_hours=required_hours,
            daily_target_hours=daily_target_hours,
            data_path=data_path,
            remove_data_path=remove_data_path,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    view()
