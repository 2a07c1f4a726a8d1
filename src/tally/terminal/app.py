# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tally.logger import configure_logging
from tally.terminal import configuration, record
from tally.terminal.custom_typer import OrderedAliasedTyperGroup
from tally.terminal.forecast import forecast, simulate, trajectory, week
from tally.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Tally - OJT hour tracking and completion forecasts in the CLI",
    no_args_is_help=True,
)
app.add_typer(record.app, name="record, r")
app.command(name="forecast, f")(forecast)
app.command(name="trajectory, tj")(trajectory)
app.command(name="week, w")(week)
app.command(name="simulate, sim")(simulate)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug diagnostics"),
    ] = False,
) -> None:
    """
    Tally - OJT hour tracking and completion forecasts in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
