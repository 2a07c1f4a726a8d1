# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from tally.view.state import get_show_header


def header(program_range: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the program date range.

    Args:
        program_range: Start and deadline of the program, already formatted
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    program_range = f"[plum1]{program_range}[/plum1]"

    print(Padding("[dark_orange]tally[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(program_range, (0, 1)))
