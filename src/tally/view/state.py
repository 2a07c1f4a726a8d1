# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Reports print the program header unless --no-header was given
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """True when reports should start with the program header."""
    return _show_header_var.get()
