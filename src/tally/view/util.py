# SPDX-License-Identifier: MIT

from typing import Optional

from tally.service.summary import StatusType

STATUS_COLORS: dict[StatusType, str] = {
    "neutral": "grey70",
    "warning": "yellow",
    "good": "green",
    "excellent": "bright_cyan",
}


def colorize(text: str, status: StatusType) -> str:
    color = STATUS_COLORS[status]
    return f"[{color}]{text}[/{color}]"


def format_hours(hours: Optional[float], precision: int = 1) -> str:
    if hours is None:
        return ""
    return f"{hours:.{precision}f}h"


def format_signed_hours(hours: float) -> str:
    sign = "+" if hours >= 0 else ""
    return f"{sign}{hours:.2f}h"


def format_list(values: Optional[list[str]]) -> str:
    if values is None:
        return ""
    return ", ".join(values)
