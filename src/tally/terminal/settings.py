# SPDX-License-Identifier: MIT

from typing import Any

from tally import configuration
from tally.time import LABEL_FORMAT_LONG, format_date_label


def program_range_label(config: configuration.Configuration) -> str:
    start = format_date_label(config["ojt_start_date"], LABEL_FORMAT_LONG)
    end = format_date_label(config["semester_end_date"], LABEL_FORMAT_LONG)
    return f"{start} - {end} | {config['required_hours']:g}h"


def forecast_settings(config: configuration.Configuration) -> dict[str, Any]:
    """Keyword arguments the forecast and trajectory builders take from config."""
    return {
        "start_date": config["ojt_start_date"],
        "deadline_date": config["semester_end_date"],
        "target_hours": config["required_hours"],
        "daily_target_hours": config["daily_target_hours"],
    }
