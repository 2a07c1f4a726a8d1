# SPDX-License-Identifier: MIT

from typing import Any, Iterable, Mapping, Optional

from tally.configuration import DAILY_TARGET_HOURS
from tally.model.log import LogEntry
from tally.service.calendar import step_day
from tally.service.forecast import normalize_logs, resolve_today
from tally.time import to_date_key

SIMULATED_ACCOMPLISHMENT = "Simulated Entry"

MIN_SIMULATED_SLEEP_HOURS = 4.0
SIMULATED_COMMUTE_TOTAL = 1.5
SIMULATED_COMMUTE_PRODUCTIVE = 1.0


def simulated_telemetry(hours: float) -> dict[str, Any]:
    """Plausible telemetry for a day of ``hours`` rendered hours.

    Overtime eats into sleep and half of it spills into personal time;
    long days score lower on identity alignment.
    """
    overtime = max(0.0, hours - DAILY_TARGET_HOURS)
    if hours > DAILY_TARGET_HOURS + 2:
        identity_score = 2
    elif hours >= DAILY_TARGET_HOURS:
        identity_score = 4
    else:
        identity_score = 5
    return {
        "personal_hours": overtime * 0.5,
        "sleep_hours": max(MIN_SIMULATED_SLEEP_HOURS, 9 - hours * 0.3),
        "recovery_hours": 0.0,
        "commute_total": SIMULATED_COMMUTE_TOTAL,
        "commute_productive": SIMULATED_COMMUTE_PRODUCTIVE,
        "identity_score": identity_score,
    }


def simulate_logs(
    logs: Optional[Iterable[LogEntry]],
    hours: float,
    days: int,
    today: Any = None,
) -> list[dict[str, Any]]:
    """
    Extend a log collection with synthetic what-if entries.

    ``days`` entries of ``hours`` each are added on consecutive calendar days
    after the last logged day, or after today when there are no logs. The
    input is left untouched; the returned list holds copies of the original
    entries followed by the simulated ones.
    """
    existing = [dict(entry) for entry in logs or [] if isinstance(entry, Mapping)]
    normalized_logs = normalize_logs(existing)

    if normalized_logs:
        anchor = normalized_logs[-1]["date_key"]
    else:
        anchor = to_date_key(resolve_today(today))

    simulated: list[dict[str, Any]] = []
    for offset in range(1, max(0, days) + 1):
        day = step_day(anchor, offset)
        if day is None:
            break
        simulated.append(
            {
                "date": to_date_key(day),
                "hours": hours,
                "accomplishments": [SIMULATED_ACCOMPLISHMENT],
                "simulated": True,
                **simulated_telemetry(hours),
            }
        )
    return existing + simulated
