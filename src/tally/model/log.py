# SPDX-License-Identifier: MIT

from typing import Any, Mapping, TypedDict

from tally.time import DateKey

# Caller-supplied entry: needs "date" and "hours", every other key rides along.
LogEntry = Mapping[str, Any]


class NormalizedLog(TypedDict):
    date_key: DateKey
    hours: float  # coerced, never negative
    # Passenger fields of the source entry are copied in as-is.
