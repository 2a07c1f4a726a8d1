# SPDX-License-Identifier: MIT

from tally.model.record import DailyRecord
from tally.time import now_utc


def get_record_template() -> DailyRecord:
    now = now_utc()
    return {
        "date": "",
        "hours": 0.0,
        "reflection": None,
        "accomplishments": None,
        "tools": None,
        "personal_hours": 0.0,
        "sleep_hours": 0.0,
        "recovery_hours": 0.0,
        "commute_total": 0.0,
        "commute_productive": 0.0,
        "identity_score": None,
        "created": now,
        "updated": now,
    }
