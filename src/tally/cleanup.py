# SPDX-License-Identifier: MIT

import atexit

from tally.repository.configuration import CONFIGURATION_REPO
from tally.repository.record import RECORD_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    RECORD_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
