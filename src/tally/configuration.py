# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "tally"

MASTER_TARGET_HOURS = 500.0
DAILY_TARGET_HOURS = 8.0
REQUIRED_HOURS_MIN = 1.0
GREAT_DELTA_THRESHOLD = 2.0
DEFAULT_OJT_START = "2026-01-26"
DEFAULT_SEMESTER_END = "2026-04-25"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_RECORDS_PATH: Path = DATA_PATH / "records.yaml"


class Configuration(TypedDict):
    ojt_start_date: str
    semester_end_date: str
    required_hours: float
    daily_target_hours: float
    data_path: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "ojt_start_date": DEFAULT_OJT_START,
        "semester_end_date": DEFAULT_SEMESTER_END,
        "required_hours": MASTER_TARGET_HOURS,
        "daily_target_hours": DAILY_TARGET_HOURS,
        "data_path": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_RECORDS_PATH

    DATA_PATH = data_path
    DATA_RECORDS_PATH = DATA_PATH / "records.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
