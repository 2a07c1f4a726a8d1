# SPDX-License-Identifier: MIT

import math
from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tally import configuration
from tally.time import from_date_key, to_date_key

MIN_DAILY_HOURS = 0.1


def validate_date_setting(name: str, value: Any) -> str:
    date_key = to_date_key(value)
    if date_key is None or from_date_key(date_key) is None:
        raise ValueError(f"{name} must be a valid date, got {value!r}")
    return date_key


def validate_hours_setting(name: str, value: Any, minimum: float) -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(hours) or hours < minimum:
        raise ValueError(f"{name} must be at least {minimum:g}, got {value!r}")
    return hours


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}

        # Back-fill settings added after the file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        # Hand-edited files may hold values the forecast cannot use
        try:
            loaded["ojt_start_date"] = validate_date_setting(
                "ojt_start_date", loaded["ojt_start_date"]
            )
        except ValueError:
            loaded["ojt_start_date"] = defaults["ojt_start_date"]
        try:
            loaded["semester_end_date"] = validate_date_setting(
                "semester_end_date", loaded["semester_end_date"]
            )
        except ValueError:
            loaded["semester_end_date"] = defaults["semester_end_date"]
        try:
            loaded["required_hours"] = validate_hours_setting(
                "required_hours",
                loaded["required_hours"],
                configuration.REQUIRED_HOURS_MIN,
            )
        except ValueError:
            loaded["required_hours"] = defaults["required_hours"]
        try:
            loaded["daily_target_hours"] = validate_hours_setting(
                "daily_target_hours", loaded["daily_target_hours"], MIN_DAILY_HOURS
            )
        except ValueError:
            loaded["daily_target_hours"] = defaults["daily_target_hours"]

        self._config = loaded

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        ojt_start_date: Any = None,
        semester_end_date: Any = None,
        required_hours: Any = None,
        daily_target_hours: Any = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        # Validate everything before touching the stored config
        updates: dict[str, Any] = {}
        if ojt_start_date is not None:
            updates["ojt_start_date"] = validate_date_setting(
                "ojt_start_date", ojt_start_date
            )
        if semester_end_date is not None:
            updates["semester_end_date"] = validate_date_setting(
                "semester_end_date", semester_end_date
            )
        if required_hours is not None:
            updates["required_hours"] = validate_hours_setting(
                "required_hours", required_hours, configuration.REQUIRED_HOURS_MIN
            )
        if daily_target_hours is not None:
            updates["daily_target_hours"] = validate_hours_setting(
                "daily_target_hours", daily_target_hours, MIN_DAILY_HOURS
            )
        if data_path is not None:
            updates["data_path"] = data_path
        if remove_data_path:
            updates["data_path"] = None

        if not updates:
            return

        self.is_dirty = True
        for key, value in updates.items():
            self.config[key] = value  # type: ignore[literal-required]


CONFIGURATION_REPO = ConfigurationRepository()
