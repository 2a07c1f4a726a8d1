# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tally import configuration, time
from tally.model.record import TELEMETRY_HOURS_FIELDS, DailyRecord, DailyRecords
from tally.service.forecast import coerce_hours
from tally.service.summary import (
    IDENTITY_SCORE_MAX,
    IDENTITY_SCORE_MIN,
    coerce_identity_score,
)


class RecordRepository:
    def __init__(self) -> None:
        self._records: Optional[list[DailyRecord]] = None
        self.is_dirty = False

    @property
    def records(self) -> list[DailyRecord]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        self._records = []
        if not configuration.DATA_RECORDS_PATH.is_file():
            return
        records_data = load(configuration.DATA_RECORDS_PATH.read_text(), Loader=Loader)
        if records_data is None:
            return
        for raw_record in records_data.get("records") or []:
            self._records.append(self.__convert_record_for_deserialization(raw_record))

    def __save_data(self, records: list[DailyRecord]) -> None:
        serializable_records = [
            self.__convert_record_for_serialization(deepcopy(record))
            for record in sorted(records, key=lambda record: record["date"])
        ]
        records_data = cast(DailyRecords, {"records": serializable_records})
        configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
        configuration.DATA_RECORDS_PATH.write_text(dump(records_data, Dumper=Dumper))

    def flush(self) -> bool:
        if self._records is not None and self.is_dirty:
            self.__save_data(self._records)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._records = None
        self.is_dirty = False

    def __convert_record_for_serialization(self, record: DailyRecord) -> dict[str, Any]:
        serializable_record = cast(dict[str, Any], record)
        serializable_record["created"] = time.datetime_to_iso_str(
            serializable_record["created"]
        )
        serializable_record["updated"] = time.datetime_to_iso_str(
            serializable_record["updated"]
        )
        return serializable_record

    def __convert_record_for_deserialization(
        self, record: dict[str, Any]
    ) -> DailyRecord:
        deserializable_record = record
        # PyYAML reads unquoted YYYY-MM-DD scalars as datetime.date
        deserializable_record["date"] = time.to_date_key(deserializable_record["date"])
        deserializable_record["hours"] = coerce_hours(deserializable_record["hours"])
        # Files written before telemetry was tracked lack those fields
        self.__coerce_telemetry(cast(DailyRecord, deserializable_record))
        deserializable_record["created"] = time.datetime_from_str(
            deserializable_record["created"]
        )
        deserializable_record["updated"] = time.datetime_from_str(
            deserializable_record["updated"]
        )
        return cast(DailyRecord, deserializable_record)

    def save_record(self, record: DailyRecord) -> str:
        """Insert a record, replacing any record already stored for its day."""
        record = deepcopy(record)
        date_key = time.to_date_key(record["date"])
        if date_key is None or time.from_date_key(date_key) is None:
            raise ValueError(f"record date is not a valid date: {record['date']!r}")
        try:
            hours = float(record["hours"])
        except (TypeError, ValueError):
            raise ValueError(f"record hours must be a number: {record['hours']!r}")
        if hours < 0 or coerce_hours(hours) != hours:
            raise ValueError(f"record hours must be a non-negative number: {hours!r}")

        identity_score = coerce_identity_score(record.get("identity_score"))
        if identity_score is not None and not (
            IDENTITY_SCORE_MIN <= identity_score <= IDENTITY_SCORE_MAX
        ):
            raise ValueError(
                f"identity score must be between {IDENTITY_SCORE_MIN} and "
                f"{IDENTITY_SCORE_MAX}: {record.get('identity_score')!r}"
            )

        self.is_dirty = True
        record["date"] = date_key
        record["hours"] = hours
        self.__coerce_telemetry(record)

        existing = self.__find_record(date_key)
        if existing is not None:
            record["created"] = existing["created"]
            record["updated"] = time.now_utc()
            self.records.remove(existing)
        self.records.append(record)
        self.records.sort(key=lambda stored: stored["date"])
        return date_key

    def __coerce_telemetry(self, record: DailyRecord) -> None:
        for field in TELEMETRY_HOURS_FIELDS:
            record[field] = coerce_hours(record.get(field))  # type: ignore[literal-required]
        identity_score = coerce_identity_score(record.get("identity_score"))
        if identity_score is not None and not (
            IDENTITY_SCORE_MIN <= identity_score <= IDENTITY_SCORE_MAX
        ):
            identity_score = None
        record["identity_score"] = identity_score

    def delete_record(self, date: Any) -> bool:
        date_key = time.to_date_key(date)
        existing = self.__find_record(date_key) if date_key is not None else None
        if existing is None:
            return False
        self.is_dirty = True
        self.records.remove(existing)
        return True

    def __find_record(self, date_key: str) -> Optional[DailyRecord]:
        for record in self.records:
            if record["date"] == date_key:
                return record
        return None

    def get_record(self, date: Any) -> Optional[DailyRecord]:
        date_key = time.to_date_key(date)
        if date_key is None:
            return None
        return deepcopy(self.__find_record(date_key))

    def get_all_records(self) -> list[DailyRecord]:
        return deepcopy(self.records)


RECORD_REPO = RecordRepository()
