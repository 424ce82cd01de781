#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Wire format of weekly schedules.

Example
-------
    {"daysOfWeek": [1, 3, 5], "timeOfDay": "08:00"}

`daysOfWeek` defaults to every day when omitted and `timeOfDay` is optional.
Canonical encodings list `daysOfWeek` before `timeOfDay`.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

from cadence.aliases import TimeOfDayString
from cadence.constants import TIME_OF_DAY_PATTERN
from cadence.exceptions import ScheduleDecodeError
from cadence.schedule import WeeklySchedule
from cadence.weekday import Weekday

logger = logging.getLogger(__name__)


def _all_weekdays() -> list[Weekday]:
    return sorted(Weekday)


class WeeklyScheduleRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    days_of_week: list[Weekday] = Field(
        default_factory=_all_weekdays, alias="daysOfWeek"
    )
    time_of_day: Annotated[
        TimeOfDayString, StringConstraints(pattern=TIME_OF_DAY_PATTERN)
    ] | None = Field(default=None, alias="timeOfDay")

    @classmethod
    def from_schedule(cls, schedule: WeeklySchedule) -> "WeeklyScheduleRecord":
        return cls.model_construct(
            days_of_week=sorted(schedule.days_of_week),
            time_of_day=schedule.time_of_day_string,
        )

    def to_schedule(self) -> WeeklySchedule:
        return WeeklySchedule(
            days_of_week=set(self.days_of_week), time_of_day_string=self.time_of_day
        )


_RECORDS_ADAPTER = TypeAdapter(list[WeeklyScheduleRecord])


def decode_schedule(data: str | bytes | dict[str, Any]) -> WeeklySchedule:
    """Decode a single schedule from JSON text or an already parsed object.

    Raises
    ------
    ScheduleDecodeError if the payload does not follow the wire format.
    """
    try:
        if isinstance(data, dict):
            record = WeeklyScheduleRecord.model_validate(data)
        else:
            record = WeeklyScheduleRecord.model_validate_json(data)
    except ValidationError as e:
        raise ScheduleDecodeError(f"Invalid weekly schedule: {e}") from e
    return record.to_schedule()


def decode_schedules(data: str | bytes | list[dict[str, Any]]) -> list[WeeklySchedule]:
    """Decode a JSON array of schedules. A single object is accepted too."""
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ScheduleDecodeError(f"Invalid JSON: {e}") from e
    if isinstance(data, dict):
        return [decode_schedule(data)]
    try:
        records = _RECORDS_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ScheduleDecodeError(f"Invalid weekly schedules: {e}") from e
    return [r.to_schedule() for r in records]


def encode_schedule(schedule: WeeklySchedule) -> dict[str, Any]:
    """Canonical wire representation, omitting `timeOfDay` if no time is set."""
    return WeeklyScheduleRecord.from_schedule(schedule).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def encode_schedules(schedules: list[WeeklySchedule]) -> list[dict[str, Any]]:
    return [encode_schedule(s) for s in schedules]


def encode_schedule_json(schedule: WeeklySchedule, indent: int | None = None) -> str:
    return json.dumps(encode_schedule(schedule), indent=indent)


def load_schedules(path: str | Path) -> list[WeeklySchedule]:
    """Read the schedules stored in a JSON file."""
    with open(path, "r") as f:
        data = f.read()
    schedules = decode_schedules(data)
    logger.info(f"Loaded {len(schedules)} schedule(s) from {path}")
    return schedules
