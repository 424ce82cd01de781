#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import json
from pathlib import Path

import pytest

from cadence.codec import (
    WeeklyScheduleRecord,
    decode_schedule,
    decode_schedules,
    encode_schedule,
    encode_schedule_json,
    encode_schedules,
    load_schedules,
)
from cadence.exceptions import ScheduleDecodeError
from cadence.schedule import WeeklySchedule
from cadence.weekday import ALL_WEEKDAYS, Weekday


def test_decode_documented_example():
    schedule = decode_schedule('{"daysOfWeek": [1, 3, 5], "timeOfDay": "08:00"}')
    assert schedule == WeeklySchedule(
        days_of_week={Weekday.SUNDAY, Weekday.TUESDAY, Weekday.THURSDAY},
        time_of_day_string="08:00",
    )


def test_omitted_fields_default_to_daily_without_time():
    schedule = decode_schedule("{}")
    assert schedule.days_of_week == set(ALL_WEEKDAYS)
    assert schedule.time_of_day_string is None
    assert decode_schedule({"timeOfDay": None}).time_of_day_string is None


def test_unknown_keys_are_ignored():
    schedule = decode_schedule({"daysOfWeek": [2], "timeOfDay": "10:00", "note": "x"})
    assert schedule.days_of_week == {Weekday.MONDAY}


@pytest.mark.parametrize(
    "payload",
    [
        '{"daysOfWeek": [0, 1]}',
        '{"daysOfWeek": [8]}',
        '{"daysOfWeek": "Monday"}',
        '{"timeOfDay": "8:00"}',
        '{"timeOfDay": "25:00"}',
        '{"timeOfDay": 800}',
        "not json",
        "[]",
    ],
)
def test_malformed_payloads_are_rejected(payload: str):
    with pytest.raises(ScheduleDecodeError):
        decode_schedule(payload)


def test_encode_field_order_days_before_time(monday_friday: set[Weekday]):
    schedule = WeeklySchedule(days_of_week=monday_friday, time_of_day_string="08:20")
    encoded = encode_schedule(schedule)
    assert list(encoded) == ["daysOfWeek", "timeOfDay"]
    assert encoded == {"daysOfWeek": [2, 6], "timeOfDay": "08:20"}
    assert encode_schedule_json(schedule) == (
        '{"daysOfWeek": [2, 6], "timeOfDay": "08:20"}'
    )


def test_record_aliases_follow_wire_order():
    aliases = [f.alias for f in WeeklyScheduleRecord.model_fields.values()]
    assert aliases == ["daysOfWeek", "timeOfDay"]


def test_encode_omits_absent_time():
    assert encode_schedule(WeeklySchedule()) == {"daysOfWeek": [1, 2, 3, 4, 5, 6, 7]}


def test_encode_empty_days():
    schedule = WeeklySchedule(days_of_week=set(), time_of_day_string="06:00")
    assert encode_schedule(schedule) == {"daysOfWeek": [], "timeOfDay": "06:00"}
    assert decode_schedule(encode_schedule(schedule)) == schedule


def test_examples_survive_encoding(schedule_examples: list[WeeklySchedule]):
    encoded = json.dumps(encode_schedules(schedule_examples))
    assert decode_schedules(encoded) == schedule_examples


def test_decode_schedules_accepts_single_object():
    schedules = decode_schedules('{"daysOfWeek": [7], "timeOfDay": "23:00"}')
    assert schedules == [WeeklySchedule(days_of_week={7}, time_of_day_string="23:00")]


def test_decode_schedules_rejects_bad_entries():
    with pytest.raises(ScheduleDecodeError):
        decode_schedules('[{"daysOfWeek": [1]}, {"daysOfWeek": [9]}]')
    with pytest.raises(ScheduleDecodeError):
        decode_schedules("[{")


def test_load_schedules(tmp_path: Path):
    path = tmp_path / "schedules.json"
    path.write_text(
        json.dumps(
            [
                {"daysOfWeek": [2, 6], "timeOfDay": "08:00"},
                {"daysOfWeek": [2, 6], "timeOfDay": "19:30"},
            ]
        )
    )
    schedules = load_schedules(path)
    assert [s.time_of_day_string for s in schedules] == ["08:00", "19:30"]
    assert all(s.days_of_week == {Weekday.MONDAY, Weekday.FRIDAY} for s in schedules)
