#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import pytest

from cadence.formatter import WeeklyScheduleFormatter
from cadence.localization import Localization, load_localization
from cadence.schedule import WeeklySchedule
from cadence.weekday import Weekday


@pytest.fixture()
def en_us() -> Localization:
    return load_localization("en_US")


@pytest.fixture()
def en_gb() -> Localization:
    return load_localization("en_GB")


@pytest.fixture()
def formatter(en_us: Localization) -> WeeklyScheduleFormatter:
    return WeeklyScheduleFormatter(localization=en_us)


@pytest.fixture()
def monday_friday() -> set[Weekday]:
    return {Weekday.MONDAY, Weekday.FRIDAY}


@pytest.fixture
def schedule_examples(monday_friday: set[Weekday]) -> list[WeeklySchedule]:
    return [
        WeeklySchedule(),
        WeeklySchedule(days_of_week=monday_friday, time_of_day_string="08:20"),
    ]
