#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A light-weight weekly recurrence rule, used to arm repeating local
reminders. The schedule assumes an ISO8601 7-day calendar and is time zone
naive: it only knows the wall clock hour and minute."""

import datetime
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Self

from cadence.aliases import TimeOfDayString, WeekdayOrdinal
from cadence.constants import TIME_OF_DAY_PATTERN
from cadence.weekday import ALL_WEEKDAYS, Weekday, weekdays_from_ordinals

_TIME_OF_DAY_RE = re.compile(TIME_OF_DAY_PATTERN)


class TimeComponents(NamedTuple):
    """The hour and minute of a time of the day."""

    hour: int
    minute: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.hour <= 23 and 0 <= self.minute <= 59


class TriggerSpec(NamedTuple):
    """The calendar components needed to arm one repeating local notification.

    Parameters
    ----------
    hour
        Hour of the day, in [0, 23].
    minute
        Minute of the hour, in [0, 59].
    weekday
        Weekday ordinal in [1, 7] (Sunday is 1). `None` means the trigger
        repeats every day.
    """

    hour: int
    minute: int
    weekday: WeekdayOrdinal | None = None

    def as_dict(self) -> dict[str, int]:
        trigger = {"hour": self.hour, "minute": self.minute}
        if self.weekday is not None:
            trigger["weekday"] = self.weekday
        return trigger


def parse_time_of_day(value: TimeOfDayString | None) -> datetime.time | None:
    """Parse an "HH:mm" string. Malformed strings yield `None`."""
    if not isinstance(value, str):
        return None
    match = _TIME_OF_DAY_RE.fullmatch(value)
    if match is None:
        return None
    return datetime.time(hour=int(match.group(1)), minute=int(match.group(2)))


def format_time_of_day(value: datetime.time) -> TimeOfDayString:
    return f"{value.hour:02d}:{value.minute:02d}"


def format_time_components(hour: int, minute: int) -> TimeOfDayString | None:
    """Format an hour and minute as "HH:mm", or `None` if either is out of range."""
    components = TimeComponents(hour, minute)
    if not components.is_valid:
        return None
    return f"{hour:02d}:{minute:02d}"


@dataclass
class WeeklySchedule:
    """A set of weekdays and an optional time of the day at which something
    should happen, eg a reminder to take a survey.

    Parameters
    ----------
    days_of_week
        The days of the week to include in the schedule. Defaults to daily.
        An empty set means the schedule never fires.
    time_of_day_string
        The time of the day in "HH:mm" format. `None` means no time is
        configured, in which case no reminder can be armed.

    Notes
    -----
    1. Prefer the `set_*` methods to assigning `time_of_day_string` directly,
    they guarantee the stored string is well formed.
    2. Equality and hashing use both fields; ordering only compares the time,
    schedules without a time being listed first.
    """

    days_of_week: set[Weekday] = field(default_factory=Weekday.all)
    time_of_day_string: TimeOfDayString | None = None

    def __post_init__(self):
        self.days_of_week = weekdays_from_ordinals(self.days_of_week)

    def __hash__(self) -> int:
        return hash((frozenset(self.days_of_week), self.time_of_day_string))

    def __lt__(self, other: Self) -> bool:
        if self.time_of_day_string is None:
            return other.time_of_day is not None
        if other.time_of_day_string is None:
            return False
        return self.time_of_day_string < other.time_of_day_string

    @property
    def is_daily(self) -> bool:
        return self.days_of_week == ALL_WEEKDAYS

    @property
    def time_of_day(self) -> datetime.time | None:
        return parse_time_of_day(self.time_of_day_string)

    @property
    def time_components(self) -> TimeComponents | None:
        time_of_day = self.time_of_day
        if time_of_day is None:
            return None
        return TimeComponents(hour=time_of_day.hour, minute=time_of_day.minute)

    def set_time(self, value: datetime.time) -> bool:
        self.time_of_day_string = format_time_of_day(value)
        return True

    def set_time_components(self, hour: int, minute: int) -> bool:
        """Set the time from an hour and minute. Out of range values clear
        the time and return `False`."""
        self.time_of_day_string = format_time_components(hour, minute)
        return self.time_of_day_string is not None

    def set_time_string(self, value: TimeOfDayString) -> bool:
        """Set the time from an "HH:mm" string. A malformed string clears the
        time and returns `False`."""
        time_of_day = parse_time_of_day(value)
        if time_of_day is None:
            self.time_of_day_string = None
            return False
        self.time_of_day_string = format_time_of_day(time_of_day)
        return True

    def clear_time(self) -> None:
        self.time_of_day_string = None

    def set_time_from(self, value: Any) -> bool:
        """Set the time from a value of unknown shape, eg a decoded payload.

        Accepts a `datetime.time` (or `datetime.datetime`), an (hour, minute)
        pair or an "HH:mm" string. Anything else clears the time and returns
        `False`.
        """
        if isinstance(value, datetime.datetime):
            return self.set_time(value.time())
        if isinstance(value, datetime.time):
            return self.set_time(value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            hour, minute = value
            if all(
                isinstance(v, int) and not isinstance(v, bool) for v in (hour, minute)
            ):
                return self.set_time_components(hour, minute)
        if isinstance(value, str):
            return self.set_time_string(value)
        self.clear_time()
        return False

    def set_weekdays(self, values: Iterable[Weekday]) -> bool:
        """Set the weekdays from `Weekday` members. Any other value is dropped,
        in which case `False` is returned."""
        values = list(values)
        self.days_of_week = {v for v in values if isinstance(v, Weekday)}
        return len(self.days_of_week) == len(set(values))

    def set_weekday_ordinals(self, values: Iterable[WeekdayOrdinal]) -> bool:
        """Set the weekdays from integers. Values outside [1, 7] are dropped,
        in which case `False` is returned."""
        values = list(values)
        self.days_of_week = weekdays_from_ordinals(values)
        return len(self.days_of_week) == len(set(values))

    def set_weekdays_from(self, values: Any) -> bool:
        """Set the weekdays from a value of unknown shape, eg a decoded payload.

        A collection of `Weekday` or of integers is accepted. Any other value
        resets the schedule to daily and returns `False`.
        """
        if isinstance(values, (list, tuple, set, frozenset)):
            if all(isinstance(value, Weekday) for value in values):
                return self.set_weekdays(values)
            if all(isinstance(value, int) for value in values):
                return self.set_weekday_ordinals(values)
        self.days_of_week = Weekday.all()
        return False

    def notification_triggers(self) -> list[TriggerSpec]:
        """Get the calendar components used to set up notification triggers.

        A daily schedule is armed with a single trigger which does not set the
        weekday. Otherwise there is one trigger for each day of the week, in
        ascending ordinal order.

        Notes
        -----
        The trigger components do *not* include a time zone.

        Returns
        -------
        The trigger for each scheduling instance, empty if no time is set.
        """
        components = self.time_components
        if components is None:
            return []
        if self.is_daily:
            return [TriggerSpec(hour=components.hour, minute=components.minute)]
        return [
            TriggerSpec(
                hour=components.hour, minute=components.minute, weekday=int(day)
            )
            for day in sorted(self.days_of_week)
        ]
