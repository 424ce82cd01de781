#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Days of the week, stored Sunday-first with ordinals in [1, 7], and the
locale-dependent order in which they are listed to the user.

Sorting never reads an ambient locale: the first day of the week is always
passed in by the caller, so a single sort always sees one value."""

import logging
from collections.abc import Iterable
from enum import IntEnum
from functools import partial

from cadence.aliases import WeekdayOrdinal
from cadence.constants import MAX_WEEKDAY_ORDINAL, MIN_WEEKDAY_ORDINAL

logger = logging.getLogger(__name__)


class Weekday(IntEnum):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def all(cls) -> set["Weekday"]:
        """The set of all the weekdays (every day)."""
        return set(cls)

    @classmethod
    def from_ordinal(cls, value: WeekdayOrdinal) -> "Weekday | None":
        """Return the weekday for `value`, or `None` if it is not in [1, 7]."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not MIN_WEEKDAY_ORDINAL <= value <= MAX_WEEKDAY_ORDINAL:
            return None
        return cls(value)


ALL_WEEKDAYS: frozenset[Weekday] = frozenset(Weekday)


def weekdays_from_ordinals(values: Iterable[WeekdayOrdinal]) -> set[Weekday]:
    """Map integers to weekdays, silently dropping the ones outside [1, 7]."""
    days = set()
    for value in values:
        day = Weekday.from_ordinal(value)
        if day is None:
            logger.debug(f"Dropping invalid weekday ordinal {value!r}")
            continue
        days.add(day)
    return days


def precedes(lhs: Weekday, rhs: Weekday, first_weekday: WeekdayOrdinal) -> bool:
    """Check if `lhs` is listed before `rhs` in a week starting on `first_weekday`.

    Days on or after `first_weekday` come before the days that wrap around
    to the start of the ordinal range, eg with a Monday start (2) Sunday (1)
    is listed last.
    """
    lhs_late = lhs >= first_weekday
    rhs_late = rhs >= first_weekday
    if lhs_late == rhs_late:
        return lhs < rhs
    return lhs_late


def weekday_sort_key(day: Weekday, first_weekday: WeekdayOrdinal) -> int:
    """Position of `day` in a week starting on `first_weekday`, in [0, 6]."""
    return (day - first_weekday) % 7


def sort_weekdays(
    days: Iterable[Weekday], first_weekday: WeekdayOrdinal = Weekday.SUNDAY
) -> list[Weekday]:
    """Sort `days` in calendar order, starting from `first_weekday` and
    wrapping around the end of the week."""
    return sorted(days, key=partial(weekday_sort_key, first_weekday=first_weekday))
