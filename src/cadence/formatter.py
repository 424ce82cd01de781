#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Display text for weekly schedules."""

from collections.abc import Iterable, Sequence
from enum import StrEnum, auto
from typing import Any

from cadence.aliases import WeekdayOrdinal
from cadence.constants import (
    LIST_FORMAT_DELIMITER,
    SCHEDULE_EVERY_DAY,
    SCHEDULE_FORMAT_DAYS_AT_TIMES,
)
from cadence.localization import Localization, load_localization
from cadence.schedule import WeeklySchedule
from cadence.weekday import ALL_WEEKDAYS, Weekday, sort_weekdays, weekdays_from_ordinals


class ScheduleStyle(StrEnum):
    """The verbosity of the display text for a weekly schedule.

    Examples (en_US)
    ----------------
        - long: "Thursday, Friday, and Saturday at 4:00 PM and 7:30 PM"
        - medium: "4:00 PM, 7:30 PM\\nThursday, Friday, Saturday"
        - short: "4:00 PM, 7:30 PM, Thu, Fri, Sat"
    """

    FULL = auto()
    LONG = auto()
    MEDIUM = auto()
    SHORT = auto()

    @property
    def verbose(self) -> bool:
        return self in (ScheduleStyle.FULL, ScheduleStyle.LONG)


class WeeklyScheduleFormatter:
    """Formats one or more weekly schedules, or a set of weekdays, as text.

    The formatter holds no per-call state, the same instance can be reused to
    format any number of schedules.

    Parameters
    ----------
    localization
        Source of the localized templates, names and the first day of the
        week. The `en_US` tables are used if not specified.
    style
        Verbosity of the text, `medium` if not specified.
    """

    def __init__(
        self,
        localization: Localization | None = None,
        style: ScheduleStyle | str | None = None,
    ):
        self.localization = localization or load_localization()
        self.style = style

    @property
    def style(self) -> ScheduleStyle:
        return self._style

    @style.setter
    def style(self, value: ScheduleStyle | str | None):
        if value is None:
            value = ScheduleStyle.MEDIUM
        self._style = ScheduleStyle(value)

    def render(self, obj: Any) -> str | None:
        """Format a schedule, a sequence of schedules or a collection of weekday
        ordinals. Returns `None` for anything else."""
        if isinstance(obj, WeeklySchedule):
            return self.render_schedule(obj)
        if isinstance(obj, (list, tuple)) and all(
            isinstance(o, WeeklySchedule) for o in obj
        ):
            return self.render_schedules(obj)
        if isinstance(obj, (list, tuple, set, frozenset)) and all(
            isinstance(o, int) for o in obj
        ):
            return self.render_weekdays(obj)
        return None

    def render_schedule(self, schedule: WeeklySchedule) -> str | None:
        return self.render_schedules([schedule])

    def render_schedules(self, schedules: Sequence[WeeklySchedule]) -> str | None:
        """Format a batch of schedules.

        Schedules which share the same days are merged, the days being listed
        once followed by all the times. Otherwise each schedule is formatted
        on its own line, the `medium` style being demoted to `short`.
        """
        days_of_week = {frozenset(s.days_of_week) for s in schedules}
        if len(days_of_week) == 1:
            days = days_of_week.pop()
            return self._join(
                self._joined_days(days, self.style),
                self._joined_times(schedules, self.style),
                self.style,
            )
        style = self.style
        if style == ScheduleStyle.MEDIUM:
            style = ScheduleStyle.SHORT
        lines = []
        for schedule in schedules:
            line = self._join(
                self._joined_days(schedule.days_of_week, style),
                self._joined_times([schedule], style),
                style,
            )
            if line is not None:
                lines.append(line)
        return "\n".join(lines) if lines else None

    def render_weekdays(self, days: Iterable[WeekdayOrdinal]) -> str | None:
        """Format a collection of weekday ordinals, ignoring invalid ones."""
        return self._joined_days(weekdays_from_ordinals(days), self.style)

    def _join(
        self, days: str | None, times: str | None, style: ScheduleStyle
    ) -> str | None:
        if days is None or times is None:
            return days if days is not None else times
        if style.verbose:
            return self.localization.localized_string_with_format(
                SCHEDULE_FORMAT_DAYS_AT_TIMES, days, times
            )
        if style == ScheduleStyle.SHORT:
            return f"{times}, {days}"
        return f"{times}\n{days}"

    def _joined_days(self, days: Iterable[Weekday], style: ScheduleStyle) -> str | None:
        days = set(days)
        if not days:
            return None
        if days == ALL_WEEKDAYS:
            return self.localization.localized_string(SCHEDULE_EVERY_DAY)
        ordered = sort_weekdays(days, self.localization.first_weekday)
        if style == ScheduleStyle.SHORT:
            names = [self.localization.short_weekday_name(d) for d in ordered]
        else:
            names = [self.localization.weekday_name(d) for d in ordered]
        if style.verbose:
            return self.localization.localized_and_join(names)
        return self.localization.localized_string(LIST_FORMAT_DELIMITER).join(names)

    def _joined_times(
        self, schedules: Iterable[WeeklySchedule], style: ScheduleStyle
    ) -> str | None:
        times = []
        for schedule in schedules:
            time_of_day = schedule.time_of_day
            if time_of_day is None:
                continue
            text = self.localization.format_time(time_of_day)
            if text not in times:
                times.append(text)
        if not times:
            return None
        if style.verbose:
            return self.localization.localized_and_join(times)
        return self.localization.localized_string(LIST_FORMAT_DELIMITER).join(times)
