#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Preview the wall clock datetimes at which a weekly schedule fires."""

import datetime

from dateutil import rrule

from cadence.constants import MAX_PREVIEW_OCCURRENCES
from cadence.schedule import WeeklySchedule
from cadence.weekday import Weekday

# dateutil counts weekdays from Monday = 0
_RRULE_WEEKDAYS = {
    Weekday.MONDAY: rrule.MO,
    Weekday.TUESDAY: rrule.TU,
    Weekday.WEDNESDAY: rrule.WE,
    Weekday.THURSDAY: rrule.TH,
    Weekday.FRIDAY: rrule.FR,
    Weekday.SATURDAY: rrule.SA,
    Weekday.SUNDAY: rrule.SU,
}


def upcoming_occurrences(
    schedule: WeeklySchedule,
    after: datetime.datetime | None = None,
    count: int = 7,
) -> list[datetime.datetime]:
    """Return the next times at which the schedule's reminders would fire.

    Parameters
    ----------
    after
        Only occurrences strictly later than this are returned. Defaults to
        the current time. Must be naive, schedules carry no time zone.
    count
        Number of occurrences to return, capped to `MAX_PREVIEW_OCCURRENCES`.
    """
    components = schedule.time_components
    if components is None or not schedule.days_of_week or count <= 0:
        return []
    if after is None:
        after = datetime.datetime.now()
    rule = rrule.rrule(
        rrule.WEEKLY,
        dtstart=after.replace(hour=0, minute=0, second=0, microsecond=0),
        byweekday=[_RRULE_WEEKDAYS[d] for d in sorted(schedule.days_of_week)],
        byhour=components.hour,
        byminute=components.minute,
        bysecond=0,
    )
    return list(rule.xafter(after, count=min(count, MAX_PREVIEW_OCCURRENCES)))
