#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

from rich.console import Console
from rich.table import Table

from cadence.constants import SCHEDULE_EVERY_DAY
from cadence.localization import Localization
from cadence.schedule import WeeklySchedule
from cadence.weekday import Weekday


def display_triggers(
    schedules: list[WeeklySchedule],
    localization: Localization,
    console: Console | None = None,
):
    """Display the notification triggers of each schedule as a rich table with
    the following format

    ┏━━━━━━━━━━┳━━━━━━━━━━━━━━┳━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
    ┃ Schedule ┃ Time         ┃ Weekday                      ┃
    ┡━━━━━━━━━━╇━━━━━━━━━━━━━━╇━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┩
    """  # noqa

    console = console or Console()
    table = Table(show_header=True, header_style="bold magenta", expand=True)
    table.add_column("Schedule", justify="right", style="cyan", no_wrap=True)
    table.add_column("Time", style="white", no_wrap=True)
    table.add_column("Weekday", style="dim")

    for i, schedule in enumerate(schedules):
        triggers = schedule.notification_triggers()
        if not triggers:
            table.add_row(str(i), "-", "[red]not armed[/red]")
            continue
        for trigger in triggers:
            time_str = localization.format_time(
                datetime.time(hour=trigger.hour, minute=trigger.minute)
            )
            if trigger.weekday is None:
                weekday = localization.localized_string(SCHEDULE_EVERY_DAY)
            else:
                weekday = localization.weekday_name(Weekday(trigger.weekday))
            table.add_row(str(i), time_str, weekday)

    console.print(table)


def display_occurrences(
    occurrences: dict[int, list[datetime.datetime]],
    console: Console | None = None,
):
    """Display the upcoming occurrences of each schedule, keyed by the position
    of the schedule in the input."""
    console = console or Console()
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Schedule", justify="right", style="cyan", no_wrap=True)
    table.add_column("Fires at", style="green")
    for i, dts in occurrences.items():
        for dt in dts:
            table.add_row(str(i), dt.strftime("%a %Y-%m-%d %H:%M"))
    console.print(table)
