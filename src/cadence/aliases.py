#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
TimeOfDayString = str
"""A time of the day in 24-hour "HH:mm" format, eg "08:20"."""
WeekdayOrdinal = int
"""Integer in [1, 7] identifying a weekday, Sunday being 1."""
StringKey = str
"""Identifier of a template in a localization string table."""
LocaleName = str
