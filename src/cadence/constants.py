#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
PACKAGE_NAME = "cadence"
STRINGS_ROOT = "strings"
CONFIGS_ROOT = f"{PACKAGE_NAME}.configs"
DEFAULT_LOCALE = "en_US"
STRINGS_FILE_EXTENSION = "yaml"
TIME_OF_DAY_PATTERN = r"^([01][0-9]|2[0-3]):([0-5][0-9])$"
"""24-hour "HH:mm" with two-digit, zero padded hour and minute."""
MIN_WEEKDAY_ORDINAL = 1
MAX_WEEKDAY_ORDINAL = 7
MAX_PREVIEW_OCCURRENCES = 23
# localization keys
SCHEDULE_EVERY_DAY = "SCHEDULE_EVERY_DAY"
SCHEDULE_FORMAT_DAYS_AT_TIMES = "SCHEDULE_FORMAT_%1$@_at_%2$@"
LIST_FORMAT_DELIMITER = "LIST_FORMAT_DELIMITER"
LIST_FORMAT_AND_PAIR = "LIST_FORMAT_AND_PAIR"
LIST_FORMAT_AND_LAST = "LIST_FORMAT_AND_LAST"
