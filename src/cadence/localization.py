#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Localized strings, weekday names and time formatting used to display
schedules. String tables are YAML files shipped with the package, one per
locale."""

import datetime
import logging
from collections.abc import Mapping, Sequence
from importlib import resources
from pathlib import Path

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from cadence.aliases import LocaleName, StringKey, WeekdayOrdinal
from cadence.constants import (
    DEFAULT_LOCALE,
    LIST_FORMAT_AND_LAST,
    LIST_FORMAT_AND_PAIR,
    LIST_FORMAT_DELIMITER,
    MAX_WEEKDAY_ORDINAL,
    MIN_WEEKDAY_ORDINAL,
    PACKAGE_NAME,
    STRINGS_FILE_EXTENSION,
    STRINGS_ROOT,
)
from cadence.exceptions import LocalizationError
from cadence.weekday import Weekday

logger = logging.getLogger(__name__)

_REQUIRED_TABLE_FIELDS = (
    "first_weekday",
    "weekday_names",
    "short_weekday_names",
    "am_pm_symbols",
    "time_format",
    "strings",
)


class Localization:
    """Look up localized text for a single locale.

    Parameters
    ----------
    strings
        Maps template identifiers to localized templates. Templates take
        positional `{0}`, `{1}` placeholders.
    weekday_names, short_weekday_names
        Seven names each, Sunday first.
    am_pm_symbols
        The symbols for times before and after noon.
    time_format
        Template for the short time style. Available fields are `hour`,
        `hour12`, `minute` and `period`, eg "{hour12}:{minute:02d} {period}".
    first_weekday
        Ordinal of the day the week starts on in this locale.
    locale
        Name of the locale, for display purposes only.
    """

    def __init__(
        self,
        strings: Mapping[StringKey, str],
        weekday_names: Sequence[str],
        short_weekday_names: Sequence[str],
        am_pm_symbols: Sequence[str] = ("AM", "PM"),
        time_format: str = "{hour12}:{minute:02d} {period}",
        first_weekday: WeekdayOrdinal = Weekday.SUNDAY,
        locale: LocaleName = DEFAULT_LOCALE,
    ):
        if not MIN_WEEKDAY_ORDINAL <= first_weekday <= MAX_WEEKDAY_ORDINAL:
            raise ValueError(f"Invalid first weekday: {first_weekday}")
        if len(weekday_names) != 7 or len(short_weekday_names) != 7:
            raise ValueError("Exactly seven weekday names are required")
        if len(am_pm_symbols) != 2:
            raise ValueError("Expected two symbols for times before and after noon")
        self.strings = dict(strings)
        self.weekday_names = list(weekday_names)
        self.short_weekday_names = list(short_weekday_names)
        self.am_pm_symbols = tuple(am_pm_symbols)
        self.time_format = time_format
        self.first_weekday = int(first_weekday)
        self.locale = locale

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locale={self.locale!r})"

    def localized_string(self, key: StringKey) -> str:
        """Return the template for `key`, or the key itself if the table does
        not define it."""
        try:
            return self.strings[key]
        except KeyError:
            logger.warning(f"Missing localized string {key!r} for locale {self.locale}")
            return key

    def localized_string_with_format(self, key: StringKey, *args: str) -> str:
        return self.localized_string(key).format(*args)

    def localized_and_join(self, items: Sequence[str]) -> str:
        """Join a list with "and", eg "Thursday, Friday, and Saturday"."""
        if not items:
            return ""
        if len(items) == 1:
            return items[0]
        if len(items) == 2:
            return self.localized_string_with_format(LIST_FORMAT_AND_PAIR, *items)
        delimiter = self.localized_string(LIST_FORMAT_DELIMITER)
        head = delimiter.join(items[:-1])
        return head + self.localized_string_with_format(LIST_FORMAT_AND_LAST, items[-1])

    def weekday_name(self, day: Weekday) -> str:
        return self.weekday_names[day - 1]

    def short_weekday_name(self, day: Weekday) -> str:
        return self.short_weekday_names[day - 1]

    def format_time(self, value: datetime.time) -> str:
        """Format a time of the day in the short time style of the locale."""
        hour12 = value.hour % 12 or 12
        period = self.am_pm_symbols[0] if value.hour < 12 else self.am_pm_symbols[1]
        return self.time_format.format(
            hour=value.hour, hour12=hour12, minute=value.minute, period=period
        )


def _strings_path(locale: LocaleName, strings_dir: str | Path | None = None) -> Path:
    fname = f"{locale}.{STRINGS_FILE_EXTENSION}"
    if strings_dir is not None:
        return Path(strings_dir) / fname
    return Path(str(resources.files(PACKAGE_NAME) / STRINGS_ROOT / fname))


def available_locales(strings_dir: str | Path | None = None) -> list[LocaleName]:
    """List the locales for which a string table exists."""
    root = _strings_path(DEFAULT_LOCALE, strings_dir).parent
    return sorted(p.stem for p in root.glob(f"*.{STRINGS_FILE_EXTENSION}"))


def load_localization(
    locale: LocaleName = DEFAULT_LOCALE,
    first_weekday: WeekdayOrdinal | None = None,
    strings_dir: str | Path | None = None,
) -> Localization:
    """Load the string table for `locale`.

    Parameters
    ----------
    first_weekday
        If specified, overrides the first day of the week of the locale.
    strings_dir
        A directory containing `<locale>.yaml` string tables, used instead of
        the tables shipped with the package.

    Raises
    ------
    LocalizationError if the table cannot be found or is malformed.
    """
    path = _strings_path(locale, strings_dir)
    if not path.exists():
        raise LocalizationError(f"No string table for locale {locale} at {path}")
    try:
        table = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise LocalizationError(f"Could not read string table {path}: {e}") from e
    missing = [f for f in _REQUIRED_TABLE_FIELDS if f not in table]
    if missing:
        raise LocalizationError(f"String table {path} is missing fields: {missing}")
    logger.debug(f"Loaded string table for locale {locale} from {path}")
    try:
        return Localization(
            strings=table["strings"],
            weekday_names=table["weekday_names"],
            short_weekday_names=table["short_weekday_names"],
            am_pm_symbols=table["am_pm_symbols"],
            time_format=table["time_format"],
            first_weekday=int(
                first_weekday if first_weekday is not None else table["first_weekday"]
            ),
            locale=locale,
        )
    except (ValueError, TypeError) as e:
        raise LocalizationError(f"Invalid string table {path}: {e}") from e
