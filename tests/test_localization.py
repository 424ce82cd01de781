#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
import logging
from pathlib import Path

import pytest

from cadence.exceptions import LocalizationError
from cadence.localization import Localization, available_locales, load_localization
from cadence.weekday import Weekday

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def test_bundled_locales():
    assert {"de_DE", "en_GB", "en_US"} <= set(available_locales())


def test_first_weekday_per_locale(en_us: Localization, en_gb: Localization):
    assert en_us.first_weekday == Weekday.SUNDAY
    assert en_gb.first_weekday == Weekday.MONDAY
    assert load_localization("de_DE").first_weekday == Weekday.MONDAY
    assert load_localization("en_US", first_weekday=2).first_weekday == 2


def test_weekday_names(en_us: Localization):
    assert en_us.weekday_name(Weekday.SUNDAY) == "Sunday"
    assert en_us.weekday_name(Weekday.SATURDAY) == "Saturday"
    assert en_us.short_weekday_name(Weekday.MONDAY) == "Mon"
    assert load_localization("de_DE").weekday_name(Weekday.THURSDAY) == "Donnerstag"


@pytest.mark.parametrize(
    "value, us, gb",
    [
        (datetime.time(0, 0), "12:00 AM", "00:00"),
        (datetime.time(8, 0), "8:00 AM", "08:00"),
        (datetime.time(12, 5), "12:05 PM", "12:05"),
        (datetime.time(19, 30), "7:30 PM", "19:30"),
    ],
)
def test_format_time(en_us: Localization, en_gb: Localization, value, us, gb):
    assert en_us.format_time(value) == us
    assert en_gb.format_time(value) == gb


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], ""),
        (["Monday"], "Monday"),
        (["Monday", "Friday"], "Monday and Friday"),
        (["Thursday", "Friday", "Saturday"], "Thursday, Friday, and Saturday"),
    ],
)
def test_localized_and_join(en_us: Localization, items: list[str], expected: str):
    assert en_us.localized_and_join(items) == expected


def test_localized_and_join_without_serial_comma():
    de = load_localization("de_DE")
    assert de.localized_and_join(["Mo", "Di", "Mi"]) == "Mo, Di und Mi"


def test_missing_key_falls_back_to_key(caplog):
    localization = Localization(
        strings={}, weekday_names=WEEKDAYS, short_weekday_names=WEEKDAYS
    )
    with caplog.at_level(logging.WARNING):
        assert localization.localized_string("UNKNOWN_KEY") == "UNKNOWN_KEY"
    assert "UNKNOWN_KEY" in caplog.text


def test_format_with_positional_arguments(en_us: Localization):
    assert (
        en_us.localized_string_with_format(
            "SCHEDULE_FORMAT_%1$@_at_%2$@", "Monday", "8:00 AM"
        )
        == "Monday at 8:00 AM"
    )


@pytest.mark.parametrize("first_weekday", [0, 8])
def test_invalid_first_weekday(first_weekday: int):
    with pytest.raises(ValueError):
        Localization(
            strings={},
            weekday_names=WEEKDAYS,
            short_weekday_names=WEEKDAYS,
            first_weekday=first_weekday,
        )
    with pytest.raises(LocalizationError):
        load_localization("en_US", first_weekday=first_weekday)


def test_unknown_locale():
    with pytest.raises(LocalizationError):
        load_localization("xx_XX")


def test_custom_strings_dir(tmp_path: Path):
    (tmp_path / "fr_FR.yaml").write_text(
        "\n".join(
            [
                "first_weekday: 2",
                "weekday_names: [dimanche, lundi, mardi, mercredi, jeudi, vendredi, samedi]",  # noqa
                "short_weekday_names: [dim., lun., mar., mer., jeu., ven., sam.]",
                "am_pm_symbols: [AM, PM]",
                'time_format: "{hour:02d}:{minute:02d}"',
                "strings:",
                '  SCHEDULE_EVERY_DAY: "Tous les jours"',
            ]
        )
    )
    (tmp_path / "broken.yaml").write_text("first_weekday: 2\n")
    assert available_locales(tmp_path) == ["broken", "fr_FR"]
    fr = load_localization("fr_FR", strings_dir=tmp_path)
    assert fr.localized_string("SCHEDULE_EVERY_DAY") == "Tous les jours"
    assert fr.weekday_name(Weekday.MONDAY) == "lundi"
    with pytest.raises(LocalizationError):
        load_localization("broken", strings_dir=tmp_path)


@pytest.mark.parametrize(
    "first_weekday, expected",
    [
        ('"2"', Weekday.MONDAY),
        ("two", None),
        ("[2]", None),
        ("null", None),
    ],
)
def test_first_weekday_field_is_coerced(tmp_path: Path, first_weekday, expected):
    (tmp_path / "xx_XX.yaml").write_text(
        "\n".join(
            [
                f"first_weekday: {first_weekday}",
                f"weekday_names: [{', '.join(WEEKDAYS)}]",
                f"short_weekday_names: [{', '.join(WEEKDAYS)}]",
                "am_pm_symbols: [AM, PM]",
                'time_format: "{hour:02d}:{minute:02d}"',
                "strings: {}",
            ]
        )
    )
    if expected is None:
        with pytest.raises(LocalizationError):
            load_localization("xx_XX", strings_dir=tmp_path)
    else:
        loaded = load_localization("xx_XX", strings_dir=tmp_path)
        assert loaded.first_weekday == expected
