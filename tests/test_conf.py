"""
Tests for settings defaults, validation and the host record loader.
"""

import pytest

from datepath import Settings, SettingValidationError, apply_settings, configure_locale, settings_from_record
from datepath.calendars.locale import ensure_persian_locale
from datepath.components import CalendarKind
from datepath.conf import check_settings


@apply_settings
def echo_settings(settings=None):
    return settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.CALENDAR == "solar"
        assert settings.DAILY_NOTES_FORMAT == "YYYY-MM-DD"
        assert settings.ENABLE_QUARTERLY_NOTES is True
        assert settings.calendar_kind is CalendarKind.SOLAR

    def test_replace_keeps_original(self):
        settings = Settings()
        updated = settings.replace({"CALENDAR": "gregorian"})
        assert updated.calendar_kind is CalendarKind.GREGORIAN
        assert settings.CALENDAR == "solar"

    def test_replace_keywords(self):
        updated = Settings({"DAILY_NOTES_FOLDER": "daily"}).replace(DIALECT="english")
        assert updated.DAILY_NOTES_FOLDER == "daily"
        assert updated.DIALECT == "english"


class TestApplySettings:

    def test_default_object(self):
        assert echo_settings().CALENDAR == "solar"

    def test_dict_is_merged(self):
        result = echo_settings(settings={"WEEKLY_NOTES_FOLDER": "weekly"})
        assert isinstance(result, Settings)
        assert result.WEEKLY_NOTES_FOLDER == "weekly"
        assert result.DAILY_NOTES_FORMAT == "YYYY-MM-DD"

    def test_settings_object_passes_through(self):
        settings = Settings({"CALENDAR": "gregorian"})
        assert echo_settings(settings=settings) is settings

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            echo_settings(settings=["CALENDAR"])


class TestCheckSettings:

    def test_unknown_setting(self):
        with pytest.raises(SettingValidationError, match="not a valid setting"):
            check_settings(Settings({"NOPE": 1}))

    def test_wrong_value_type(self):
        with pytest.raises(SettingValidationError, match="must be"):
            check_settings(Settings({"ENABLE_QUARTERLY_NOTES": "yes"}))

    def test_bad_calendar(self):
        with pytest.raises(SettingValidationError):
            check_settings(Settings({"CALENDAR": "lunar"}))

    def test_bad_dialect(self):
        with pytest.raises(SettingValidationError):
            echo_settings(settings={"DIALECT": "klingon"})

    def test_folder_must_be_string(self):
        with pytest.raises(SettingValidationError):
            check_settings(Settings({"DAILY_NOTES_FOLDER": None}))


class TestSettingsFromRecord:

    def test_host_record(self):
        record = {
            "dateFormat": "georgian",
            "dailyNotesFolderPath": "Daily",
            "dailyNotesFormat": "YYYY/MM/YYYY-MM-DD",
            "enableQuarterlyNotes": False,
            "showHolidays": True,
            "timeoutDuration": 1250,
        }
        settings = settings_from_record(record)
        assert settings.calendar_kind is CalendarKind.GREGORIAN
        assert settings.DAILY_NOTES_FOLDER == "Daily"
        assert settings.DAILY_NOTES_FORMAT == "YYYY/MM/YYYY-MM-DD"
        assert settings.ENABLE_QUARTERLY_NOTES is False
        assert settings.WEEKLY_NOTES_FORMAT == "YYYY-[W]WW"

    def test_persian_record(self):
        assert settings_from_record({"dateFormat": "persian"}).calendar_kind is CalendarKind.SOLAR

    def test_missing_values_keep_defaults(self):
        settings = settings_from_record({"dailyNotesFolderPath": None})
        assert settings.DAILY_NOTES_FOLDER == ""

    def test_invalid_record(self):
        with pytest.raises(SettingValidationError):
            settings_from_record({"enableQuarterlyNotes": "no"})


def test_configure_locale():
    configure_locale(settings={"PERSIAN_DIGITS": True, "DIALECT": "english"})
    locale = ensure_persian_locale()
    assert locale.use_persian_digits is True
    assert locale.dialect == "english"
