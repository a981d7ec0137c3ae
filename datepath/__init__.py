__version__ = "1.0.0"

from .components import CalendarKind, DateComponents
from .tokens import rewrite_pattern
from .calendars import (
    CalendarBase,
    CalendarDate,
    GregorianCalendar,
    InvalidDateError,
    SolarCalendar,
    get_calendar,
)
from .calendars.locale import ensure_persian_locale, load_persian
from .conf import Settings, SettingValidationError, apply_settings, configure_locale, settings_from_record
from .path_codec import (
    extract_date_from_path,
    extract_folder_path,
    file_matches_date,
    format_date_path,
    generate_note_path,
    resolve_default_pattern,
)
from .notes import NoteType, enabled_note_types, is_note_for, note_date, note_path, note_type_for

__all__ = [
    "CalendarBase",
    "CalendarDate",
    "CalendarKind",
    "DateComponents",
    "GregorianCalendar",
    "InvalidDateError",
    "NoteType",
    "SettingValidationError",
    "Settings",
    "SolarCalendar",
    "apply_settings",
    "configure_locale",
    "enabled_note_types",
    "ensure_persian_locale",
    "extract_date_from_path",
    "extract_folder_path",
    "file_matches_date",
    "format_date_path",
    "generate_note_path",
    "get_calendar",
    "is_note_for",
    "load_persian",
    "note_date",
    "note_path",
    "note_type_for",
    "resolve_default_pattern",
    "rewrite_pattern",
    "settings_from_record",
]
