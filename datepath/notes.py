"""
Periodic notes described by the settings record.

Each note type has a folder and a pattern in the settings; these helpers
feed them, together with the configured calendar, to the path codec.
"""

from enum import Enum
from typing import List, Optional

from .calendars import CalendarBase
from .components import DateComponents
from .conf import apply_settings
from .path_codec import extract_date_from_path, file_matches_date, generate_note_path


class NoteType(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def folder_setting(self) -> str:
        return f"{self.name}_NOTES_FOLDER"

    @property
    def format_setting(self) -> str:
        return f"{self.name}_NOTES_FORMAT"


_GRANULARITY_NOTE_TYPES = {
    "day": NoteType.DAILY,
    "week": NoteType.WEEKLY,
    "quarter": NoteType.QUARTERLY,
    "month": NoteType.MONTHLY,
    "year": NoteType.YEARLY,
}


def note_type_for(components: DateComponents) -> NoteType:
    return _GRANULARITY_NOTE_TYPES[components.granularity]


@apply_settings
def enabled_note_types(settings=None) -> List[NoteType]:
    return [
        note_type for note_type in NoteType
        if note_type is not NoteType.QUARTERLY or settings.ENABLE_QUARTERLY_NOTES
    ]


def _check_enabled(note_type, settings):
    if note_type is NoteType.QUARTERLY and not settings.ENABLE_QUARTERLY_NOTES:
        raise ValueError("Quarterly notes are disabled in settings")


@apply_settings
def note_path(
    note_type: NoteType,
    components: DateComponents,
    calendar: Optional[CalendarBase] = None,
    settings=None,
) -> str:
    """
    Path of the ``note_type`` note for ``components``.

    :raises: ``ValueError`` when quarterly notes are requested but disabled.
    """
    _check_enabled(note_type, settings)
    return generate_note_path(
        getattr(settings, note_type.folder_setting),
        getattr(settings, note_type.format_setting),
        components,
        settings.calendar_kind,
        calendar,
    )


@apply_settings
def note_date(note_type: NoteType, file_path: str, settings=None) -> Optional[DateComponents]:
    return extract_date_from_path(
        file_path,
        getattr(settings, note_type.folder_setting),
        getattr(settings, note_type.format_setting),
        settings.calendar_kind,
    )


@apply_settings
def is_note_for(
    note_type: NoteType,
    file_path: str,
    components: DateComponents,
    calendar: Optional[CalendarBase] = None,
    settings=None,
) -> bool:
    if note_type is NoteType.QUARTERLY and not settings.ENABLE_QUARTERLY_NOTES:
        return False
    return file_matches_date(
        file_path,
        components,
        getattr(settings, note_type.folder_setting),
        getattr(settings, note_type.format_setting),
        settings.calendar_kind,
        calendar,
    )
