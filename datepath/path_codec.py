"""
Note path generation from date patterns.

Patterns may contain ``/`` to lay notes out in folders, for example:
- ``YYYY-MM-DD``: a flat file per day
- ``YYYY/MM/YYYY-MM-DD``: year and month folders
- ``YYYY/MM-MMMM/YYYY-MM-DD``: year folder, then month number and name
"""

import logging
from typing import Optional, Union

from .calendars import CalendarBase, CalendarDate, get_calendar
from .components import CalendarKind, DateComponents
from .extraction import NOTE_EXTENSION, clean_base_path, extract_date
from .tokens import rewrite_pattern

logger = logging.getLogger(__name__)

DAILY_PATTERN = "YYYY-MM-DD"
WEEKLY_PATTERN = "YYYY-[W]WW"
QUARTERLY_PATTERN = "YYYY-[Q]Q"
MONTHLY_PATTERN = "YYYY-MM"
YEARLY_PATTERN = "YYYY"


def resolve_default_pattern(components: DateComponents) -> str:
    """
    Pick the pattern used when the configured one is empty.

    Day wins over week, week over quarter and quarter over month. A month of
    exactly 1 cannot be told apart from a yearly note and gets the yearly
    pattern.
    """
    if components.day is not None:
        return DAILY_PATTERN
    if components.week is not None:
        return WEEKLY_PATTERN
    if components.quarter is not None:
        return QUARTERLY_PATTERN
    if components.month is not None and components.month != 1:
        return MONTHLY_PATTERN
    return YEARLY_PATTERN


def materialize(components: DateComponents, calendar: CalendarBase) -> CalendarDate:
    if components.day is not None:
        return calendar.from_components(components.year, components.month, components.day)
    if components.week is not None:
        return calendar.from_week(components.year, components.week)
    return calendar.from_components(components.year, components.month or 1, 1)


def format_date_path(
    pattern: str,
    components: DateComponents,
    calendar_kind: Union[CalendarKind, str] = CalendarKind.SOLAR,
    calendar: Optional[CalendarBase] = None,
) -> str:
    """
    Render ``pattern`` for ``components``.

    :param pattern:
        Pattern such as ``YYYY/MM/YYYY-MM-DD``. Empty or blank patterns are
        replaced by :func:`resolve_default_pattern`.
    :param components:
        The date to render, in the target calendar.
    :param calendar_kind:
        ``CalendarKind.SOLAR`` (default) or ``CalendarKind.GREGORIAN``.
    :param calendar:
        Calendar used instead of the default one for ``calendar_kind``.

    :return: The formatted path without extension. It contains ``/`` when the
        pattern does.

    :raises: ``InvalidDateError`` when the calendar rejects the components.
    """
    kind = CalendarKind.coerce(calendar_kind)
    if not pattern or not pattern.strip():
        pattern = resolve_default_pattern(components)
        logger.debug(f"Empty pattern, using default '{pattern}' for {components}")

    if calendar is None:
        calendar = get_calendar(kind)

    date_obj = materialize(components, calendar)
    rewritten = rewrite_pattern(
        pattern,
        kind,
        has_quarter=components.quarter is not None,
        quarter=components.quarter,
    )
    return date_obj.format(rewritten)


def generate_note_path(
    base_path: str,
    pattern: str,
    components: DateComponents,
    calendar_kind: Union[CalendarKind, str] = CalendarKind.SOLAR,
    calendar: Optional[CalendarBase] = None,
) -> str:
    """Build ``<base>/<formatted pattern>.md``, or the bare file when base is empty."""
    base = clean_base_path(base_path)
    # A leading "/" in the pattern would double the separator at the join.
    date_path = format_date_path(pattern, components, calendar_kind, calendar).lstrip("/")

    if base in ("", "/"):
        full_path = date_path
    else:
        full_path = f"{base}/{date_path}"

    if not full_path.endswith(NOTE_EXTENSION):
        full_path += NOTE_EXTENSION
    return full_path


def extract_folder_path(file_path: str) -> str:
    index = file_path.rfind("/")
    if index == -1:
        return ""
    return file_path[:index]


def extract_date_from_path(
    file_path: str,
    base_path: str,
    pattern: Optional[str] = None,
    calendar_kind: Union[CalendarKind, str] = CalendarKind.SOLAR,
) -> Optional[DateComponents]:
    """
    Recover date components from a note path.

    This is a structural, best-effort match (see :mod:`datepath.extraction`).
    ``pattern`` and ``calendar_kind`` are accepted for symmetry with
    :func:`generate_note_path` but do not influence the result.

    :return: ``DateComponents`` or None when the path is outside ``base_path``
        or contains no recognisable date.
    """
    return extract_date(file_path, base_path)


def file_matches_date(
    file_path: str,
    components: DateComponents,
    base_path: str,
    pattern: str,
    calendar_kind: Union[CalendarKind, str] = CalendarKind.SOLAR,
    calendar: Optional[CalendarBase] = None,
) -> bool:
    expected = generate_note_path(base_path, pattern, components, calendar_kind, calendar)
    return file_path == expected
