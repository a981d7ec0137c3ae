"""
Best-effort recovery of date components from note paths.

After the base folder and ``.md`` suffix are removed, the rest of the path is
searched with structural matchers in a fixed order of priority:

1. Week: ``1403-W32``, ``1403W5``, ``1403/W32``
2. Quarter: ``1403-Q3``
3. Generic year/month/day: ``1403-08-15``, ``1403/8/5``, ``1403``

The generic matcher accepts everything the other two do, so it must run last.
Extraction is structural only. The note's pattern does not drive it, so a
path that repeats date fragments (``1403/08/1403-08-15``) may resolve to the
first fragment rather than the full trailing date.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import regex as re

from .components import DateComponents

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".md"


@dataclass
class DateMatcher:
    """A structural path matcher and the handler that builds components."""
    name: str
    regex: re.Pattern
    handler: str  # Name of handler method
    priority: int


class PathDateExtractor:
    """Tries each ``DateMatcher`` against a path, highest priority first."""

    def __init__(self):
        self._matchers = self._compile_matchers()
        self._matchers.sort(key=lambda m: m.priority, reverse=True)

    def _compile_matchers(self) -> List[DateMatcher]:
        return [
            DateMatcher(
                name="week",
                regex=re.compile(r"(\d{4})[/\-]?W(\d{1,2})"),
                handler="handle_week",
                priority=30,
            ),
            DateMatcher(
                name="quarter",
                regex=re.compile(r"(\d{4})[/\-]?Q(\d)"),
                handler="handle_quarter",
                priority=20,
            ),
            DateMatcher(
                name="year_month_day",
                regex=re.compile(r"(\d{4})[/\-]?(\d{1,2})?[/\-]?(\d{1,2})?"),
                handler="handle_year_month_day",
                priority=10,
            ),
        ]

    def extract(self, text: str) -> Optional[DateComponents]:
        for matcher in self._matchers:
            match = matcher.regex.search(text)
            if match:
                logger.debug(f"Path matcher '{matcher.name}' matched: {text}")
                return getattr(self, matcher.handler)(match)
        return None

    def handle_week(self, match) -> DateComponents:
        return DateComponents(year=int(match.group(1)), month=1, week=int(match.group(2)))

    def handle_quarter(self, match) -> DateComponents:
        return DateComponents(year=int(match.group(1)), month=1, quarter=int(match.group(2)))

    def handle_year_month_day(self, match) -> DateComponents:
        month = match.group(2)
        day = match.group(3)
        return DateComponents(
            year=int(match.group(1)),
            month=int(month) if month else 1,
            day=int(day) if day else None,
        )


path_extractor = PathDateExtractor()


def clean_base_path(base_path: str) -> str:
    return base_path.strip().strip("/")


def strip_note_path(file_path: str, base_path: str) -> Optional[str]:
    """
    Remove the base folder and the note extension from ``file_path``.

    Returns None when the file is not inside ``base_path``.
    """
    base = clean_base_path(base_path)
    remainder = file_path
    if base not in ("", "/"):
        prefix = base + "/"
        if not remainder.startswith(prefix):
            return None
        remainder = remainder[len(prefix):]

    if remainder.endswith(NOTE_EXTENSION):
        remainder = remainder[:-len(NOTE_EXTENSION)]
    return remainder


def extract_date(file_path: str, base_path: str) -> Optional[DateComponents]:
    remainder = strip_note_path(file_path, base_path)
    if remainder is None:
        logger.debug(f"'{file_path}' is outside base folder '{base_path}'")
        return None
    return path_extractor.extract(remainder)
