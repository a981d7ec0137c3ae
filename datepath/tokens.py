"""
Token Rewriter

Turns a user pattern written in the generic token vocabulary into the
calendar-specific format string understood by ``CalendarDate.format``.

Generic vocabulary:
- ``YYYY``: 4-digit year
- ``MMMM``: month name
- ``MM`` / ``M``: padded / unpadded month
- ``DD`` / ``D``: padded / unpadded day
- ``WW``: 2-digit week of year
- ``Q``: quarter digit
- ``[...]``: literal text

For the solar calendar every year/month/day token is prefixed with
``SOLAR_PREFIX``. Rules are applied longest first; a run that has already
been prefixed, or that belongs to a longer run of the same letter, is never
rewritten again.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import regex as re

from .components import CalendarKind

logger = logging.getLogger(__name__)

SOLAR_PREFIX = "s"
WEEK_TOKEN = "ww"


@dataclass(frozen=True)
class TokenRule:
    """One multi-letter rewrite applied to the whole pattern."""
    name: str
    regex: re.Pattern
    replacement: str

    def apply(self, pattern: str) -> str:
        return self.regex.sub(self.replacement, pattern)


def _run_rule(token: str) -> TokenRule:
    letter = re.escape(token[0])
    return TokenRule(
        name=token,
        regex=re.compile(
            r"(?<![%s%s])%s(?!%s)" % (SOLAR_PREFIX, letter, re.escape(token), letter)
        ),
        replacement=SOLAR_PREFIX + token,
    )


# Order matters: MMMM before MM, otherwise "MMMM" turns into two "MM" runs.
SOLAR_RULES: Tuple[TokenRule, ...] = (
    _run_rule("MMMM"),
    _run_rule("YYYY"),
    _run_rule("MM"),
    _run_rule("DD"),
)

SOLAR_SINGLE_TOKENS = ("M", "D")

WEEK_RULE = TokenRule(name="WW", regex=re.compile(r"WW"), replacement=WEEK_TOKEN)


def replace_single_token(text: str, token: str, replacement: str) -> str:
    """
    Replace ``token`` where it stands alone.

    A character counts as a standalone token when it is neither preceded by
    ``SOLAR_PREFIX`` or the same letter nor followed by the same letter.
    """
    result = []
    last = len(text) - 1
    for i, char in enumerate(text):
        if char == token:
            prev_char = text[i - 1] if i > 0 else ""
            next_char = text[i + 1] if i < last else ""
            if prev_char not in (SOLAR_PREFIX, token) and next_char != token:
                result.append(replacement)
                continue
        result.append(char)
    return "".join(result)


def substitute_quarter(text: str, quarter: int) -> str:
    """Replace every ``Q`` outside ``[...]`` runs with the quarter digits."""
    digits = str(quarter)
    result = []
    depth = 0
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        elif char == "Q" and depth == 0:
            result.append(digits)
            continue
        result.append(char)
    return "".join(result)


def rewrite_pattern(
    pattern: str,
    calendar_kind: Union[CalendarKind, str] = CalendarKind.SOLAR,
    has_quarter: bool = False,
    quarter: Optional[int] = None,
) -> str:
    """
    Rewrite a generic pattern for the given calendar.

    Args:
        pattern: Pattern in the generic token vocabulary
        calendar_kind: Target calendar
        has_quarter: Substitute ``Q`` with ``quarter`` when True
        quarter: Quarter value used when ``has_quarter`` is set

    Returns:
        Format string for ``CalendarDate.format``.
    """
    kind = CalendarKind.coerce(calendar_kind)
    rewritten = pattern

    if kind is CalendarKind.SOLAR:
        for rule in SOLAR_RULES:
            rewritten = rule.apply(rewritten)
        for token in SOLAR_SINGLE_TOKENS:
            rewritten = replace_single_token(rewritten, token, SOLAR_PREFIX + token)

    rewritten = WEEK_RULE.apply(rewritten)

    if has_quarter and quarter is not None:
        rewritten = substitute_quarter(rewritten, quarter)

    logger.debug(f"Rewrote pattern '{pattern}' for {kind.value}: '{rewritten}'")
    return rewritten
