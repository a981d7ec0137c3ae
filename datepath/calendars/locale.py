import logging
from dataclasses import dataclass

import jdatetime

logger = logging.getLogger(__name__)

DIALECTS = ("persian-modern", "english")

PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


@dataclass(frozen=True)
class PersianLocale:
    use_persian_digits: bool
    dialect: str

    @property
    def month_names(self):
        if self.dialect == "english":
            return tuple(jdatetime.date.j_months_en)
        return tuple(jdatetime.date.j_months_fa)

    def digits(self, text: str) -> str:
        if self.use_persian_digits:
            return text.translate(PERSIAN_DIGITS)
        return text


_locale = None


def load_persian(use_persian_digits=False, dialect="persian-modern"):
    """
    Configure the solar calendar locale for the whole process.

    Calling it again replaces the active configuration. Solar formatting
    calls ``ensure_persian_locale`` which loads the defaults when nothing has
    been configured yet.
    """
    global _locale
    if dialect not in DIALECTS:
        raise ValueError(
            "Unknown dialect %r, expected one of %s" % (dialect, ", ".join(DIALECTS))
        )
    _locale = PersianLocale(use_persian_digits=bool(use_persian_digits), dialect=dialect)
    logger.debug(f"Loaded Persian locale: digits={_locale.use_persian_digits}, dialect={dialect}")
    return _locale


def ensure_persian_locale():
    if _locale is None:
        return load_persian()
    return _locale


def reset_persian_locale():
    """Forget the active configuration (used by tests)."""
    global _locale
    _locale = None
