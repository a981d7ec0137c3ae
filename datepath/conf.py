import logging
from copy import deepcopy
from functools import wraps

from .calendars.locale import DIALECTS, load_persian
from .components import CalendarKind
from .settings import default_settings, record_keys

logger = logging.getLogger(__name__)


class SettingValidationError(ValueError):
    pass


class Settings:
    """Settings for note paths and the solar locale.

    ``Settings()`` holds the defaults from :mod:`datepath.settings`. Pass a
    dict of overrides to ``replace`` (or through ``apply_settings``) to get a
    new object; the defaults object is never modified.
    """

    def __init__(self, settings=None):
        self._mod_settings = dict(settings or {})
        values = deepcopy(default_settings)
        values.update(self._mod_settings)
        self._values = values
        for key, value in values.items():
            setattr(self, key, value)

    def replace(self, mod_settings=None, **kwds):
        updated = dict(self._mod_settings)
        updated.update(mod_settings or {})
        updated.update(kwds)
        return Settings(updated)

    def as_dict(self):
        return dict(self._values)

    @property
    def calendar_kind(self):
        return CalendarKind.coerce(self.CALENDAR)

    def __repr__(self):
        return f"Settings({self._mod_settings!r})"


settings = Settings()


def apply_settings(f):
    """Turn a ``settings`` dict keyword into a ``Settings`` object."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")

        if mod_settings is None:
            kwargs["settings"] = settings
        elif isinstance(mod_settings, Settings):
            pass
        elif isinstance(mod_settings, dict):
            kwargs["settings"] = settings.replace(mod_settings)
        else:
            raise TypeError("settings can only be either dict or instance of Settings class")

        check_settings(kwargs["settings"])
        return f(*args, **kwargs)

    return wrapper


def _check_calendar(value, setting_name):
    try:
        CalendarKind.coerce(value)
    except ValueError:
        raise SettingValidationError(
            '"{}" is not a valid value for "{}", it should be "solar" or "gregorian"'.format(
                value, setting_name
            )
        )


def _check_dialect(value, setting_name):
    if value not in DIALECTS:
        raise SettingValidationError(
            '"{}" is not a valid value for "{}", it should be one of: {}'.format(
                value, setting_name, ", ".join(DIALECTS)
            )
        )


def check_settings(settings):
    """Validate the values changed from the defaults.

    :raises: ``SettingValidationError`` for unknown keys, wrong types or values
        outside the allowed set.
    """
    settings_values = {
        "CALENDAR": {"type": str, "extra_check": _check_calendar},
        "ENABLE_QUARTERLY_NOTES": {"type": bool},
        "PERSIAN_DIGITS": {"type": bool},
        "DIALECT": {"type": str, "extra_check": _check_dialect},
    }
    for key in default_settings:
        if key.endswith("_FOLDER") or key.endswith("_FORMAT"):
            settings_values[key] = {"type": str}

    modified_settings = settings._mod_settings
    for setting_name, setting_value in modified_settings.items():
        if setting_name not in settings_values:
            raise SettingValidationError('"{}" is not a valid setting'.format(setting_name))

        setting_type = type(setting_value)
        expected_type = settings_values[setting_name]["type"]
        if setting_type is not expected_type:
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name, expected_type.__name__, setting_type.__name__
                )
            )

        extra_check = settings_values[setting_name].get("extra_check")
        if extra_check:
            extra_check(setting_value, setting_name)


def settings_from_record(record):
    """Map the host application's settings record onto a ``Settings`` object.

    Keys the record does not know about stay at their defaults; keys this
    package does not use are ignored.
    """
    mod_settings = {}
    for record_key, setting_name in record_keys.items():
        if record_key in record and record[record_key] is not None:
            mod_settings[setting_name] = record[record_key]
    ignored = sorted(set(record) - set(record_keys))
    if ignored:
        logger.debug(f"Ignoring settings record keys: {', '.join(ignored)}")
    result = settings.replace(mod_settings)
    check_settings(result)
    return result


@apply_settings
def configure_locale(settings=None):
    """Load the solar locale described by ``PERSIAN_DIGITS`` and ``DIALECT``."""
    return load_persian(
        use_persian_digits=settings.PERSIAN_DIGITS, dialect=settings.DIALECT
    )
