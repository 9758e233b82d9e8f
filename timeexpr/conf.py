import hashlib
from datetime import datetime
from functools import wraps

from .locales import get_available_locales, get_time_pattern_config

DEFAULT_SETTINGS = {
    # Reference date for implied day/month/year. None means "now".
    "RELATIVE_BASE": None,
    "LOCALE": "en",
    # Extend "10" in "10-11pm" into a range
    "RETURN_TIME_RANGES": True,
}


class SettingValidationError(ValueError):
    pass


class Settings:
    """Control and configure default parsing behavior of timeexpr.

    Currently supported settings:
    * `RELATIVE_BASE`
    * `LOCALE`
    * `RETURN_TIME_RANGES`
    """

    _default = True
    _mod_settings = dict()

    def __init__(self, settings=None):
        if settings:
            self._updateall(settings.items())
        else:
            self._updateall(DEFAULT_SETTINGS.items())

    @classmethod
    def get_key(cls, settings=None):
        if not settings:
            return "default"

        keys = sorted(["%s-%s" % (key, str(settings[key])) for key in settings])
        return hashlib.md5("".join(keys).encode("utf-8")).hexdigest()

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def replace(self, mod_settings=None):
        unknown = set(mod_settings or {}) - set(DEFAULT_SETTINGS)
        if unknown:
            raise SettingValidationError(
                '"{}" is not a valid setting'.format(sorted(unknown)[0])
            )

        kwds = {key: getattr(self, key) for key in DEFAULT_SETTINGS}
        if mod_settings:
            kwds.update(mod_settings)
        kwds["_default"] = False

        key = self.get_key(kwds)
        if key not in self._mod_settings:
            new_settings = Settings(settings=kwds)
            check_settings(new_settings)
            self._mod_settings[key] = new_settings

        return self._mod_settings[key]


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")

        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(mod_settings=mod_settings)

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        return f(*args, **kwargs)

    return wrapper


def check_settings(settings):
    """
    Check if provided settings are valid, if not it raises `SettingValidationError`.
    """
    settings_types = {
        "RELATIVE_BASE": (datetime, type(None)),
        "LOCALE": (str,),
        "RETURN_TIME_RANGES": (bool,),
    }

    for setting_name, expected_types in settings_types.items():
        setting_value = getattr(settings, setting_name)
        if not isinstance(setting_value, expected_types):
            raise SettingValidationError(
                '"{}" must be {}, not "{}".'.format(
                    setting_name,
                    " or ".join(t.__name__ for t in expected_types),
                    type(setting_value).__name__,
                )
            )

    try:
        get_time_pattern_config(settings.LOCALE)
    except ValueError:
        raise SettingValidationError(
            '"LOCALE" must be one of {}, not "{}".'.format(
                ", ".join(get_available_locales()), settings.LOCALE
            )
        ) from None
