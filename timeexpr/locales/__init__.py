"""
Locale-specific boundary phrases for the time grammars.

Each locale module exposes a ``TIME_PATTERN_CONFIG``. The numeric grammar is
shared, only the phrases around it differ.
"""

from ..patterns import TimePatternConfig
from . import en, fr

TIME_PATTERN_CONFIGS = {
    'en': en.TIME_PATTERN_CONFIG,
    'fr': fr.TIME_PATTERN_CONFIG,
}


def get_available_locales():
    return sorted(TIME_PATTERN_CONFIGS)


def get_time_pattern_config(locale: str) -> TimePatternConfig:
    """
    Look up the configuration for a locale code.

    Region suffixes are ignored, so 'fr-CA' and 'en_GB' resolve to their
    language.
    """
    if not isinstance(locale, str):
        raise TypeError(f"Locale must be a string, got {type(locale).__name__}")

    language = locale.replace('_', '-').split('-')[0].lower()
    try:
        return TIME_PATTERN_CONFIGS[language]
    except KeyError:
        raise ValueError(f"Unknown locale: {locale!r}") from None
