__version__ = "0.1.0"

from datetime import datetime

from tzlocal import get_localzone

from .conf import apply_settings, Settings, SettingValidationError
from .components import Meridiem, TimeComponents, ParseResult
from .patterns import (
    TimePatternConfig,
    RawMatch,
    primary_time_pattern,
    following_time_pattern,
    find_primary_match,
    match_following,
)
from .time_expression_parser import (
    TimeExpressionParser,
    DecodedTime,
    decode_time,
    extract_primary_time_components,
    extract_end_time_components,
)
from .locales import get_time_pattern_config, get_available_locales


def _get_reference(reference, settings):
    if reference is not None:
        return reference
    if settings.RELATIVE_BASE is not None:
        return settings.RELATIVE_BASE
    return datetime.now(get_localzone())


def _get_parser(locale, settings):
    return TimeExpressionParser(
        get_time_pattern_config(locale or settings.LOCALE),
        return_ranges=settings.RETURN_TIME_RANGES,
    )


@apply_settings
def extract_time(text, offset=0, reference=None, locale=None, settings=None):
    """Extract the first time expression at or after ``offset``.

    :param text:
        Free text to scan, e.g. ``"call me at 3:30pm"``.
    :type text: str

    :param offset:
        Position in ``text`` where scanning starts.
    :type offset: int

    :param reference:
        Date used to imply the day, month and year of the result. Defaults to
        the ``RELATIVE_BASE`` setting, then to the current local time.
    :type reference: datetime

    :param locale:
        Locale code such as ``'en'`` or ``'fr'``. Defaults to the ``LOCALE`` setting.
    :type locale: str

    :param settings:
        Configure customized behavior using settings defined in :mod:`timeexpr.conf.Settings`.
    :type settings: dict

    :return: A :class:`ParseResult`, or None when no valid time is found.

    :raises:
        ``TypeError``: text is not a string, ``ValueError``: Unknown locale,
        ``SettingValidationError``: A provided setting is not valid.

    Example usage::

        >>> import timeexpr
        >>> from datetime import datetime
        >>> result = timeexpr.extract_time("10-11pm", reference=datetime(2023, 10, 15))
        >>> result.start.hour, result.end.hour
        (22, 23)
    """
    if not isinstance(text, str):
        raise TypeError(f"Input type must be str, got {type(text).__name__}")

    parser = _get_parser(locale, settings)
    return parser.extract_at(text, offset, _get_reference(reference, settings))


@apply_settings
def search_times(text, reference=None, locale=None, settings=None):
    """Extract every non-overlapping time expression in ``text``.

    Takes the same arguments as :func:`extract_time` and returns a list of
    :class:`ParseResult`, ordered by position.
    """
    if not isinstance(text, str):
        raise TypeError(f"Input type must be str, got {type(text).__name__}")

    parser = _get_parser(locale, settings)
    return parser.execute(text, _get_reference(reference, settings))
