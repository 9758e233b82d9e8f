"""
Time Expression Extraction

Decodes matches of the primary and following grammars into
``TimeComponents``:

1. The primary match ("10", "3:30pm", "1530") becomes the start components.
2. The text directly after it is matched with the following grammar
   ("-11pm", " to 17:00"). When that succeeds the result becomes a range:
   the end meridiem may be propagated back into the start ("10-11pm" is
   22:00-23:00) and an end before the start rolls over to the next day
   ("11pm-1am").

Malformed input never raises. A bad primary match yields ``None`` and the
scanner resumes after it; a bad range continuation is dropped and the
start-only result is kept.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import List, Optional

import regex as re
from dateutil.relativedelta import relativedelta

from .components import Meridiem, ParseResult, TimeComponents
from .patterns import (
    RawMatch,
    TimePatternConfig,
    find_primary_match,
    following_time_pattern,
    match_following,
    primary_time_pattern,
)

logger = logging.getLogger(__name__)

# "14:30 -0500" continues with a UTC offset, not a second time
TIMEZONE_OFFSET_PATTERN = re.compile(r"^\s*([+-])\s*\d{3,4}$")


@dataclass(frozen=True)
class DecodedTime:
    """Validated clock values of a single match."""
    hour: int
    minute: int
    meridiem: Meridiem
    meridiem_certain: bool
    second: Optional[int] = None
    millisecond: Optional[int] = None


def decode_time(match: RawMatch) -> Optional[DecodedTime]:
    """
    Decode and validate the clock captures of a match.

    Shared by the primary and the range-end paths. Returns None when the
    digits cannot be a time of day.
    """
    hour = int(match.hour)
    minute = 0

    # ----- Minutes
    if match.minute is not None:
        minute = int(match.minute)
    elif hour > 100:
        # Packed "HMM" / "HHMM"
        minute = hour % 100
        hour = hour // 100

    if minute >= 60 or hour > 24:
        logger.debug(f"Rejecting '{match.text}': hour={hour} minute={minute} out of range")
        return None

    meridiem = Meridiem.PM if hour >= 12 else Meridiem.AM
    meridiem_certain = False

    # ----- AM & PM
    if match.meridiem is not None:
        if hour > 12:
            logger.debug(f"Rejecting '{match.text}': {match.meridiem} after 24-hour value {hour}")
            return None

        if match.meridiem[0].lower() == 'a':
            meridiem = Meridiem.AM
            if hour == 12:
                hour = 0
        else:
            meridiem = Meridiem.PM
            if hour != 12:
                hour += 12
        meridiem_certain = True

    # ----- Millisecond
    millisecond = None
    if match.fraction is not None:
        millisecond = int(match.fraction[:3])
        if millisecond >= 1000:
            logger.debug(f"Rejecting '{match.text}': millisecond={millisecond} out of range")
            return None

    # ----- Second
    second = None
    if match.second is not None:
        second = int(match.second)
        if second >= 60:
            logger.debug(f"Rejecting '{match.text}': second={second} out of range")
            return None

    return DecodedTime(
        hour=hour,
        minute=minute,
        meridiem=meridiem,
        meridiem_certain=meridiem_certain,
        second=second,
        millisecond=millisecond,
    )


def _apply_time(components: TimeComponents, decoded: DecodedTime) -> None:
    components.assign('hour', decoded.hour)
    components.assign('minute', decoded.minute)

    if decoded.meridiem_certain:
        components.assign('meridiem', decoded.meridiem)
    else:
        components.imply('meridiem', decoded.meridiem)

    if decoded.millisecond is not None:
        components.assign('millisecond', decoded.millisecond)

    if decoded.second is not None:
        components.assign('second', decoded.second)


def extract_primary_time_components(
    match: RawMatch,
    components: Optional[TimeComponents] = None,
    reference: Optional[datetime] = None,
) -> Optional[TimeComponents]:
    """
    Decode a primary match into time components.

    Args:
        match: Primary grammar match
        components: Existing components to decode onto. They are copied, never
            mutated.
        reference: Used to imply day, month and year when ``components`` is
            not given

    Returns:
        New components, or None when the match is not a valid time.
    """
    decoded = decode_time(match)
    if decoded is None:
        return None

    if components is None:
        components = TimeComponents(reference)
    else:
        components = components.copy()

    _apply_time(components, decoded)
    return components


def _propagate_meridiem(start: TimeComponents, meridiem: Meridiem) -> None:
    hour = start.hour
    if hour > 12:
        # 24-hour start, e.g. "14:00-3pm"
        return

    start.imply('meridiem', meridiem)
    if meridiem == Meridiem.AM:
        if hour == 12:
            start.assign('hour', 0)
    elif hour != 12:
        start.assign('hour', hour + 12)


def _imply_calendar_day(components: TimeComponents, day: date) -> None:
    components.imply('day', day.day)
    components.imply('month', day.month)
    components.imply('year', day.year)


def _roll_over(start: TimeComponents, end: TimeComponents) -> None:
    start_instant = start.date()
    if end.date() >= start_instant:
        return

    # "24:30" already sits on the following calendar day
    _imply_calendar_day(end, start_instant.date())
    if end.date() < start_instant:
        _imply_calendar_day(end, start_instant.date() + relativedelta(days=1))


def extract_end_time_components(result: ParseResult, match: RawMatch) -> Optional[ParseResult]:
    """
    Extend a start-only result with the range end in ``match``.

    Returns a new result, or None when ``match`` is not a usable range end
    (a timezone offset or an invalid time). ``result`` is never modified.
    """
    if TIMEZONE_OFFSET_PATTERN.match(match.text):
        logger.debug(f"Ignoring '{match.text}' after '{result.text}': looks like a timezone offset")
        return None

    decoded = decode_time(match)
    if decoded is None:
        logger.debug(f"Dropping range end '{match.text}' after '{result.text}'")
        return None

    start = result.start.copy()
    end = start.without_time()
    _apply_time(end, decoded)

    if decoded.meridiem_certain:
        if not start.is_certain('meridiem'):
            # "10-11pm"
            _propagate_meridiem(start, decoded.meridiem)
    else:
        start_at_pm = start.is_certain('meridiem') and start.meridiem == Meridiem.PM
        if start_at_pm and start.hour > decoded.hour and decoded.hour < 12:
            # "10pm-1"
            end.imply('meridiem', Meridiem.AM)
        elif decoded.hour > 12:
            end.imply('meridiem', Meridiem.PM)

    try:
        _roll_over(start, end)
    except OverflowError:
        logger.debug(f"Dropping range end '{match.text}' after '{result.text}': next day out of range")
        return None

    if end.date() < start.date():
        logger.debug(f"Dropping range end '{match.text}' after '{result.text}': ends before it starts")
        return None

    return replace(result, text=result.text + match.text, start=start, end=end)


class TimeExpressionParser:
    """
    Extracts time expressions for one locale/style.

    Examples:
        >>> from timeexpr.locales import get_time_pattern_config
        >>> parser = TimeExpressionParser(get_time_pattern_config('en'))
        >>> result = parser.extract_at("meet 10-11pm", 0, datetime(2023, 10, 15))
        >>> result.text, result.start.hour, result.end.hour
        ('10-11pm', 22, 23)
    """

    def __init__(self, config: TimePatternConfig, return_ranges: bool = True):
        self.config = config
        self.return_ranges = return_ranges

    def pattern(self) -> re.Pattern:
        return primary_time_pattern(self.config.primary_prefix, self.config.primary_suffix)

    def following_pattern(self) -> re.Pattern:
        return following_time_pattern(self.config.following_phrase, self.config.following_suffix)

    def extract(self, text: str, match: RawMatch, reference: datetime) -> Optional[ParseResult]:
        """Build a result from a primary match, extending it to a range if possible."""
        start = extract_primary_time_components(match, reference=reference)
        if start is None:
            return None

        lead = len(match.lead)
        result = ParseResult(
            index=match.index + lead,
            text=match.text[lead:],
            start=start,
            reference=reference,
        )

        if not self.return_ranges:
            return result

        following = match_following(self.following_pattern(), text, match.end_index)
        if following is None:
            return result

        extended = extract_end_time_components(result, following)
        return extended if extended is not None else result

    def extract_at(self, text: str, offset: int, reference: datetime) -> Optional[ParseResult]:
        """First time expression at or after ``offset``, skipping malformed matches."""
        pattern = self.pattern()
        while offset <= len(text):
            match = find_primary_match(pattern, text, offset)
            if match is None:
                return None

            result = self.extract(text, match, reference)
            if result is not None:
                return result

            offset = match.end_index
        return None

    def execute(self, text: str, reference: datetime) -> List[ParseResult]:
        """All non-overlapping time expressions in ``text``, left to right."""
        results = []
        offset = 0
        while True:
            result = self.extract_at(text, offset, reference)
            if result is None:
                break
            results.append(result)
            offset = result.end_index
        return results
