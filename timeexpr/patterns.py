"""
Time Expression Grammars

Two grammars share one numeric/meridiem body:

- primary: a time at a word boundary, e.g. "at 3:30pm", "T14:05:09.120"
- following: a range continuation matched directly after a primary match,
  e.g. "-11pm", " to 17:00"

Only the boundary phrases vary per locale, so they are passed in through
``TimePatternConfig`` and every variant reuses the same decoder.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import regex as re

DEFAULT_SUFFIX = r"(?=\W|$)"

_MERIDIEM = r"(?:\s*(?P<meridiem>a\.m\.|p\.m\.|am?|pm?))?"

_CLOCK_DIGITS = (
    r"(?P<hour>\d{1,4})"
    r"(?:"
    r"[.:：](?P<minute>\d{1,2})"
    r"(?:"
    r"[:：](?P<second>\d{2})(?:\.(?P<fraction>\d{1,6}))?"
    r")?"
    r")?"
)


@dataclass(frozen=True)
class TimePatternConfig:
    """Boundary phrases for one locale or style."""
    primary_prefix: str
    following_phrase: str
    primary_suffix: str = DEFAULT_SUFFIX
    following_suffix: str = DEFAULT_SUFFIX


@dataclass(frozen=True)
class RawMatch:
    """
    Captures of one grammar match.

    ``index`` and ``text`` cover the whole match, ``lead`` is the boundary
    character (primary) or the range phrase (following).
    """
    index: int
    text: str
    lead: str
    hour: str
    minute: Optional[str] = None
    second: Optional[str] = None
    fraction: Optional[str] = None
    meridiem: Optional[str] = None

    @property
    def end_index(self) -> int:
        return self.index + len(self.text)


@lru_cache(maxsize=None)
def primary_time_pattern(primary_prefix: str, primary_suffix: str = DEFAULT_SUFFIX) -> re.Pattern:
    return re.compile(
        r"(?P<lead>^|\s|T)"
        + primary_prefix
        + _CLOCK_DIGITS
        + _MERIDIEM
        + primary_suffix,
        re.IGNORECASE,
    )


@lru_cache(maxsize=None)
def following_time_pattern(following_phrase: str, following_suffix: str = DEFAULT_SUFFIX) -> re.Pattern:
    return re.compile(
        r"^(?P<lead>" + following_phrase + r")"
        + _CLOCK_DIGITS
        + _MERIDIEM
        + following_suffix,
        re.IGNORECASE,
    )


def _to_raw_match(match, offset: int) -> RawMatch:
    return RawMatch(
        index=offset + match.start(),
        text=match.group(0),
        lead=match.group('lead'),
        hour=match.group('hour'),
        minute=match.group('minute'),
        second=match.group('second'),
        fraction=match.group('fraction'),
        meridiem=match.group('meridiem'),
    )


def find_primary_match(pattern: re.Pattern, text: str, offset: int = 0) -> Optional[RawMatch]:
    """Find the first primary match at or after ``offset``.

    The search runs on the remaining text, so start-of-text anchors at
    ``offset``.
    """
    match = pattern.search(text[offset:])
    if not match:
        return None
    return _to_raw_match(match, offset)


def match_following(pattern: re.Pattern, text: str, offset: int) -> Optional[RawMatch]:
    """Match a following expression starting exactly at ``offset``."""
    match = pattern.match(text[offset:])
    if not match:
        return None
    return _to_raw_match(match, offset)
