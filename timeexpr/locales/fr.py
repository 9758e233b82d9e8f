"""
French time phrases and word dictionaries.

The dictionaries follow the same pattern-plus-lookup shape in every locale:
an alternation regex built from the keys, and a decoder mapping matched text
back to a value.
"""

from typing import Dict, Union

import regex as re

from ..patterns import TimePatternConfig
from ..utils import match_any_pattern

# "à 10h", "a 9:30"
PRIMARY_PREFIX = r"(?:(?:[àa])\s*)?"

FOLLOWING_PHRASE = r"\s*(?:-|–|~|〜|[àa])\s*"

TIME_PATTERN_CONFIG = TimePatternConfig(
    primary_prefix=PRIMARY_PREFIX,
    following_phrase=FOLLOWING_PHRASE,
)


WEEKDAY_DICTIONARY: Dict[str, int] = {
    "dimanche": 0,
    "dim": 0,
    "lundi": 1,
    "lun": 1,
    "mardi": 2,
    "mar": 2,
    "mercredi": 3,
    "mer": 3,
    "jeudi": 4,
    "jeu": 4,
    "vendredi": 5,
    "ven": 5,
    "samedi": 6,
    "sam": 6,
}

MONTH_DICTIONARY: Dict[str, int] = {
    "janvier": 1,
    "jan": 1,
    "jan.": 1,
    "février": 2,
    "fév": 2,
    "fév.": 2,
    "fevrier": 2,
    "fev": 2,
    "fev.": 2,
    "mars": 3,
    "mar": 3,
    "mar.": 3,
    "avril": 4,
    "avr": 4,
    "avr.": 4,
    "mai": 5,
    "juin": 6,
    "jun": 6,
    "juillet": 7,
    "jul": 7,
    "jul.": 7,
    "août": 8,
    "aout": 8,
    "septembre": 9,
    "sep": 9,
    "sep.": 9,
    "sept": 9,
    "sept.": 9,
    "octobre": 10,
    "oct": 10,
    "oct.": 10,
    "novembre": 11,
    "nov": 11,
    "nov.": 11,
    "décembre": 12,
    "decembre": 12,
    "dec": 12,
    "dec.": 12,
}

INTEGER_WORD_DICTIONARY: Dict[str, int] = {
    "un": 1,
    "deux": 2,
    "trois": 3,
    "quatre": 4,
    "cinq": 5,
    "six": 6,
    "sept": 7,
    "huit": 8,
    "neuf": 9,
    "dix": 10,
    "onze": 11,
    "douze": 12,
    "treize": 13,
}

TIME_UNIT_DICTIONARY: Dict[str, str] = {
    "sec": "second",
    "seconde": "second",
    "secondes": "second",
    "min": "minute",
    "mins": "minute",
    "minute": "minute",
    "minutes": "minute",
    "h": "hour",
    "hr": "hour",
    "hrs": "hour",
    "heure": "hour",
    "heures": "hour",
    "jour": "day",
    "jours": "day",
    "semaine": "week",
    "semaines": "week",
    "mois": "month",
    "année": "year",
    "années": "year",
}


# =============================================================================
# Numbers
# =============================================================================

NUMBER_PATTERN = (
    r"(?:%s|[0-9]+|[0-9]+\.[0-9]+|half(?:\s*an?)?|an?(?:\s*few)?|few)"
    % match_any_pattern(INTEGER_WORD_DICTIONARY)
)


def parse_number_pattern(match: str) -> float:
    num = match.lower()
    if num in INTEGER_WORD_DICTIONARY:
        return INTEGER_WORD_DICTIONARY[num]
    elif num in ("a", "an"):
        return 1
    elif "few" in num:
        return 3
    elif "half" in num:
        return 0.5

    return float(num)


ORDINAL_NUMBER_PATTERN = r"(?:[0-9]{1,2}(?:st|nd|rd|th)?)"


def parse_ordinal_number_pattern(match: str) -> int:
    num = re.sub(r"(?:st|nd|rd|th)$", "", match.lower())
    return int(num)


# =============================================================================
# Years
# =============================================================================

YEAR_PATTERN = r"(?:[1-9][0-9]{0,3}\s*(?:BE|AD|BC)|[1-2][0-9]{3}|[5-9][0-9])"


def parse_year(match: str) -> int:
    """
    Decode a year, including era suffixes.

    Two-digit years above 50 are read as 19xx, the rest as 20xx.
    """
    if re.search(r"BE", match, re.I):
        # Buddhist Era
        return int(re.sub(r"BE", "", match, flags=re.I)) - 543

    if re.search(r"BC", match, re.I):
        return -int(re.sub(r"BC", "", match, flags=re.I))

    if re.search(r"AD", match, re.I):
        return int(re.sub(r"AD", "", match, flags=re.I))

    year = int(match)
    if year < 100:
        year += 1900 if year > 50 else 2000
    return year


# =============================================================================
# Time units ("3 heures 20 min")
# =============================================================================

SINGLE_TIME_UNIT_PATTERN = r"(%s)\s*(%s)\s*" % (NUMBER_PATTERN, match_any_pattern(TIME_UNIT_DICTIONARY))
SINGLE_TIME_UNIT_REGEX = re.compile(SINGLE_TIME_UNIT_PATTERN, re.I)

TIME_UNITS_PATTERN = r"(?:%s)+" % re.sub(r"\((?!\?)", "(?:", SINGLE_TIME_UNIT_PATTERN)


def parse_time_units(text: str) -> Dict[str, Union[int, float]]:
    """Collect ``{unit: amount}`` from consecutive "<number> <unit>" fragments."""
    fragments = {}
    remaining = text
    match = SINGLE_TIME_UNIT_REGEX.search(remaining)
    while match:
        unit = TIME_UNIT_DICTIONARY[match.group(2).lower()]
        fragments[unit] = parse_number_pattern(match.group(1))
        remaining = remaining[match.end():]
        match = SINGLE_TIME_UNIT_REGEX.search(remaining)
    return fragments
