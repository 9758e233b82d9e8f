from typing import Iterable, Mapping, Union

import regex as re


def match_any_pattern(dictionary: Union[Mapping[str, object], Iterable[str]]) -> str:
    """
    Build a non-capturing alternation of the dictionary terms.

    Longer terms come first so "sept." wins over "sep".
    """
    terms = sorted(dictionary, key=len, reverse=True)
    return "(?:%s)" % "|".join(re.escape(term) for term in terms)
