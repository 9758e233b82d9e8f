from ..patterns import TimePatternConfig

# "at 7", "from 10 to 11pm"
PRIMARY_PREFIX = r"(?:(?:at|from)\s*)??"

FOLLOWING_PHRASE = r"\s*(?:-|–|~|〜|to|until|through|till)\s*"

TIME_PATTERN_CONFIG = TimePatternConfig(
    primary_prefix=PRIMARY_PREFIX,
    following_phrase=FOLLOWING_PHRASE,
    # "12/25" is a date
    primary_suffix=r"(?!/)(?=\W|$)",
)
