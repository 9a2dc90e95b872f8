# namefully/constants.py
from __future__ import annotations

VERSION = "2.0.0"

# Arity of list/map inputs (prefix, first, middle, last, suffix)
MIN_NUMBER_OF_NAME_PARTS = 2
MAX_NUMBER_OF_NAME_PARTS = 5

# Shortest accepted token, after trimming
MIN_NAME_LENGTH = 2

# Placeholder for the empty slots of a mononym
ZERO_WIDTH_SPACE = "\u200b"

# Characters accepted by Namefully.format(); "$" escapes the next one
ALLOWED_FORMAT_TOKENS = frozenset(". ,-_bBfFlLmMoOpPsS$")

# Whole-pattern shortcuts understood by Namefully.format()
FORMAT_KEYWORDS = ("short", "long", "public", "official")
