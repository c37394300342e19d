"""Pattern primitives used to compose the name grammars.

All functions here build regular expression source strings; nothing is
compiled or matched. The grammars in name_ml.grammars are assembled from
these pieces and compiled once.

Character classes come in two forms: a bracketed class (UPPER, LOWER, ...)
usable on its own, and the bare members (UPPER_CHARS, ...) which can be
combined into a new class with char_class().
"""
import sys
import unicodedata
from typing import Dict, List, Optional


def _category_members(*categories: str) -> Dict[str, str]:
    """Build character-class members for Unicode general categories.

    All code points are scanned once; no character in Lu or Ll needs
    escaping inside a bracketed class, so members are literal characters.

    Args:
        categories: Unicode general categories, e.g. "Lu", "Ll"

    Returns:
        Class members per category, such as {"Lu": "A-ZÀ-Ö..."}
    """
    ranges: Dict[str, List[List[int]]] = {category: [] for category in categories}
    for code in range(sys.maxunicode + 1):
        category = unicodedata.category(chr(code))
        if category not in ranges:
            continue
        spans = ranges[category]
        if spans and spans[-1][1] == code - 1:
            spans[-1][1] = code
        else:
            spans.append([code, code])

    members = {}
    for category, spans in ranges.items():
        parts = []
        for start, end in spans:
            if start == end:
                parts.append(chr(start))
            elif end == start + 1:
                parts.append(chr(start) + chr(end))
            else:
                parts.append(chr(start) + "-" + chr(end))
        members[category] = "".join(parts)
    return members


_CASE_MEMBERS = _category_members("Lu", "Ll")

UPPER_CHARS = _CASE_MEMBERS["Lu"]
LOWER_CHARS = _CASE_MEMBERS["Ll"]
DIGIT_CHARS = r"\d"
BLANK_CHARS = r"\s_"
HYPHEN_CHARS = r"\-"
PERIOD_CHARS = r"\."


def char_class(*members: str) -> str:
    """Combine class members into a single bracketed character class."""
    return "[" + "".join(members) + "]"


# Uppercase letter
UPPER = char_class(UPPER_CHARS)

# Lowercase letter
LOWER = char_class(LOWER_CHARS)

# Any letter
LETTER = r"[^\W\d_]"

# Digit
DIGIT = r"\d"

# Word boundary
BOUNDARY = r"\b"

# One or more blanks (whitespace or underscore)
BLANK = r"(?:[\s_]++)"

# One or more blanks or commas
BLANK_OR_COMMA = r"[,\s_]++"

# Hyphen
HYPHEN = "-"

# Never matches anything
NEVER = r"(?!)"


def optional(pattern: str) -> str:
    """Zero or one occurrence of pattern."""
    return "(?:" + pattern + ")?"


def optional_repeat(pattern: str) -> str:
    """Zero or more occurrences of pattern, without separator."""
    return "(?:" + pattern + ")*"


def atomic(pattern: str) -> str:
    """Pattern matched once and never re-entered on backtracking."""
    return "(?>" + pattern + ")"


def hyphen_repeat(pattern: str) -> str:
    """One or more occurrences of pattern joined by hyphens."""
    return "(?:" + pattern + HYPHEN + ")*" + pattern


def blank_repeat(pattern: str) -> str:
    """One or more occurrences of pattern joined by blanks."""
    return "(?:" + pattern + BLANK + ")*" + pattern


def alternate(*patterns: str) -> str:
    """Any one of the given patterns."""
    return "(?:" + "|".join(patterns) + ")"


def group(pattern: str, name: Optional[str] = None) -> str:
    """Capturing group around pattern, optionally named.

    Named groups are still numbered, so the match can be read either by
    name or by position.
    """
    if name is None:
        return "(" + pattern + ")"
    return "(?P<" + name + ">" + pattern + ")"


def bounded(pattern: str) -> str:
    """Pattern between word boundaries."""
    return BOUNDARY + pattern + BOUNDARY
