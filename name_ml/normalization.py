"""Canonical string forms for parsed names.

Every function here is pure and deterministic; normalizing an already
normalized generic name or abbreviation returns it unchanged.
"""
import re
from typing import List, Optional

_BLANKS = re.compile(r"[\s_]+")
_NON_WORD = re.compile(r"\W")


def split_blanks(text: str) -> List[str]:
    """Split text on runs of whitespace or underscores.

    Example:
        >>> split_blanks("John  Paul_Miller")
        ['John', 'Paul', 'Miller']
    """
    return [token for token in _BLANKS.split(text) if token]


def normalize_generic(text: str) -> str:
    """Keep letters, digits and underscores; blanks become one underscore.

    Performs the following transformations:
    1. Collapse runs of whitespace/underscores to a single underscore
    2. Strip all other punctuation

    Args:
        text: Input text to normalize

    Returns:
        Normalized text

    Example:
        >>> normalize_generic("Mickey  Mouse!")
        'Mickey_Mouse'
        >>> normalize_generic("U.S. Army")
        'US_Army'
    """
    if text is None:
        return ""
    return _NON_WORD.sub("", _BLANKS.sub("_", text))


def normalize_abbreviation(text: str) -> str:
    """Generic normalization, uppercased.

    Example:
        >>> normalize_abbreviation("p.m.m.")
        'PMM'
    """
    return normalize_generic(text).upper()


def abbreviate_suffix(suffix: Optional[str]) -> Optional[str]:
    """Short form of a generational suffix ("Jr." or "Sr."), if it is one."""
    if not suffix:
        return None
    if suffix[0] in "jJ":
        return "Jr."
    if suffix[0] in "sS":
        return "Sr."
    return None


def format_person_name(
    original: str,
    given_names: Optional[str] = None,
    family_name: Optional[str] = None,
    family_name_suffix: Optional[str] = None,
    roman: Optional[str] = None,
    attribute: Optional[str] = None,
) -> str:
    """Canonical form of a person name.

    With a family name: "[given names ]family name[, Jr.|, Sr.]".
    Without one but with given names: "given names[ roman][ attribute]".
    Otherwise the original string.

    Example:
        >>> format_person_name("John Miller Jr.", "John", "Miller", "Jr.")
        'John Miller, Jr.'
        >>> format_person_name("Elizabeth II", "Elizabeth", roman="II")
        'Elizabeth II'
    """
    if family_name is not None:
        formatted = family_name
        short_suffix = abbreviate_suffix(family_name_suffix)
        if short_suffix is not None:
            formatted += ", " + short_suffix
        if given_names is not None:
            formatted = given_names + " " + formatted
        return formatted

    if given_names is not None:
        parts = [given_names]
        if roman is not None:
            parts.append(roman)
        if attribute is not None:
            parts.append(attribute)
        return " ".join(parts)

    return original
