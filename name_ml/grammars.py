"""Category grammars for names.

Each category has a lax grammar (anything structurally plausible, answers
"could this be X?") and a safe grammar (only reliable shapes, answers "is
this X?"). Grammars for titles and person names depend on the language's
title vocabulary; all others are language-independent.

Example:
    >>> ABBREVIATION.is_match("PMM")
    True
    >>> COMPANY.could_match("Acme & Co.")
    True
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, Optional

from name_ml.languages import Language
from name_ml.lexicon import Lexicon, LexiconStore, build_title_pattern
from name_ml.patterns import (
    BLANK,
    BLANK_CHARS,
    BLANK_OR_COMMA,
    BOUNDARY,
    DIGIT_CHARS,
    HYPHEN,
    HYPHEN_CHARS,
    LOWER,
    LOWER_CHARS,
    NEVER,
    PERIOD_CHARS,
    UPPER,
    UPPER_CHARS,
    alternate,
    atomic,
    blank_repeat,
    bounded,
    char_class,
    group,
    hyphen_repeat,
    optional,
    optional_repeat,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Fixed vocabularies
# -----------------------------------------------------------------------------

# Roman numerals (as in "Elizabeth II")
ROMAN = bounded("[XIV]++")

# English "of" (as in "Fabian of Saarbruecken")
OF = bounded("of")

# Nobiliary and locative particles preceding a family name, listed so that
# multi-word variants are tried before their one-word heads
FAMILY_NAME_PREFIX = alternate(
    "[dD]e las",
    "[dD]e los",
    "[dD]e la",
    "[vV][oa]n de[rnm]",
    "[dD]el",
    "[dD][ea]",
    "[dD]i",
    "[dD]o",
    "[dD]'",
    "[aA]l",
    "[aA]m",
    "[bB]in",
    "[zZ]u[mr]",
    "[vV][oa][nm]",
)

# Particles glued to the family name itself (as in "McDonald", "O'Brien")
DIRECT_PREFIX = alternate("al-", "Mc", "Mac", "Di", "De", "O'")
DIRECT_FAMILY_NAME_PREFIX = BOUNDARY + DIRECT_PREFIX + optional(BLANK)

# Epithet markers (as in "Alexander the Great")
ATTRIBUTE_PREFIX = alternate("the", "der", "die", "il", "la", "le")

# Generational and honorific suffixes, including British orders of merit
FAMILY_NAME_SUFFIX = alternate(
    r"[jJ]r\.?",
    "[jJ]unior",
    r"[sS]r\.?",
    "[sS]enior",
    "hijo",
    "hija",
    r"P[hH]\.?[dD]\.?",
    r"M\.?D\.",
    "CBE",  # Commander
    "DBE",  # Knight or Dame Commander
    "GBE",  # Knight or Dame Grand Cross
    "KBE",  # Knight Commander
    "MBE",  # Member
    "OBE",  # Officer
)

# Legal-entity markers; see http://en.wikipedia.org/wiki/Types_of_business_entity
COMPANY_NAME_SUFFIX = alternate(
    "&" + optional(BLANK) + r"[cC][oO]\.",
    "&" + optional(BLANK) + r"[cC][oO]\b",
    r"[cC][oO]\.",
    r"[cC][oO]\b",
    r"\b[cC]orporation\b",
    r"\b[cC][oO][rR][pP]\.",
    r"\b[cC][oO][rR][pP]\b",
    r"\b[iI]ncorporated\b",
    r"\b[iI]ncorporation\b",
    r"\b[iI]ncorp\.",
    r"\b[iI]ncorp\b",
    r"\b[iI][nN][cC]\.",
    r"\b[iI][nN][cC]\b",
    r"\b[lL]imited\b",
    r"\b[lL][tT][dD]\.",
    r"\b[lL][tT][dD]\b",
    r"\b[pP]\.[lL]\.[cC]\.",
    r"\b[pP][lL][cC]\b",
    r"\bPty\.",
    r"\bLLC\b",
    r"\bLLP\b",
    r"\bGmbH\b",
    r"\bAG\b",
    r"\bKG\b",
    r"\bOHG\b",
    r"\bS\.R\.L\.",
    r"\bS\.p\.A\.",
    r"\bS\.A\.",
)

# Prepositions allowed between safe names ("Bank of England")
PREPOSITION = alternate("on", "of", "for")

# -----------------------------------------------------------------------------
# Generic names
# -----------------------------------------------------------------------------

# Practically everything is a name if it starts with an uppercase letter
LAX_NAME = BOUNDARY + UPPER + ".*" + BOUNDARY

# An uppercase letter followed by at least two letters, digits or hyphenated parts
SAFE_NAME = (
    BOUNDARY + UPPER
    + alternate(HYPHEN + char_class(UPPER_CHARS, DIGIT_CHARS), char_class(UPPER_CHARS, LOWER_CHARS, DIGIT_CHARS))
    + "{2,}" + BOUNDARY
)

SAFE_NAMES = SAFE_NAME + optional_repeat(BLANK + optional(PREPOSITION + BLANK) + SAFE_NAME)

SAFE_NAMES_NO_PREPOSITION = SAFE_NAME + optional_repeat(BLANK + SAFE_NAME)

# -----------------------------------------------------------------------------
# Abbreviations
# -----------------------------------------------------------------------------

# Periods are admitted in the lax class as well so that every safe
# abbreviation is also a lax one
LAX_ABBREVIATION = (
    BOUNDARY + UPPER + char_class(UPPER_CHARS, DIGIT_CHARS, BLANK_CHARS, HYPHEN_CHARS, PERIOD_CHARS) + "+" + BOUNDARY
)

SAFE_ABBREVIATION = BOUNDARY + UPPER + char_class(UPPER_CHARS, DIGIT_CHARS, HYPHEN_CHARS, PERIOD_CHARS) + "+" + BOUNDARY

# -----------------------------------------------------------------------------
# Companies
# -----------------------------------------------------------------------------

LAX_COMPANY = group(LAX_NAME, "name") + BLANK_OR_COMMA + group(COMPANY_NAME_SUFFIX, "suffix")

SAFE_COMPANY = (
    group(
        SAFE_NAMES_NO_PREPOSITION
        + optional(optional(BLANK) + "&" + optional(BLANK) + SAFE_NAMES_NO_PREPOSITION),
        "name",
    )
    + BLANK_OR_COMMA
    + group(COMPANY_NAME_SUFFIX, "suffix")
)

# -----------------------------------------------------------------------------
# Person names
# -----------------------------------------------------------------------------

# "Name"
PERSON_NAME_COMPONENT = UPPER + LOWER + "+"

# "Name", "N." or "N"
GIVEN_NAME_COMPONENT = alternate(PERSON_NAME_COMPONENT + BOUNDARY, UPPER + LOWER + r"*+\.", UPPER + BOUNDARY)

# "Name[-Name]"
GIVEN_NAME = BOUNDARY + hyphen_repeat(GIVEN_NAME_COMPONENT)

# "Name[ Name]*"
GIVEN_NAMES = blank_repeat(GIVEN_NAME)

# "[Mc]Name[-[Mc]Name]"
FAMILY_NAME = BOUNDARY + hyphen_repeat(optional(DIRECT_FAMILY_NAME_PREFIX) + PERSON_NAME_COMPONENT) + BOUNDARY

# 'Nickname'
NICKNAME = "'[^']+'"

# "J."
INITIAL = UPPER + r"\."


def lax_person_pattern(title: str) -> str:
    """Pattern for strings that could be person names.

    Every optional component is captured into its own named group.

    Args:
        title: Title pattern of the language

    Returns:
        Pattern source
    """
    return (
        group(atomic(optional_repeat(title + BLANK)), "titles")
        + group(optional_repeat(GIVEN_NAME + BLANK), "given_names")
        + optional(group(NICKNAME, "nickname") + BLANK)
        + optional(group(ATTRIBUTE_PREFIX, "attribute_prefix") + BLANK)
        + optional(group(FAMILY_NAME_PREFIX, "family_name_prefix") + BLANK)
        + group(FAMILY_NAME, "family_name")
        + optional(BLANK_OR_COMMA + group(FAMILY_NAME_SUFFIX, "family_name_suffix"))
        + optional(BLANK + group(ROMAN, "roman"))
        + optional(BLANK + OF + BLANK + group(PERSON_NAME_COMPONENT, "city"))
        + optional(BLANK + group(NICKNAME, "trailing_nickname"))
    )


def safe_person_pattern(title: str) -> str:
    """Pattern for strings that are person names with high probability.

    Args:
        title: Title pattern of the language

    Returns:
        Pattern source
    """
    prefixed_family_name = optional(FAMILY_NAME_PREFIX + BLANK) + FAMILY_NAME
    suffix = BLANK_OR_COMMA + FAMILY_NAME_SUFFIX
    return alternate(
        # Mr. Bob Carl Miller
        title + BLANK + GIVEN_NAMES + BLANK + prefixed_family_name + optional(suffix),
        # Mr. Miller
        title + BLANK + prefixed_family_name + optional(suffix),
        # Bob XI
        GIVEN_NAME + BLANK + ROMAN,
        # Bob Miller Jr.
        GIVEN_NAMES + BLANK + prefixed_family_name + suffix,
        # Miller Jr.
        prefixed_family_name + suffix,
        # George W. Bush
        GIVEN_NAME + BLANK + INITIAL + BLANK + prefixed_family_name + optional(suffix),
        # George H. W. Bush
        GIVEN_NAME + BLANK + INITIAL + BLANK + INITIAL + BLANK + prefixed_family_name + optional(suffix),
    )


# -----------------------------------------------------------------------------
# Compiled grammars
# -----------------------------------------------------------------------------

NEVER_PATTERN = re.compile(NEVER)


@dataclass(frozen=True)
class Grammar:
    """A lax and a safe compiled pattern for one category.

    Both patterns must match the whole string.
    """
    lax: re.Pattern
    safe: re.Pattern

    @classmethod
    def compile(cls, lax: str, safe: Optional[str] = None) -> "Grammar":
        """Compile a grammar; a single source serves as both tiers."""
        lax_pattern = re.compile(lax)
        safe_pattern = lax_pattern if safe is None else re.compile(safe)
        return cls(lax_pattern, safe_pattern)

    @classmethod
    def never(cls) -> "Grammar":
        return cls(NEVER_PATTERN, NEVER_PATTERN)

    def could_match(self, text: str) -> bool:
        return self.lax.fullmatch(text) is not None

    def is_match(self, text: str) -> bool:
        return self.safe.fullmatch(text) is not None


ROMAN_NUMERAL = Grammar.compile(ROMAN)
# Separate particles ("von") and glued ones ("Mc")
FAMILY_NAME_PREFIXES = Grammar.compile(alternate(FAMILY_NAME_PREFIX, DIRECT_PREFIX))
ATTRIBUTE_PREFIXES = Grammar.compile(ATTRIBUTE_PREFIX)
FAMILY_NAME_SUFFIXES = Grammar.compile(FAMILY_NAME_SUFFIX)
COMPANY_NAME_SUFFIXES = Grammar.compile(COMPANY_NAME_SUFFIX)
NAME = Grammar.compile(LAX_NAME, SAFE_NAME)
NAMES = Grammar.compile(LAX_NAME, SAFE_NAMES)
ABBREVIATION = Grammar.compile(LAX_ABBREVIATION, SAFE_ABBREVIATION)
COMPANY = Grammar.compile(LAX_COMPANY, SAFE_COMPANY)


@dataclass(frozen=True)
class LanguageGrammars:
    """Grammars that depend on a language's lexicon.

    Attributes:
        lexicon: Lexicon the grammars were built from
        title: Grammar matching a single title
        person: Lax and safe person name grammars
    """
    lexicon: Lexicon
    title: Grammar
    person: Grammar

    @classmethod
    def build(cls, lexicon: Lexicon) -> "LanguageGrammars":
        """Compile the grammars of one language.

        If the titles of the language failed to load, every grammar of the
        language is never-matching.
        """
        if not lexicon.available:
            logger.debug("No titles for %s; using never-matching grammars", lexicon.language.name.lower())
            return cls(lexicon, Grammar.never(), Grammar.never())

        title = build_title_pattern(lexicon)
        logger.debug("Compiling person grammars for %s", lexicon.language.name.lower())
        return cls(
            lexicon=lexicon,
            title=Grammar.compile(title),
            person=Grammar.compile(lax_person_pattern(title), safe_person_pattern(title)),
        )


def build_language_grammars(store: LexiconStore) -> Dict[Language, LanguageGrammars]:
    """Compile the language-dependent grammars for every supported language."""
    return {language: LanguageGrammars.build(store[language]) for language in Language}
