"""Parsed-name result types.

A parse yields exactly one of four variants, distinguished by ``category``:
GenericName, Abbreviation, CompanyName or PersonName. All variants are
immutable; ``original`` is the verbatim input and ``normalized`` is computed
once at construction.
"""
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Optional, Tuple, Union

from name_ml.normalization import format_person_name, normalize_abbreviation, normalize_generic, split_blanks


class Category(Enum):
    """Semantic category of a name."""

    GENERIC = "GenericName"
    ABBREVIATION = "Abbreviation"
    COMPANY = "CompanyName"
    PERSON = "PersonName"


def _describe(label: str, rows: List[Tuple[str, Optional[str]]]) -> str:
    lines = [label]
    for caption, value in rows:
        lines.append(f"  {caption}: {value}")
    return "\n".join(lines)


@dataclass(frozen=True)
class GenericName:
    """A name of no more specific category."""
    original: str
    normalized: str = field(init=False)
    category: Category = field(init=False, default=Category.GENERIC)

    def __post_init__(self):
        object.__setattr__(self, "normalized", normalize_generic(self.original))

    def describe(self) -> str:
        return _describe("Name", [("Original", self.original), ("Normalized", self.normalized)])

    def __str__(self) -> str:
        return self.original


@dataclass(frozen=True)
class Abbreviation:
    """An abbreviation such as "PMM" or "U.S-A"."""
    original: str
    normalized: str = field(init=False)
    category: Category = field(init=False, default=Category.ABBREVIATION)

    def __post_init__(self):
        object.__setattr__(self, "normalized", normalize_abbreviation(self.original))

    def describe(self) -> str:
        return _describe("Abbreviation", [("Original", self.original), ("Normalized", self.normalized)])

    def __str__(self) -> str:
        return self.original


@dataclass(frozen=True)
class CompanyName:
    """A company name split into core name and legal-entity suffix.

    Attributes:
        original: Verbatim input
        name: Core name, blanks as underscores, punctuation removed
        suffix: Matched legal-entity suffix (e.g. "Inc.", "& Co.")
    """
    original: str
    name: Optional[str] = None
    suffix: Optional[str] = None
    normalized: str = field(init=False)
    category: Category = field(init=False, default=Category.COMPANY)

    def __post_init__(self):
        object.__setattr__(self, "normalized", self.name if self.name is not None else self.original)

    def describe(self) -> str:
        return _describe(
            "CompanyName",
            [
                ("Original", self.original),
                ("Name", self.name),
                ("Suffix", self.suffix),
                ("Normalized", self.normalized),
            ],
        )

    def __str__(self) -> str:
        return self.original


@dataclass(frozen=True)
class PersonName:
    """A person name decomposed into its components.

    Every component is optional. At most one of ``family_name`` and
    ``attribute`` is set: an epithet ("the Great") takes the family-name
    slot.

    Attributes:
        original: Verbatim input
        titles: Leading honorifics, e.g. "Prof. Dr."
        given_names: Given names, blank-separated
        nickname: Nickname without its quotes
        family_name_prefix: Particle before the family name, e.g. "von"
        attribute_prefix: Epithet marker, e.g. "the"
        family_name: Family name
        attribute: Epithet, e.g. "Great"
        family_name_suffix: Generational or honorific suffix, e.g. "Jr."
        roman: Roman numeral, e.g. "III"
        city: City qualifier from "... of <City>"
    """
    original: str
    titles: Optional[str] = None
    given_names: Optional[str] = None
    nickname: Optional[str] = None
    family_name_prefix: Optional[str] = None
    attribute_prefix: Optional[str] = None
    family_name: Optional[str] = None
    attribute: Optional[str] = None
    family_name_suffix: Optional[str] = None
    roman: Optional[str] = None
    city: Optional[str] = None
    normalized: str = field(init=False)
    category: Category = field(init=False, default=Category.PERSON)

    def __post_init__(self):
        if self.family_name is not None and self.attribute is not None:
            raise ValueError("A person name cannot carry both a family name and an attribute")
        object.__setattr__(
            self,
            "normalized",
            format_person_name(
                self.original,
                given_names=self.given_names,
                family_name=self.family_name,
                family_name_suffix=self.family_name_suffix,
                roman=self.roman,
                attribute=self.attribute,
            ),
        )

    @property
    def given_name(self) -> Optional[str]:
        """The first given name, or None."""
        parts = split_blanks(self.given_names or "")
        return parts[0] if parts else None

    def describe(self) -> str:
        return _describe(
            "PersonName",
            [
                ("Original", self.original),
                ("Titles", self.titles),
                ("Given Name", self.given_name),
                ("Given Names", self.given_names),
                ("Nickname", self.nickname),
                ("Family Name Prefix", self.family_name_prefix),
                ("Attribute Prefix", self.attribute_prefix),
                ("Family Name", self.family_name),
                ("Attribute", self.attribute),
                ("Family Name Suffix", self.family_name_suffix),
                ("Roman", self.roman),
                ("City", self.city),
                ("Normalized", self.normalized),
            ],
        )

    def __str__(self) -> str:
        return self.original


ParsedName = Union[GenericName, Abbreviation, CompanyName, PersonName]


def normalize(parsed: ParsedName) -> str:
    """Canonical string of a parsed name."""
    return parsed.normalized


def describe(parsed: ParsedName) -> str:
    """Multi-line diagnostic description of a parsed name, in fixed field order."""
    return parsed.describe()


def components(parsed: ParsedName) -> dict:
    """Fields of a parsed name as a plain dict, category included."""
    result = {f.name: getattr(parsed, f.name) for f in fields(parsed)}
    result["category"] = parsed.category.value
    return result
