"""Structural extraction of company and person names.

Person names are read from the named groups of the lax person grammar and
then repaired by a fixed sequence of rewrite rules, each of which sees the
fields as left by the previous one:

1. attribute promotion: "Alexander the Great" has the attribute "Great",
   not the family name "Great"
2. a title that goes with a given name ("Queen Elizabeth") turns the
   family-name slot into the given name
3. a roman numeral without a given name ("Elizabeth II") does the same
4. a family name that is really a suffix ("John Miller Junior") is moved
   to the suffix and the last given name becomes the family name
"""
import re
from typing import Callable, Dict, List, Optional

from name_ml.grammars import COMPANY, FAMILY_NAME_SUFFIXES, LanguageGrammars
from name_ml.names import CompanyName, PersonName
from name_ml.normalization import normalize_generic, split_blanks

_SURROUNDING_BLANKS = re.compile(r"^[\s_]+|[\s_]+$")

Fields = Dict[str, Optional[str]]

# Person fields filled straight from the lax grammar's groups
_GROUP_FIELDS = (
    "titles",
    "given_names",
    "nickname",
    "attribute_prefix",
    "family_name_prefix",
    "family_name",
    "family_name_suffix",
    "roman",
    "city",
)


def component(match: "re.Match", name: str) -> Optional[str]:
    """Text of a group with surrounding blanks trimmed, or None if empty."""
    value = match.group(name)
    if not value:
        return None
    value = _SURROUNDING_BLANKS.sub("", value)
    return value or None


def _unquote(nickname: Optional[str]) -> Optional[str]:
    if nickname is None:
        return None
    return nickname.strip("'") or None


def promote_attribute(fields: Fields, grammars: LanguageGrammars) -> None:
    if fields["attribute_prefix"] is not None:
        fields["attribute"] = fields["family_name"]
        fields["family_name"] = None


def promote_given_name_by_title(fields: Fields, grammars: LanguageGrammars) -> None:
    if (
        fields["given_names"] is None
        and fields["titles"] is not None
        and grammars.lexicon.title_governs_given_name(fields["titles"])
    ):
        fields["given_names"] = fields["family_name"]
        fields["family_name"] = None


def promote_given_name_by_roman(fields: Fields, grammars: LanguageGrammars) -> None:
    if fields["given_names"] is None and fields["roman"] is not None:
        fields["given_names"] = fields["family_name"]
        fields["family_name"] = None


def repair_suffix(fields: Fields, grammars: LanguageGrammars) -> None:
    family_name = fields["family_name"]
    given_names = fields["given_names"]
    if family_name is None or given_names is None:
        return
    if not FAMILY_NAME_SUFFIXES.is_match(family_name):
        return

    tokens = split_blanks(given_names)
    fields["family_name_suffix"] = family_name
    fields["family_name"] = tokens[-1]
    fields["given_names"] = " ".join(tokens[:-1]) or None


# Order matters: each rule is conditioned on the fields left by the previous ones
REWRITE_RULES: List[Callable[[Fields, LanguageGrammars], None]] = [
    promote_attribute,
    promote_given_name_by_title,
    promote_given_name_by_roman,
    repair_suffix,
]


def apply_rewrite_rules(fields: Fields, grammars: LanguageGrammars) -> Fields:
    """Run the rewrite rules in order on a copy of fields."""
    fields = dict(fields)
    fields.setdefault("attribute", None)
    for rule in REWRITE_RULES:
        rule(fields, grammars)
    return fields


def blanked(text: str) -> str:
    """Read underscores as blanks, as the person grammars expect."""
    return text.replace("_", " ")


def extract_person(text: str, grammars: LanguageGrammars) -> PersonName:
    """Decompose a person name.

    Underscores in the input are read as blanks. If the lax person grammar
    does not match, the result carries only the original string.

    Args:
        text: Name to decompose
        grammars: Grammars of the language the name is written in

    Returns:
        PersonName with all matched components
    """
    match = grammars.person.lax.fullmatch(blanked(text))
    if match is None:
        return PersonName(text)

    fields: Fields = {name: component(match, name) for name in _GROUP_FIELDS}
    fields["nickname"] = _unquote(fields["nickname"] or component(match, "trailing_nickname"))
    fields = apply_rewrite_rules(fields, grammars)

    return PersonName(original=text, **fields)


def extract_company(text: str) -> CompanyName:
    """Split a company name into core name and legal-entity suffix.

    Args:
        text: Company name, e.g. "Acme & Co."

    Returns:
        CompanyName; name and suffix are None if the lax company grammar
        does not match.
    """
    match = COMPANY.lax.fullmatch(text)
    if match is None:
        return CompanyName(text)
    return CompanyName(
        original=text,
        name=normalize_generic(match.group("name")),
        suffix=match.group("suffix"),
    )
