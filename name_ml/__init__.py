"""Name classifier and parser for person, company, abbreviation and generic names."""
from name_ml.classifier import NameClassifier
from name_ml.config import ParserConfig, load_parser_config, save_parser_config
from name_ml.errors import LexiconLoadError, NameMLError, UnsupportedLanguageError
from name_ml.languages import Language
from name_ml.lexicon import Lexicon, LexiconStore
from name_ml.names import (
    Abbreviation,
    Category,
    CompanyName,
    GenericName,
    ParsedName,
    PersonName,
    components,
    describe,
    normalize,
)
from name_ml.tables import (
    is_language,
    is_language_code,
    is_nation,
    is_nationality,
    is_us_state,
    is_us_state_abbreviation,
    language_for_code,
    nation_for_nationality,
    unabbreviate_us_state,
)

__version__ = "0.1.0"

__all__ = [
    "NameClassifier",
    "ParserConfig",
    "load_parser_config",
    "save_parser_config",
    "NameMLError",
    "LexiconLoadError",
    "UnsupportedLanguageError",
    "Language",
    "Lexicon",
    "LexiconStore",
    "Category",
    "GenericName",
    "Abbreviation",
    "CompanyName",
    "PersonName",
    "ParsedName",
    "normalize",
    "describe",
    "components",
    "is_us_state",
    "is_us_state_abbreviation",
    "unabbreviate_us_state",
    "is_language",
    "is_language_code",
    "language_for_code",
    "is_nation",
    "is_nationality",
    "nation_for_nationality",
]
