"""Main classifier module for name categories."""
import logging
from pathlib import Path
from typing import Dict, List, Optional

from joblib import Parallel, delayed

from name_ml import grammars as g
from name_ml.config import ParserConfig, load_parser_config
from name_ml.extraction import blanked, extract_company, extract_person
from name_ml.grammars import LanguageGrammars, build_language_grammars
from name_ml.languages import Language, LanguageLike
from name_ml.lexicon import LexiconStore
from name_ml.names import Abbreviation, Category, GenericName, ParsedName

logger = logging.getLogger(__name__)


class NameClassifier:
    """Classifier for names: company, person, abbreviation or generic name.

    A classifier loads the lexicons of all supported languages and compiles
    their grammars once, in its constructor. Afterwards it holds no mutable
    state and can be shared between threads.

    Classification is first-match-wins, in this order:

    1. safe company grammar -> CompanyName
    2. lax person grammar of the language (and not a safe company) -> PersonName
    3. safe abbreviation grammar -> Abbreviation
    4. anything else -> GenericName

    Example:
        >>> classifier = NameClassifier()
        >>> classifier.classify("Acme & Co.")
        <Category.COMPANY: 'CompanyName'>
        >>> classifier.parse("Queen Elizabeth").given_names
        'Elizabeth'
    """

    def __init__(self, config: Optional[ParserConfig] = None, store: Optional[LexiconStore] = None):
        """
        Initialize the NameClassifier.

        Args:
            config: Optional parser configuration; defaults to packaged lexicons
            store: Optional preloaded lexicons, overriding config.lexicon_dir
        """
        self.config = config or ParserConfig()
        if store is None:
            store = LexiconStore.load(
                self.config.lexicon_dir,
                encoding=self.config.encoding,
                comment_marker=self.config.comment_marker,
            )
        self.store = store
        self._grammars: Dict[Language, LanguageGrammars] = build_language_grammars(store)

    @classmethod
    def from_config(cls, path: Optional[Path] = None) -> "NameClassifier":
        """Create a classifier from a YAML configuration file.

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the config file is empty or invalid
        """
        return cls(load_parser_config(path))

    def _language(self, language: Optional[LanguageLike]) -> Language:
        if language is None:
            return self.config.default_language
        return Language.from_value(language)

    def grammars_for(self, language: Optional[LanguageLike] = None) -> LanguageGrammars:
        """Grammars of a language.

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        return self._grammars[self._language(language)]

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_company_name(self, text: str) -> bool:
        """Tells whether the string is a company name with high probability."""
        return g.COMPANY.is_match(text)

    def could_be_company_name(self, text: str) -> bool:
        return g.COMPANY.could_match(text)

    def is_person_name(self, text: str, language: LanguageLike) -> bool:
        """Tells whether the string is a person name with high probability.

        Safe company names are never person names. Underscores are read as
        blanks.

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        grammars = self.grammars_for(language)
        if self.is_company_name(text):
            return False
        return grammars.person.is_match(blanked(text))

    def could_be_person_name(self, text: str, language: LanguageLike) -> bool:
        """Tells whether the string could be a person name.

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        grammars = self.grammars_for(language)
        if self.is_company_name(text):
            return False
        text = blanked(text)
        return grammars.person.could_match(text) or grammars.person.is_match(text)

    def is_abbreviation(self, text: str) -> bool:
        return g.ABBREVIATION.is_match(text)

    def could_be_abbreviation(self, text: str) -> bool:
        return g.ABBREVIATION.could_match(text)

    def is_name(self, text: str) -> bool:
        """Tells whether the string is a name with high probability."""
        return g.NAME.is_match(text)

    def is_names(self, text: str) -> bool:
        """Tells whether the string is a sequence of names with high probability."""
        return g.NAMES.is_match(text)

    def could_be_name(self, text: str) -> bool:
        return g.NAME.could_match(text)

    def is_title(self, text: str, language: LanguageLike) -> bool:
        return self.grammars_for(language).title.is_match(text)

    def is_stop_word(self, word: str, language: LanguageLike) -> bool:
        return self.grammars_for(language).lexicon.is_stop_word(word)

    @staticmethod
    def is_roman_numeral(text: str) -> bool:
        return g.ROMAN_NUMERAL.is_match(text)

    @staticmethod
    def is_family_name_prefix(text: str) -> bool:
        return g.FAMILY_NAME_PREFIXES.is_match(text)

    @staticmethod
    def is_attribute_prefix(text: str) -> bool:
        return g.ATTRIBUTE_PREFIXES.is_match(text)

    @staticmethod
    def is_person_name_suffix(text: str) -> bool:
        return g.FAMILY_NAME_SUFFIXES.is_match(text)

    @staticmethod
    def is_company_name_suffix(text: str) -> bool:
        return g.COMPANY_NAME_SUFFIXES.is_match(text)

    # -------------------------------------------------------------------------
    # Classification and parsing
    # -------------------------------------------------------------------------

    def classify(self, text: str, language: Optional[LanguageLike] = None) -> Category:
        """
        Classify a string into a name category.

        Args:
            text: The string to classify
            language: Language of the string; defaults to the configured one

        Returns:
            The Category of the string

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        grammars = self.grammars_for(language)
        if self.is_company_name(text):
            return Category.COMPANY
        if grammars.person.could_match(blanked(text)):
            return Category.PERSON
        if self.is_abbreviation(text):
            return Category.ABBREVIATION
        return Category.GENERIC

    def parse(self, text: str, language: Optional[LanguageLike] = None) -> ParsedName:
        """
        Classify a string and extract the components of its category.

        Args:
            text: The string to parse
            language: Language of the string; defaults to the configured one

        Returns:
            GenericName, Abbreviation, CompanyName or PersonName

        Raises:
            UnsupportedLanguageError: If the language is not supported

        Example:
            >>> classifier.parse("John Miller Jr.").family_name_suffix
            'Jr.'
        """
        grammars = self.grammars_for(language)
        category = self.classify(text, grammars.lexicon.language)
        if category is Category.COMPANY:
            return extract_company(text)
        if category is Category.PERSON:
            return extract_person(text, grammars)
        if category is Category.ABBREVIATION:
            return Abbreviation(text)
        return GenericName(text)

    def classify_list(
        self,
        names: List[str],
        language: Optional[LanguageLike] = None,
        n_jobs: Optional[int] = None,
    ) -> List[Category]:
        """
        Classify a list of strings.

        Args:
            names: List of strings to classify
            language: Language of the strings
            n_jobs: Number of joblib workers; None or 1 classifies in-process

        Returns:
            List of categories corresponding to each input string

        Raises:
            ValueError: If names is None, not a list or empty
            UnsupportedLanguageError: If the language is not supported
        """
        self._validate_names(names)
        resolved = self._language(language)

        if n_jobs is None or n_jobs == 1:
            return [self.classify(name, resolved) for name in names]

        logger.debug("Classifying %d names with %s joblib workers", len(names), n_jobs)
        return Parallel(n_jobs=n_jobs)(delayed(self.classify)(name, resolved) for name in names)

    def parse_list(self, names: List[str], language: Optional[LanguageLike] = None) -> List[ParsedName]:
        """Parse a list of strings.

        Raises:
            ValueError: If names is None, not a list or empty
            UnsupportedLanguageError: If the language is not supported
        """
        self._validate_names(names)
        resolved = self._language(language)
        return [self.parse(name, resolved) for name in names]

    @staticmethod
    def _validate_names(names: List[str]) -> None:
        if names is None:
            raise ValueError("Names list cannot be None")

        if not isinstance(names, list):
            raise ValueError("Names must be a list")

        if not names:
            raise ValueError("Names list cannot be empty")

        for i, name in enumerate(names):
            if not isinstance(name, str):
                raise ValueError(f"Name at index {i} must be a string")
