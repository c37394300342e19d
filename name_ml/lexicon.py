"""Per-language lexicons loaded from text resources.

A lexicon resource is a UTF-8 text file with one entry per line, named
<kind>.<language-code> (e.g. titles.en). Empty lines and lines starting
with the comment marker ("##") are skipped.

Loading never aborts the process: a missing or unreadable resource is
logged and the affected part of the lexicon degrades to absent or empty.
"""
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from name_ml.config import DEFAULT_COMMENT_MARKER, DEFAULT_ENCODING
from name_ml.errors import LexiconLoadError
from name_ml.languages import Language
from name_ml.patterns import NEVER, alternate

logger = logging.getLogger(__name__)

# Resource kinds
TITLES = "titles"
GIVEN_NAME_TITLES = "giventitles"
STOP_WORDS = "stopwords"


def resource_path(directory: Path, kind: str, language: Language) -> Path:
    """Path of the <kind>.<language-code> resource inside directory."""
    return Path(directory) / f"{kind}.{language.code}"


def load_lines(
    path: Path,
    encoding: str = DEFAULT_ENCODING,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> List[str]:
    """Read the entries of a lexicon resource.

    Args:
        path: Resource to read
        encoding: Text encoding of the resource
        comment_marker: Lines whose trimmed content starts with this are skipped

    Returns:
        Trimmed, non-empty, non-comment lines in file order

    Raises:
        LexiconLoadError: If the resource is missing or unreadable
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            raw_lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(path, e) from e

    lines = []
    for line in raw_lines:
        line = line.strip()
        if line and not line.startswith(comment_marker):
            lines.append(line)
    return lines


def load_set(
    path: Path,
    encoding: str = DEFAULT_ENCODING,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> FrozenSet[str]:
    """Read a lexicon resource as a set, degrading to empty on failure."""
    try:
        return frozenset(load_lines(path, encoding, comment_marker))
    except LexiconLoadError as e:
        logger.warning("%s; using an empty set", e)
        return frozenset()


@dataclass(frozen=True)
class Lexicon:
    """Vocabulary for one language.

    Attributes:
        language: Language this lexicon belongs to
        titles: Honorifics in resource order, or None if they failed to load
        titles_for_given_name: Casefolded titles that go with a given name
            (e.g. "queen" in "Queen Elizabeth")
        stop_words: Stop words of the language
    """
    language: Language
    titles: Optional[Tuple[str, ...]]
    titles_for_given_name: FrozenSet[str]
    stop_words: FrozenSet[str]

    @property
    def available(self) -> bool:
        return self.titles is not None

    @classmethod
    def empty(cls, language: Language) -> "Lexicon":
        """A lexicon whose title resource failed to load."""
        return cls(language, None, frozenset(), frozenset())

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def title_governs_given_name(self, titles: str) -> bool:
        return titles.casefold() in self.titles_for_given_name


def load_lexicon(
    directory: Path,
    language: Language,
    encoding: str = DEFAULT_ENCODING,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> Lexicon:
    """Load the lexicon of one language from directory."""
    try:
        titles: Optional[Tuple[str, ...]] = tuple(
            load_lines(resource_path(directory, TITLES, language), encoding, comment_marker)
        )
    except LexiconLoadError as e:
        logger.warning("%s; person grammars for %s are disabled", e, language.name.lower())
        titles = None

    given_titles = load_set(resource_path(directory, GIVEN_NAME_TITLES, language), encoding, comment_marker)
    stop_words = load_set(resource_path(directory, STOP_WORDS, language), encoding, comment_marker)

    return Lexicon(
        language=language,
        titles=titles,
        titles_for_given_name=frozenset(t.casefold() for t in given_titles),
        stop_words=stop_words,
    )


class LexiconStore:
    """Lexicons of all supported languages, loaded once.

    Example:
        >>> store = LexiconStore.load(LEXICON_DIR)
        >>> store[Language.GERMAN].is_stop_word("und")
        True
    """

    def __init__(self, lexicons: Dict[Language, Lexicon]):
        self._lexicons = dict(lexicons)

    @classmethod
    def load(
        cls,
        directory: Path,
        languages: Iterable[Language] = tuple(Language),
        encoding: str = DEFAULT_ENCODING,
        comment_marker: str = DEFAULT_COMMENT_MARKER,
    ) -> "LexiconStore":
        lexicons = {}
        for language in languages:
            lexicon = load_lexicon(directory, language, encoding, comment_marker)
            logger.info(
                "Loaded %s lexicon: %d titles, %d given-name titles, %d stop words",
                language.name.lower(),
                len(lexicon.titles or ()),
                len(lexicon.titles_for_given_name),
                len(lexicon.stop_words),
            )
            lexicons[language] = lexicon
        return cls(lexicons)

    def __getitem__(self, language: Language) -> Lexicon:
        if language not in self._lexicons:
            return Lexicon.empty(language)
        return self._lexicons[language]

    def __contains__(self, language: Language) -> bool:
        return language in self._lexicons

    def languages(self) -> List[Language]:
        return list(self._lexicons)


def build_title_pattern(lexicon: Lexicon) -> str:
    """Word-bounded alternation of all titles of a lexicon.

    Titles are literal strings. Returns a never-matching pattern when the
    titles failed to load or the resource holds no entries.
    """
    if not lexicon.titles:
        return NEVER
    return r"\b" + alternate(*(re.escape(title) for title in lexicon.titles))
