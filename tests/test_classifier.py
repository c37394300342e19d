"""Unit tests for the NameClassifier class."""
import logging
import time

import joblib
import pytest

from name_ml.classifier import NameClassifier
from name_ml.config import LEXICON_DIR, ParserConfig
from name_ml.errors import UnsupportedLanguageError
from name_ml.languages import Language
from name_ml.names import Abbreviation, Category, CompanyName, GenericName, PersonName, normalize

SAMPLES = [
    "PMM",
    "U.S-A",
    "Acme & Co.",
    "John Smith Inc.",
    "Siemens AG",
    "Mr. Bob Carl Miller",
    "Mr. Miller",
    "J. XI",
    "Elizabeth II",
    "George H. W. Bush",
    "John Miller Jr.",
    "Miller Jr.",
    "Mickey Mouse",
    "Bank of England",
    "Queen Elizabeth",
    "the weather",
    "",
]


@pytest.fixture(scope="module")
def classifier():
    """Classifier over the packaged lexicons."""
    return NameClassifier()


@pytest.fixture
def empty_classifier(tmp_path):
    """Classifier whose lexicon directory holds no resources."""
    return NameClassifier(ParserConfig(lexicon_dir=tmp_path))


class TestNameClassifier:
    """Tests for NameClassifier construction."""

    def test_default_config(self, classifier):
        """Test that the default configuration uses the packaged lexicons and English."""
        assert classifier.config.lexicon_dir == LEXICON_DIR
        assert classifier.config.default_language is Language.ENGLISH

    def test_all_languages_loaded(self, classifier):
        """Test that lexicons of all supported languages are loaded."""
        for language in Language:
            assert classifier.grammars_for(language).lexicon.available

    def test_grammars_for_default_language(self, classifier):
        """Test that grammars_for falls back to the default language."""
        assert classifier.grammars_for().lexicon.language is Language.ENGLISH

    def test_from_config(self, tmp_path):
        """Test creating a classifier from a YAML configuration file."""
        config_path = tmp_path / "parser_config.yaml"
        config_path.write_text(f"lexicon_dir: {LEXICON_DIR}\ndefault_language: de\n", encoding="utf-8")
        classifier = NameClassifier.from_config(config_path)
        assert classifier.config.default_language is Language.GERMAN
        assert classifier.is_title("Herr", "de")

    def test_from_config_missing_file(self, tmp_path):
        """Test that from_config raises FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            NameClassifier.from_config(tmp_path / "missing.yaml")


class TestClassify:
    """Tests for classification end to end."""

    def test_abbreviation(self, classifier):
        """Test classification and parsing of an abbreviation."""
        assert classifier.classify("PMM") is Category.ABBREVIATION
        parsed = classifier.parse("PMM")
        assert isinstance(parsed, Abbreviation)
        assert parsed.normalized == "PMM"

    def test_lax_only_person(self, classifier):
        """Test that a lax-only person name is classified as a person."""
        assert not classifier.is_person_name("Mickey Mouse", "en")
        assert classifier.could_be_person_name("Mickey Mouse", "en")
        assert classifier.classify("Mickey Mouse") is Category.PERSON

    def test_safe_only_person_is_not_classified_as_person(self, classifier):
        """Test that classify consults only the lax person grammar."""
        assert classifier.is_person_name("J. XI", "en")
        assert classifier.classify("J. XI") is Category.GENERIC
        assert isinstance(classifier.parse("J. XI"), GenericName)

    def test_underscores_read_as_blanks(self, classifier):
        """Test that underscores separate person name components."""
        assert classifier.classify("John_Miller") is Category.PERSON
        assert classifier.could_be_person_name("Mr._Miller", "en")
        assert classifier.is_person_name("Mr._Miller", "en")
        parsed = classifier.parse("John_Miller")
        assert isinstance(parsed, PersonName)
        assert parsed.given_names == "John"
        assert parsed.family_name == "Miller"
        assert parsed.original == "John_Miller"

    @pytest.mark.parametrize("text", ["Nguyễn Trãi", "Ivan Петров", "Sokrates Σωκράτης", "Mr. Đặng"])
    def test_non_latin_person_names(self, classifier, text):
        """Test person names written with letters beyond Latin Extended-B."""
        assert classifier.could_be_person_name(text, "en")
        assert classifier.classify(text) is Category.PERSON

    def test_non_latin_decomposition(self, classifier):
        """Test decomposition of a Vietnamese name with a title."""
        assert classifier.is_person_name("Mr. Đặng", "en")
        parsed = classifier.parse("Mr. Đặng")
        assert parsed.titles == "Mr."
        assert parsed.family_name == "Đặng"
        assert classifier.parse("Ivan Петров").family_name == "Петров"

    @pytest.mark.parametrize("title", ["Dr. ", "Mr. ", "Prof. Dr. "])
    def test_repeated_titles_fail_fast(self, classifier, title):
        """Test that a long run of titles without a name is rejected quickly."""
        text = title * 2000 + "x"
        start = time.perf_counter()
        assert classifier.classify(text) is Category.GENERIC
        assert not classifier.could_be_person_name(text, "en")
        assert time.perf_counter() - start < 2.0

    def test_many_titles_before_name(self, classifier):
        """Test that a long run of titles followed by a name still parses."""
        parsed = classifier.parse("Dr. " * 500 + "Miller")
        assert parsed.family_name == "Miller"
        assert parsed.titles == " ".join(["Dr."] * 500)

    def test_person_decomposition(self, classifier):
        """Test decomposition of a person name with titles, attribute, roman and city."""
        parsed = classifier.parse("Prof. Dr. Fabian the Great III of Saarbruecken")
        assert isinstance(parsed, PersonName)
        assert parsed.titles == "Prof. Dr."
        assert parsed.given_names == "Fabian"
        assert parsed.attribute_prefix == "the"
        assert parsed.attribute == "Great"
        assert parsed.family_name is None
        assert parsed.roman == "III"
        assert parsed.city == "Saarbruecken"
        assert normalize(parsed) == "Fabian III Great"

    def test_person_with_suffix(self, classifier):
        """Test parsing of a person name with a family name suffix."""
        assert classifier.is_person_name("John Miller Jr.", "en")
        parsed = classifier.parse("John Miller Jr.")
        assert parsed.given_names == "John"
        assert parsed.family_name == "Miller"
        assert parsed.family_name_suffix == "Jr."

    def test_title_for_given_name(self, classifier):
        """Test that a title governing a given name moves the family name to given names."""
        parsed = classifier.parse("Queen Elizabeth", "en")
        assert parsed.titles == "Queen"
        assert parsed.given_names == "Elizabeth"
        assert parsed.family_name is None

    def test_company(self, classifier):
        """Test classification and parsing of a company name."""
        assert classifier.classify("Acme & Co.") is Category.COMPANY
        parsed = classifier.parse("Acme & Co.")
        assert isinstance(parsed, CompanyName)
        assert parsed.name == "Acme"
        assert parsed.suffix == "& Co."

    def test_company_wins_over_person(self, classifier):
        """Test that safe company names are never person names."""
        assert classifier.classify("John Smith Inc.") is Category.COMPANY
        assert not classifier.is_person_name("John Smith Inc.", "en")
        assert not classifier.could_be_person_name("Acme & Co.", "en")

    def test_generic(self, classifier):
        """Test classification and normalization of a generic name."""
        assert classifier.classify("the weather") is Category.GENERIC
        parsed = classifier.parse("the weather")
        assert isinstance(parsed, GenericName)
        assert parsed.normalized == "the_weather"

    def test_german(self, classifier):
        """Test German titles and company suffixes."""
        assert classifier.is_person_name("Herr Müller", "de")
        assert classifier.is_person_name("Herr Müller", Language.GERMAN)
        assert classifier.classify("Siemens AG", "de") is Category.COMPANY

    def test_language_by_name(self, classifier):
        """Test selecting the language by its English name."""
        assert classifier.classify("Mme Dupont", "French") is Category.PERSON
        assert classifier.is_person_name("Mme Dupont", "fr")
        assert not classifier.is_person_name("Mme Dupont", "en")

    def test_unsupported_language(self, classifier):
        """Test that unknown languages raise UnsupportedLanguageError."""
        with pytest.raises(UnsupportedLanguageError):
            classifier.classify("John Miller", "xx")
        with pytest.raises(ValueError):
            classifier.parse("John Miller", "Klingon")
        with pytest.raises(UnsupportedLanguageError):
            classifier.is_person_name("John Miller", "xx")


class TestPredicates:
    """Tests for the category predicates."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_safe_implies_lax(self, classifier, text):
        """Test that every safe grammar match is also a lax match."""
        if classifier.is_company_name(text):
            assert classifier.could_be_company_name(text)
        if classifier.is_abbreviation(text):
            assert classifier.could_be_abbreviation(text)
        if classifier.is_name(text):
            assert classifier.could_be_name(text)
        for language in Language:
            if classifier.is_person_name(text, language):
                assert classifier.could_be_person_name(text, language)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_company_is_never_person(self, classifier, text):
        """Test that strings classified as companies are not safe person names."""
        if classifier.classify(text) is Category.COMPANY:
            assert not classifier.is_person_name(text, "en")

    def test_initial_with_roman(self, classifier):
        """Test that an initial followed by a roman numeral is a safe person name."""
        assert classifier.is_person_name("J. XI", "en")
        assert classifier.could_be_person_name("J. XI", "en")

    def test_title_and_stop_word(self, classifier):
        """Test title and stop word lookups per language."""
        assert classifier.is_title("Dr.", "en")
        assert classifier.is_title("Herr", "de")
        assert not classifier.is_title("Herr", "en")
        assert classifier.is_stop_word("und", "de")
        assert not classifier.is_stop_word("und", "en")

    def test_names(self, classifier):
        """Test the generic name predicates."""
        assert classifier.is_name("Miller")
        assert classifier.could_be_name("Al")
        assert classifier.is_names("Bank of England")

    def test_fixed_vocabularies(self):
        """Test the language-independent vocabulary predicates."""
        assert NameClassifier.is_roman_numeral("XIV")
        assert NameClassifier.is_family_name_prefix("von der")
        assert NameClassifier.is_attribute_prefix("the")
        assert NameClassifier.is_person_name_suffix("Jr.")
        assert NameClassifier.is_company_name_suffix("GmbH")


class TestMissingLexicon:
    """Tests for a classifier whose lexicon resources are missing."""

    def test_no_exception_and_warnings_logged(self, tmp_path, caplog):
        """Test that missing lexicons log a warning instead of raising."""
        with caplog.at_level(logging.WARNING):
            NameClassifier(ParserConfig(lexicon_dir=tmp_path))
        assert "person grammars for english are disabled" in caplog.text

    @pytest.mark.parametrize("text", ["John Miller", "Mr. John Miller", "Miller Jr.", "J. XI"])
    def test_person_predicates_false(self, empty_classifier, text):
        """Test that person predicates are false without titles."""
        for language in Language:
            assert not empty_classifier.could_be_person_name(text, language)
            assert not empty_classifier.is_person_name(text, language)

    def test_title_and_stop_word_false(self, empty_classifier):
        """Test that title and stop word lookups are false without lexicons."""
        assert not empty_classifier.is_title("Mr.", "en")
        assert not empty_classifier.is_stop_word("the", "en")

    def test_other_categories_unaffected(self, empty_classifier):
        """Test that companies and abbreviations are still recognized without lexicons."""
        assert empty_classifier.classify("Acme & Co.") is Category.COMPANY
        assert empty_classifier.classify("PMM") is Category.ABBREVIATION
        assert empty_classifier.classify("John Miller") is Category.GENERIC

    def test_custom_titles(self, tmp_path):
        """Test a lexicon directory holding only English titles."""
        (tmp_path / "titles.en").write_text("Mr.\n", encoding="utf-8")
        classifier = NameClassifier(ParserConfig(lexicon_dir=tmp_path))
        assert classifier.is_person_name("Mr. Miller", "en")
        assert not classifier.could_be_person_name("Herr Müller", "de")


class TestNormalizeIdempotence:
    """Tests for normalization of parsed abbreviations and generic names."""

    @pytest.mark.parametrize("text", ["PMM", "U.S-A", "the weather!", "p m m", "X1"])
    def test_idempotent(self, classifier, text):
        """Test that normalizing a parsed normalized name changes nothing."""
        once = normalize(classifier.parse(text))
        assert normalize(classifier.parse(once)) == once


class TestBatch:
    """Tests for list classification."""

    def test_classify_list(self, classifier):
        """Test classify_list on mixed categories."""
        results = classifier.classify_list(["Acme & Co.", "PMM", "John Miller Jr.", "the weather"])
        assert results == [Category.COMPANY, Category.ABBREVIATION, Category.PERSON, Category.GENERIC]

    def test_classify_list_language(self, classifier):
        """Test classify_list with an explicit language."""
        assert classifier.classify_list(["Mme Dupont"], language="fr") == [Category.PERSON]

    def test_classify_list_parallel(self, classifier):
        """Test that parallel classification matches sequential classification."""
        names = ["Acme & Co.", "PMM", "John Miller Jr.", "the weather"] * 5
        with joblib.parallel_config(backend="threading"):
            results = classifier.classify_list(names, n_jobs=2)
        assert results == classifier.classify_list(names)

    def test_parse_list(self, classifier):
        """Test parse_list returns parsed names in order."""
        parsed = classifier.parse_list(["Acme & Co.", "Elizabeth II"])
        assert parsed[0].name == "Acme"
        assert parsed[1].normalized == "Elizabeth II"

    def test_none_raises_error(self, classifier):
        """Test that classify_list raises ValueError for None input."""
        with pytest.raises(ValueError, match="Names list cannot be None"):
            classifier.classify_list(None)

    def test_not_a_list_raises_error(self, classifier):
        """Test that classify_list raises ValueError for non-list input."""
        with pytest.raises(ValueError, match="Names must be a list"):
            classifier.classify_list("Acme & Co.")

    def test_empty_list_raises_error(self, classifier):
        """Test that parse_list raises ValueError for an empty list."""
        with pytest.raises(ValueError, match="Names list cannot be empty"):
            classifier.parse_list([])

    def test_non_string_raises_error(self, classifier):
        """Test that classify_list raises ValueError for a non-string element."""
        with pytest.raises(ValueError, match="Name at index 1 must be a string"):
            classifier.classify_list(["Acme", 42])

    def test_unsupported_language(self, classifier):
        """Test that classify_list raises UnsupportedLanguageError for an unknown language."""
        with pytest.raises(UnsupportedLanguageError):
            classifier.classify_list(["Acme"], language="xx")
