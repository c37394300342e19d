"""Unit tests for normalization module."""
import pytest

from name_ml.normalization import (
    abbreviate_suffix,
    format_person_name,
    normalize_abbreviation,
    normalize_generic,
    split_blanks,
)


class TestSplitBlanks:
    """Tests for blank splitting."""

    def test_splits_on_spaces_and_underscores(self):
        """Test splitting on runs of spaces and underscores."""
        assert split_blanks("John  Paul_Miller") == ["John", "Paul", "Miller"]

    def test_ignores_surrounding_blanks(self):
        """Test that surrounding blanks give no empty tokens."""
        assert split_blanks("  John ") == ["John"]

    def test_empty_string(self):
        """Test splitting the empty string."""
        assert split_blanks("") == []


class TestNormalizeGeneric:
    """Tests for generic normalization."""

    def test_blanks_become_underscore(self):
        """Test that blank runs become one underscore."""
        assert normalize_generic("Mickey  Mouse") == "Mickey_Mouse"

    def test_punctuation_removed(self):
        """Test that punctuation is removed."""
        assert normalize_generic("U.S. Army") == "US_Army"
        assert normalize_generic("Mickey Mouse!") == "Mickey_Mouse"

    def test_keeps_accented_letters_and_digits(self):
        """Test that accented letters and digits are kept."""
        assert normalize_generic("Café 2000") == "Café_2000"

    def test_none_gives_empty_string(self):
        """Test normalizing None."""
        assert normalize_generic(None) == ""

    @pytest.mark.parametrize("text", ["Mickey  Mouse!", "U.S. Army", "a_b c", "!!"])
    def test_idempotent(self, text):
        """Test that generic normalization is idempotent."""
        once = normalize_generic(text)
        assert normalize_generic(once) == once


class TestNormalizeAbbreviation:
    """Tests for abbreviation normalization."""

    def test_uppercases(self):
        """Test that abbreviations are uppercased without periods."""
        assert normalize_abbreviation("p.m.m.") == "PMM"

    def test_hyphen_removed(self):
        """Test that hyphens are removed."""
        assert normalize_abbreviation("U.S-A") == "USA"

    def test_idempotent(self):
        """Test that abbreviation normalization is idempotent."""
        once = normalize_abbreviation("U.S-A")
        assert normalize_abbreviation(once) == once


class TestAbbreviateSuffix:
    """Tests for generational suffix abbreviation."""

    @pytest.mark.parametrize("suffix", ["Jr.", "Jr", "Junior", "junior"])
    def test_junior(self, suffix):
        """Test spellings of junior."""
        assert abbreviate_suffix(suffix) == "Jr."

    @pytest.mark.parametrize("suffix", ["Sr.", "Sr", "Senior", "senior"])
    def test_senior(self, suffix):
        """Test spellings of senior."""
        assert abbreviate_suffix(suffix) == "Sr."

    @pytest.mark.parametrize("suffix", ["PhD", "OBE", "hijo", "", None])
    def test_other_suffixes(self, suffix):
        """Test that other suffixes have no abbreviation."""
        assert abbreviate_suffix(suffix) is None


class TestFormatPersonName:
    """Tests for person name formatting."""

    def test_given_and_family_name(self):
        """Test formatting given and family name."""
        assert format_person_name("x", "John", "Miller") == "John Miller"

    def test_family_name_with_suffix(self):
        """Test formatting with a generational suffix."""
        assert format_person_name("x", "John", "Miller", "Jr.") == "John Miller, Jr."
        assert format_person_name("x", "John", "Miller", "Senior") == "John Miller, Sr."

    def test_non_generational_suffix_dropped(self):
        """Test that other suffixes are dropped."""
        assert format_person_name("x", "John", "Miller", "OBE") == "John Miller"

    def test_family_name_only(self):
        """Test formatting a family name with a suffix only."""
        assert format_person_name("x", family_name="Miller", family_name_suffix="Jr.") == "Miller, Jr."

    def test_given_name_with_roman_and_attribute(self):
        """Test formatting a given name with roman numeral and attribute."""
        assert format_person_name("x", "Fabian", roman="III", attribute="Great") == "Fabian III Great"
        assert format_person_name("x", "Elizabeth", roman="II") == "Elizabeth II"
        assert format_person_name("x", "Alexander", attribute="Great") == "Alexander Great"

    def test_falls_back_to_original(self):
        """Test that the original is returned without name parts."""
        assert format_person_name("Mr. X") == "Mr. X"
