#!/usr/bin/env python3
"""
Tests for the individual extraction stages.
"""

import sys
import os

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import re

import pytest
from human_name_parser.core.models import ParserOptions
from human_name_parser.core.parsers import (
    AmbiguousMatchError,
    FirstNameNotFound,
    LastNameNotFound,
    compile_patterns,
)
from human_name_parser.core.parsers import stages
from human_name_parser.core.parsers.patterns import (
    COMMA_FLIPS,
    SLASH_FLIPS,
    SPACE_FLIPS,
    build_alternation,
)


@pytest.fixture
def patterns():
    return compile_patterns(ParserOptions())


class TestNormalize:
    """Tests for working string normalization."""

    def test_whitespace(self):
        """Test trimming and collapsing whitespace."""
        assert stages.normalize("  John \t  Smith \n") == "John Smith"

    def test_trailing_comma(self):
        """Test trailing commas are dropped."""
        assert stages.normalize("Smith,") == "Smith"
        assert stages.normalize("  John   Smith , ") == "John Smith"
        assert stages.normalize("Smith,,") == "Smith"

    def test_inner_comma_kept(self):
        """Test commas inside the name survive."""
        assert stages.normalize("Smith,  John") == "Smith, John"

    @pytest.mark.parametrize("text", [
        "  John   Smith , ",
        "Smith,,",
        "Smith, John Q",
        " ,",
        "",
        "van der  Berg\t, Jan",
    ])
    def test_idempotent(self, text):
        """Test normalizing twice equals normalizing once."""
        once = stages.normalize(text)
        assert stages.normalize(once) == once


class TestRemoveToken:
    """Tests for match removal."""

    def test_removes_every_match(self):
        """Test unlimited removal replaces all matches."""
        pattern = re.compile(r"\bjr\b", re.I)
        assert stages.remove_token("John Jr Smith Jr", pattern) == "John Smith"

    def test_without_normalization(self):
        """Test the replacement space survives without normalization."""
        pattern = re.compile(r"^dr\.", re.I)
        assert stages.remove_token("Dr. Smith", pattern, normalize_result=False) == "  Smith"

    def test_limit_with_single_match(self):
        """Test a limited strip with exactly one match."""
        pattern = re.compile(r"\s+jr$", re.I)
        assert stages.remove_token("John Smith Jr", pattern, limit=1) == "John Smith"

    def test_limit_with_multiple_matches(self):
        """Test a limited strip refuses to pick between matches."""
        pattern = re.compile(r"\bjr\b", re.I)
        with pytest.raises(AmbiguousMatchError):
            stages.remove_token("John Jr Smith Jr", pattern, limit=1)

    def test_ambiguous_suffix(self):
        """Test two suffix-like matches under the suffix stage."""
        pattern = re.compile(r"\s+(jr\.*)\b", re.I)
        with pytest.raises(AmbiguousMatchError):
            stages.find_suffix("John Jr. Smith Jr.", pattern)


class TestFlipNameToken:
    """Tests for flipping name parts around a delimiter."""

    def test_one_delimiter(self):
        """Test two parts are swapped."""
        assert stages.flip_name_token("Smith / John", "/", SLASH_FLIPS) == "John Smith"
        assert stages.flip_name_token("Smith, John Q", ",", COMMA_FLIPS) == "John Q Smith"

    def test_two_delimiters(self):
        """Test three parts follow the declared order."""
        assert stages.flip_name_token("Smith / John / Dr.", "/", SLASH_FLIPS) == "Dr. John Smith"
        assert stages.flip_name_token("Smith, John, Paul", ",", COMMA_FLIPS) == "John Paul Smith"
        assert stages.flip_name_token("Smith John Paul", " ", SPACE_FLIPS) == "John Paul Smith"

    def test_no_matching_arity(self):
        """Test other delimiter counts leave the string unchanged."""
        assert stages.flip_name_token("John Smith", ",", COMMA_FLIPS) == "John Smith"
        assert stages.flip_name_token("a, b, c, d", ",", COMMA_FLIPS) == "a, b, c, d"

    def test_empty_piece(self):
        """Test an empty piece does not leave stray spaces."""
        assert stages.flip_name_token("Smith /", "/", SLASH_FLIPS) == "Smith"


class TestPatterns:
    """Tests for pattern compilation."""

    def test_prefix_alternation_requires_space(self):
        """Test prefixes only match when followed by a space."""
        alternation = build_alternation(["van", "de la"], " ")
        assert re.fullmatch(alternation, "de la ")
        assert re.fullmatch(alternation, "van ")
        assert not re.fullmatch(alternation, "van")

    def test_suffix_alternation_allows_dots(self):
        """Test suffix entries take any number of trailing dots."""
        alternation = build_alternation(["jr", "(child)"], r"\.*")
        assert re.fullmatch(alternation, "jr..")
        assert re.fullmatch(alternation, "(child)")

    def test_empty_list_never_matches(self):
        """Test an empty word list compiles to a pattern without matches."""
        alternation = build_alternation([], r"\.*")
        assert re.search(alternation, "jr") is None
        assert re.search(alternation, "") is None


class TestStages:
    """Tests for each stage in isolation."""

    def test_combined_title(self):
        """Test a leading Mrs. / Ms. pair."""
        token, title = stages.find_combined_title("Mrs. / Ms. Smith / Jane")

        assert title == "Mrs. / Ms."
        assert token.strip() == "Smith / Jane"

    def test_combined_title_missing(self):
        """Test a name without the combined title."""
        assert stages.find_combined_title("Jane Smith") == ("Jane Smith", None)

    def test_trailing_title_flips(self, patterns):
        """Test a trailing title triggers a flip on spaces."""
        token, title = stages.find_trailing_title("Smith John Paul Dr.", patterns.trailing_title)

        assert title == "Dr"
        assert token == "John Paul Smith"

    def test_trailing_title_missing(self, patterns):
        """Test names without a trailing title are not flipped."""
        assert stages.find_trailing_title("Smith John", patterns.trailing_title) == ("Smith John", None)

    def test_academic_title(self, patterns):
        """Test a title anywhere in the name."""
        token, title = stages.find_academic_title("Mr. John Smith", patterns.title)

        assert title == "Mr"
        assert token == "John Smith"

    def test_title_inside_word_ignored(self, patterns):
        """Test titles only match whole words."""
        token, title = stages.find_academic_title("Andrew Williams", patterns.title)

        assert title is None
        assert token == "Andrew Williams"

    def test_nickname_quotes(self):
        """Test single and double quoted nicknames."""
        assert stages.find_nickname('John "Johnny" Smith') == ("John Smith", "Johnny")
        assert stages.find_nickname("Bill 'Billy' Clinton") == ("Bill Clinton", "Billy")

    def test_nickname_parentheses(self):
        """Test parenthesised nicknames."""
        assert stages.find_nickname("William (Bill) Gates") == ("William Gates", "Bill")

    def test_nickname_at_edge_ignored(self):
        """Test quotes at the edges of the name are not a nickname."""
        assert stages.find_nickname("'Bill Clinton'") == ("'Bill Clinton'", None)
        assert stages.find_nickname("Conan O'Brien") == ("Conan O'Brien", None)

    def test_suffix(self, patterns):
        """Test suffixes with and without a comma."""
        assert stages.find_suffix("John Smith, Jr.", patterns.suffix) == ("John Smith", "Jr")
        assert stages.find_suffix("Jane Doe PhD", patterns.suffix) == ("Jane Doe", "PhD")
        assert stages.find_suffix("John Smith (child)", patterns.suffix) == ("John Smith", "(child)")

    def test_suffix_requires_whitespace(self, patterns):
        """Test a suffix must be a separate word."""
        assert stages.find_suffix("John Smithjr", patterns.suffix) == ("John Smithjr", None)

    def test_last_name(self, patterns):
        """Test the last name absorbs prefixes."""
        assert stages.find_last_name("John van der Berg", patterns.last_name) == ("John", "van der Berg")
        assert stages.find_last_name("Juan de la Cruz", patterns.last_name) == ("Juan", "de la Cruz")

    def test_last_name_with_conjunction(self, patterns):
        """Test Spanish double surnames joined by 'y'."""
        token, last_name = stages.find_last_name("Juan Garcia y Lopez", patterns.last_name)

        assert last_name == "Garcia y Lopez"
        assert token == "Juan"

    def test_last_name_not_at_start(self, patterns):
        """Test a single word is not taken as last name."""
        with pytest.raises(LastNameNotFound):
            stages.find_last_name("Madonna", patterns.last_name)

        assert stages.find_last_name("Madonna", patterns.last_name, mandatory=False) == ("Madonna", None)

    def test_leading_initial(self):
        """Test an initial followed by a real word."""
        assert stages.find_leading_initial("J. Edgar") == ("Edgar", "J.")
        assert stages.find_leading_initial("J Edgar") == ("Edgar", "J")

    def test_leading_initial_needs_word(self):
        """Test an initial followed by another initial stays."""
        assert stages.find_leading_initial("J. R.") == ("J. R.", None)
        assert stages.find_leading_initial("John") == ("John", None)

    def test_first_name(self):
        """Test the leftmost word is the first name."""
        assert stages.find_first_name("John Paul") == ("Paul", "John")

    def test_first_name_missing(self):
        """Test a missing first name."""
        with pytest.raises(FirstNameNotFound):
            stages.find_first_name("")

        assert stages.find_first_name("", mandatory=False) == ("", None)

    def test_middle_name(self):
        """Test the remainder becomes the middle name."""
        assert stages.find_middle_name("Paul Q") == ("", "Paul Q")
        assert stages.find_middle_name("") == ("", None)
