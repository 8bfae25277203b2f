"""
Unit tests for the prefix matcher.

Tests longest-first term ordering, prefix comparison and the construction of
PrefixMatch objects from walked file entries.
"""

import itertools
import pytest

from prefix_search.models.search_results import FileEntry, PrefixMatch
from prefix_search.tools.matcher import PrefixMatcher, match_prefix, sort_terms_longest_first


class TestSortTerms:
    """Test cases for sort_terms_longest_first."""

    def test_longest_first(self):
        """Test that longer terms come first."""
        assert sort_terms_longest_first(["a", "abc", "ab"]) == ["abc", "ab", "a"]

    def test_equal_lengths_keep_given_order(self):
        """Test that the sort is stable for equal lengths."""
        assert sort_terms_longest_first(["xy", "a", "ab", "cd"]) == ["xy", "ab", "cd", "a"]

    def test_does_not_modify_input(self):
        """Test that the input list is left untouched."""
        terms = ["a", "abc"]
        sort_terms_longest_first(terms)
        assert terms == ["a", "abc"]


class TestMatchPrefix:
    """Test cases for match_prefix."""

    def test_longer_prefix_wins(self):
        """Test that 'ab' beats 'a' for 'abc.txt'."""
        terms = sort_terms_longest_first(["a", "ab"])
        assert match_prefix("abc.txt", terms) == "ab"

    def test_foobar_beats_foo(self):
        """Test that the more specific term wins."""
        terms = sort_terms_longest_first(["foo", "foobar"])
        assert match_prefix("foobar.txt", terms) == "foobar"

    def test_shorter_term_used_when_longer_does_not_match(self):
        """Test fallback to a shorter term."""
        terms = sort_terms_longest_first(["foo", "foobar"])
        assert match_prefix("food.txt", terms) == "foo"

    def test_no_match(self):
        """Test that None is returned when no term prefixes the name."""
        assert match_prefix("readme.md", ["rep", "x"]) is None

    def test_prefix_only_not_substring(self):
        """Test that terms must match at the start of the name."""
        assert match_prefix("my_report.txt", ["report"]) is None

    def test_case_sensitive(self):
        """Test that comparison is case sensitive."""
        assert match_prefix("Report.txt", ["report"]) is None
        assert match_prefix("Report.txt", ["Rep"]) == "Rep"

    def test_whole_name_match(self):
        """Test that a term equal to the whole name matches."""
        assert match_prefix("Makefile", ["Makefile"]) == "Makefile"

    def test_unicode_names(self):
        """Test prefix comparison on non-ASCII names."""
        assert match_prefix("résumé.pdf", ["ré", "r"]) == "ré"

    def test_first_hit_is_longest_matching_term(self):
        """Test that the first hit over sorted terms is the longest term that prefixes the name."""
        alphabet = ["a", "b", "ab", "ba", "abc", "abd", "bab"]
        names = ["abc.txt", "abd", "ba.md", "bab", "b", "c.txt", "a"]

        for size in range(1, 4):
            for terms in itertools.combinations(alphabet, size):
                ordered = sort_terms_longest_first(terms)
                for name in names:
                    candidates = [t for t in terms if name.startswith(t)]
                    expected = max(candidates, key=len) if candidates else None
                    assert match_prefix(name, ordered) == expected


class TestPrefixMatcher:
    """Test cases for the PrefixMatcher class."""

    def test_terms_are_sorted(self):
        """Test that the matcher stores terms longest first."""
        matcher = PrefixMatcher(["rep", "read", "r"])
        assert matcher.terms == ["read", "rep", "r"]

    def test_match_returns_prefix_match(self):
        """Test building a PrefixMatch from a file entry."""
        matcher = PrefixMatcher(["rep", "read"])
        entry = FileEntry.from_path("/a/report.txt")

        match = matcher.match(entry)

        assert isinstance(match, PrefixMatch)
        assert match.term == "rep"
        assert match.path == "/a/report.txt"
        assert match.matched == "rep"
        assert match.remainder == "ort.txt"

    def test_match_uses_base_name_only(self):
        """Test that directory components are not matched."""
        matcher = PrefixMatcher(["docs"])
        assert matcher.match(FileEntry.from_path("/docs/readme.md")) is None

    def test_no_match(self):
        """Test that unmatched entries return None."""
        matcher = PrefixMatcher(["zzz"])
        assert matcher.match(FileEntry.from_path("/a/readme.md")) is None

    @pytest.mark.parametrize("name,expected", [
        ("abc.txt", "ab"),
        ("axe", "a"),
        ("b.txt", None),
    ])
    def test_match_name(self, name, expected):
        """Test matching raw names."""
        assert PrefixMatcher(["a", "ab"]).match_name(name) == expected
