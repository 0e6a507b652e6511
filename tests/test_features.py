"""
Tests for field comparison.
"""

import pytest
from contactdedup.features import (
    VAL_MATCH,
    VAL_MISMATCH,
    VAL_PARTIAL_MATCH,
    VAL_UNKNOWN,
    elementary_similarity,
    name_similarity,
)


class TestElementarySimilarity:
    """Test exact-match comparison."""

    def test_equal_values_match(self):
        assert elementary_similarity("foo@gmail.com", "foo@gmail.com") == VAL_MATCH

    def test_different_values_mismatch(self):
        assert elementary_similarity("foo@gmail.com", "bar@gmail.com") == VAL_MISMATCH

    @pytest.mark.parametrize("s1,s2", [("", "foo"), ("foo", ""), ("", "")])
    def test_empty_is_unknown(self, s1, s2):
        """Missing data is unknown, never a mismatch."""
        assert elementary_similarity(s1, s2) == VAL_UNKNOWN

    def test_case_sensitive(self):
        assert elementary_similarity("Foo", "foo") == VAL_MISMATCH

    def test_whitespace_is_significant(self):
        assert elementary_similarity("foo ", "foo") == VAL_MISMATCH


class TestNameSimilarity:
    """Test name comparison with initials."""

    def test_full_names_match(self):
        assert name_similarity("John", "John") == VAL_MATCH

    def test_full_names_mismatch(self):
        assert name_similarity("John", "Mary") == VAL_MISMATCH

    def test_unknown_name(self):
        assert name_similarity("", "J") == VAL_UNKNOWN
        assert name_similarity("John", "") == VAL_UNKNOWN

    def test_initial_matches_name(self):
        """An initial agreeing with the name is a partial match."""
        assert name_similarity("J", "John") == VAL_PARTIAL_MATCH
        assert name_similarity("John", "J") == VAL_PARTIAL_MATCH

    def test_initial_mismatches_name(self):
        assert name_similarity("M", "John") == VAL_MISMATCH

    def test_identical_initials_are_partial(self):
        """Two equal initials are not enough for a full match."""
        assert name_similarity("J", "J") == VAL_PARTIAL_MATCH

    def test_different_initials(self):
        assert name_similarity("J", "M") == VAL_MISMATCH

    def test_initial_is_case_sensitive(self):
        assert name_similarity("j", "John") == VAL_MISMATCH

    def test_non_ascii_initial(self):
        """Initials are compared by character, not by byte."""
        assert name_similarity("É", "Émile") == VAL_PARTIAL_MATCH
