"""Unit tests for Levenshtein distance."""

import pytest
from drug_name_matcher.core.distance import levenshtein_distance


class TestLevenshteinDistance:
    """Test cases for levenshtein_distance."""

    @pytest.fixture
    def sample_pairs(self):
        """Pairs of drug names with typos."""
        return [
            ("타이레놀", "타이레놀정"),
            ("타이레놀", "타이래놀"),
            ("게보린", "타이레놀"),
            ("aspirin", "asprin"),
            ("tylenol", "tylenol500mg"),
            ("", "부루펜"),
            ("지르텍", ""),
        ]

    def test_classic_example(self):
        """Test the textbook kitten/sitting example."""
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_single_insertion(self):
        """Test a single appended character."""
        assert levenshtein_distance("타이레놀", "타이레놀정") == 1

    def test_single_substitution(self):
        """Test a single substituted syllable."""
        assert levenshtein_distance("타이레놀", "타이래놀") == 1

    def test_empty_operands(self):
        """Test that an empty side yields the other side's length."""
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "") == 0

    def test_identical_strings(self, sample_pairs):
        """Test that a string is at distance zero from itself."""
        for a, _ in sample_pairs:
            assert levenshtein_distance(a, a) == 0

    def test_distance_bounds(self, sample_pairs):
        """Test that the distance never exceeds the longer length."""
        for a, b in sample_pairs:
            distance = levenshtein_distance(a, b)
            assert 0 <= distance <= max(len(a), len(b))

    def test_symmetry(self, sample_pairs):
        """Test that distance does not depend on argument order."""
        for a, b in sample_pairs:
            assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_character_sequences(self):
        """Test that lists of characters are accepted."""
        assert levenshtein_distance(list("abc"), list("abd")) == 1
