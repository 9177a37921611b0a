"""Unit tests for Hangul initial-consonant extraction."""

from drug_name_matcher.core.hangul import (
    CHOSUNG,
    extract_initials,
    is_hangul_syllable,
    is_initials_only,
)


class TestExtractInitials:
    """Test cases for extract_initials."""

    def test_table_has_nineteen_symbols(self):
        assert len(CHOSUNG) == 19

    def test_drug_name(self):
        """Test a pure Hangul drug name."""
        assert extract_initials("타이레놀") == "ㅌㅇㄹㄴ"
        assert extract_initials("게보린") == "ㄱㅂㄹ"

    def test_block_boundaries(self):
        """Test the first and last syllables of the Hangul block."""
        assert extract_initials("가") == "ㄱ"
        assert extract_initials("힣") == "ㅎ"
        assert extract_initials("까") == "ㄲ"

    def test_non_hangul_passes_through(self):
        """Test that Latin letters, digits and jamo are kept unchanged."""
        assert extract_initials("타이레놀정500mg") == "ㅌㅇㄹㄴㅈ500mg"
        assert extract_initials("SK하이닉스") == "SKㅎㅇㄴㅅ"
        assert extract_initials("ㅌㅇㄹㄴ") == "ㅌㅇㄹㄴ"

    def test_empty_string(self):
        assert extract_initials("") == ""

    def test_length_invariant(self):
        """Test that every input character maps to exactly one output character."""
        samples = ["", "아스피린", "Aspirin 100mg", "부루펜정200mg", "ㄱ가a1 !", "힣가나다"]
        for text in samples:
            assert len(extract_initials(text)) == len(text)


class TestHangulHelpers:
    """Test cases for the helper predicates."""

    def test_is_hangul_syllable(self):
        assert is_hangul_syllable("가")
        assert is_hangul_syllable("힣")
        assert not is_hangul_syllable("ㄱ")
        assert not is_hangul_syllable("a")

    def test_is_initials_only(self):
        assert is_initials_only("ㅌㅇㄹㄴ")
        assert is_initials_only("ㅌㅇ ㄹㄴ")
        assert not is_initials_only("타이레놀")
        assert not is_initials_only("ㅌㅇㄹㄴ500")
        assert not is_initials_only("")
