"""Hangul leading-consonant (초성) extraction."""

# 19 leading consonants in Unicode syllable order
CHOSUNG = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

HANGUL_BASE = 0xAC00  # '가'
HANGUL_SYLLABLE_COUNT = 11172  # up to '힣'
SYLLABLES_PER_INITIAL = 588  # 21 vowels * 28 finals

_CHOSUNG_SET = frozenset(CHOSUNG)


def is_hangul_syllable(char: str) -> bool:
    """Check whether a single character is a precomposed Hangul syllable."""
    return 0 <= ord(char) - HANGUL_BASE < HANGUL_SYLLABLE_COUNT


def extract_initials(text: str) -> str:
    """
    Reduce text to its Hangul leading consonants.

    Each Hangul syllable is replaced by its initial consonant; every other
    character is kept as is, so the output has the same length as the input.

    Examples:
        >>> extract_initials("타이레놀")
        'ㅌㅇㄹㄴ'
        >>> extract_initials("타이레놀정500mg")
        'ㅌㅇㄹㄴㅈ500mg'
    """
    if not text:
        return ""

    result = []
    for char in text:
        offset = ord(char) - HANGUL_BASE
        if 0 <= offset < HANGUL_SYLLABLE_COUNT:
            result.append(CHOSUNG[offset // SYLLABLES_PER_INITIAL])
        else:
            result.append(char)

    return "".join(result)


def is_initials_only(text: str) -> bool:
    """Check whether text is written purely in leading consonants (e.g. 'ㅌㅇㄹㄴ')."""
    stripped = "".join(text.split()) if text else ""
    if not stripped:
        return False
    return all(char in _CHOSUNG_SET for char in stripped)
