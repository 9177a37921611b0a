"""Text normalization for drug name comparison."""

from typing import Optional


class TextNormalizer:
    """Canonicalizes drug names before they are compared."""

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize a drug name for comparison.

        Lowercases the text and keeps only alphanumeric characters, which
        removes whitespace and punctuation while keeping Hangul syllables,
        Hangul consonants, Latin letters and digits.

        Args:
            text: Raw name or query

        Returns:
            Normalized text, or an empty string for empty input
        """
        if not text:
            return ""

        # Lowercase first so characters produced by lowering are filtered too
        lowered = text.lower()

        return "".join(char for char in lowered if char.isalnum())

    def fold(self, text: Optional[str]) -> str:
        """
        Lightweight case and whitespace fold used inside scoring.

        Args:
            text: Input text

        Returns:
            Lowercased text with surrounding whitespace removed
        """
        if not text:
            return ""
        return text.lower().strip()
