"""Edit distance between drug names."""

from typing import Sequence, Union

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: Union[str, Sequence[str]], b: Union[str, Sequence[str]]) -> int:
    """
    Levenshtein distance between two character sequences.

    Counts the minimum number of single-character insertions, deletions
    or substitutions (each of cost 1) needed to turn ``a`` into ``b``.
    If either side is empty the distance is the other side's length.

    Args:
        a: First string or sequence of characters
        b: Second string or sequence of characters

    Returns:
        Non-negative edit distance
    """
    if not a:
        return len(b)
    if not b:
        return len(a)
    return Levenshtein.distance(a, b)
