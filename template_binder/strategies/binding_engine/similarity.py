"""Normalized string similarity based on Levenshtein edit distance."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost edit distance (insertion, deletion, substitution)."""
    return Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """Case-insensitive similarity in ``[0, 1]``.

    Two empty strings are identical; one empty string matches nothing.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    a, b = a.lower(), b.lower()
    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))
