# src/search/edit_distance.py

"""Levenshtein edit distance used for typo-tolerant scoring."""

from rapidfuzz.distance import Levenshtein


def distance(a: str, b: str) -> int:
    """Return the minimum single-character edits turning *a* into *b*.

    Insertions, deletions and substitutions each cost 1.  No case
    folding happens here; callers normalise their inputs.
    """
    return Levenshtein.distance(a, b)
