from typing import Optional

from rapidfuzz.distance import Levenshtein

from agents.matcher.config import UNUSABLE_DISTANCE


def edit_distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Case-insensitive Levenshtein distance between two strings.

    Empty or missing input yields UNUSABLE_DISTANCE rather than the length
    of the other string, so such a candidate can never be accepted.
    """
    if not a or not b:
        return UNUSABLE_DISTANCE
    return Levenshtein.distance(a.lower(), b.lower())
