"""
Field comparison for contact deduplication.

Responsibilities:
- Compare two values of a single field (name, email, zip, address).
- Return an elementary similarity: match, mismatch, unknown or partial.

Non-Responsibilities:
- No weighting logic.
- No threshold logic.

Invariant:
Missing data must never be treated as a mismatch.
"""

VAL_MATCH = 1.0
VAL_PARTIAL_MATCH = 0.75
VAL_MISMATCH = -1.0
VAL_UNKNOWN = 0.0


def elementary_similarity(s1: str, s2: str) -> float:
    """Exact-match comparison; an empty value on either side is unknown."""
    if not s1 or not s2:
        return VAL_UNKNOWN
    if s1 == s2:
        return VAL_MATCH
    return VAL_MISMATCH


def name_similarity(s1: str, s2: str) -> float:
    """
    Like elementary_similarity, but a single-character name is treated as an
    initial and only first characters are compared.

    "J" vs "John" is a partial match, "J" vs "Mary" a mismatch. Two identical
    initials are still only a partial match.
    """
    sim = elementary_similarity(s1, s2)
    if sim == VAL_UNKNOWN:
        return sim
    if len(s1) == 1 or len(s2) == 1:
        if s1[0] == s2[0]:
            return VAL_PARTIAL_MATCH
        return VAL_MISMATCH
    return sim
