"""
Scoring logic for contact deduplication.

Responsibilities:
- Compute a deterministic match score between two contacts.
- Emit a score breakdown for explanations.
- Map a score onto a discrete accuracy label.

Non-Responsibilities:
- No file access.
- No pair enumeration.
- No threshold decisions.

Invariant:
Given identical inputs, this module must always return
the same score, and score(a, b) == score(b, a).
"""

from dataclasses import dataclass

from .features import VAL_MATCH, elementary_similarity, name_similarity
from .schema import Contact


@dataclass(frozen=True)
class ScoringWeights:
    """
    Weights and floors combining field similarities into one score.

    The weights are arbitrary; ideally each would reflect the share of people
    sharing that attribute. Floors cap how much a mismatch can hurt, since one
    person may hold several emails or addresses over time.
    """

    first_name: float = 0.3
    last_name: float = 0.7
    full_name: float = 0.4

    zip_code: float = 0.1
    address: float = 0.9
    full_address: float = 0.6

    # people changing name is negligible
    min_name: float = -1.0
    # work, personal and old email addresses
    min_email: float = -0.2
    # work address, home address and a recent move
    min_address: float = -(1.0 / 3)


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class ScoreBreakdown:
    """Components of a pair score. `email_match` means the email short-circuit fired."""

    email: float
    full_name: float
    full_address: float
    total: float
    email_match: bool = False


def explain(a: Contact, b: Contact, weights: ScoringWeights = DEFAULT_WEIGHTS) -> ScoreBreakdown:
    """
    Score two contacts and return every component of the score.

    An exact email match is decisive: the result is 1.0 and no other field
    is consulted.
    """
    sim_email = max(weights.min_email, elementary_similarity(a.email, b.email))
    if sim_email == VAL_MATCH:
        return ScoreBreakdown(
            email=sim_email,
            full_name=0.0,
            full_address=0.0,
            total=VAL_MATCH,
            email_match=True,
        )

    sim_first = weights.first_name * max(weights.min_name, name_similarity(a.first_name, b.first_name))
    sim_last = weights.last_name * max(weights.min_name, name_similarity(a.last_name, b.last_name))
    sim_full_name = weights.full_name * (sim_first + sim_last)
    if sim_first < 0 or sim_last < 0:  # one mismatching name sinks the full name
        sim_full_name = weights.full_name * weights.min_name

    sim_zip = weights.zip_code * max(weights.min_address, elementary_similarity(a.zip_code, b.zip_code))
    sim_address = weights.address * max(weights.min_address, elementary_similarity(a.address, b.address))
    sim_full_address = weights.full_address * (sim_zip + sim_address)

    return ScoreBreakdown(
        email=sim_email,
        full_name=sim_full_name,
        full_address=sim_full_address,
        total=sim_full_name + sim_full_address + sim_email,
    )


def similarity(a: Contact, b: Contact, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Score in [-1.0, 1.0] estimating whether two contacts are the same person."""
    return explain(a, b, weights).total


ACCURACY_HIGH = 0.7
ACCURACY_MED = 0.4
ACCURACY_NULL = 0.0
ACCURACY_NMED = -ACCURACY_MED
ACCURACY_NHIGH = -ACCURACY_HIGH

LABEL_HIGH = "High"
LABEL_MED = "Medium"
LABEL_LOW = "Low"
LABEL_NULL = "Zero"
LABEL_NLOW = "Negative Low"
LABEL_NMED = "Negative Medium"
LABEL_NHIGH = "Negative High"

LABELS = [LABEL_HIGH, LABEL_MED, LABEL_LOW, LABEL_NULL, LABEL_NLOW, LABEL_NMED, LABEL_NHIGH]


def label_score(score: float) -> str:
    """Bucket a score into one of LABELS, highest first."""
    if score >= ACCURACY_HIGH:
        return LABEL_HIGH
    if score >= ACCURACY_MED:
        return LABEL_MED
    if score > ACCURACY_NULL:
        return LABEL_LOW
    if score == ACCURACY_NULL:
        return LABEL_NULL
    if score > ACCURACY_NMED:
        return LABEL_NLOW
    if score >= ACCURACY_NHIGH:
        return LABEL_NMED
    return LABEL_NHIGH
