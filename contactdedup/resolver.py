"""
Contact deduplication orchestrator.

Responsibilities:
- Enumerate every unordered pair of contacts exactly once.
- Invoke scoring logic for each pair.
- Apply the report threshold and render scores.

Non-Responsibilities:
- No file access.
- No feature computation.
- No merging of duplicate contacts.

Invariant:
This module must be deterministic given the same inputs:
pairs are visited in ascending (source_id, match_id) order.
"""

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Mapping

from .logger import get_logger
from .schema import Contact
from .scoring import DEFAULT_WEIGHTS, ScoreBreakdown, ScoringWeights, explain, label_score


class ContactNotFoundError(LookupError):
    """Raised when a contact ID is not part of the collection."""

    def __init__(self, contact_id: int):
        self.contact_id = contact_id
        super().__init__(f"contact not found: {contact_id}")


def render_score(score: float, use_labels: bool = True) -> str:
    """Render a score as its label, or as a two-decimal number."""
    if use_labels:
        return label_score(score)
    return f"{score:.2f}"


@dataclass(frozen=True)
class ReportRow:
    source_id: int
    match_id: int
    score: float
    accuracy: str


class Deduplicator:
    """Scores every pair of a read-only contact collection."""

    def __init__(self, contacts: Mapping[int, Contact], weights: ScoringWeights = DEFAULT_WEIGHTS):
        self._contacts: Dict[int, Contact] = dict(contacts)
        self._ids: List[int] = sorted(self._contacts)
        self.weights = weights

    def __len__(self) -> int:
        return len(self._contacts)

    def _get(self, contact_id: int) -> Contact:
        try:
            return self._contacts[contact_id]
        except KeyError:
            raise ContactNotFoundError(contact_id) from None

    def compare(self, source_id: int, match_id: int) -> ScoreBreakdown:
        """Score breakdown for a single pair, in either order."""
        return explain(self._get(source_id), self._get(match_id), self.weights)

    def score(self, contact_id: int) -> Dict[int, float]:
        """
        Score a contact against every contact with a greater ID.

        Lower IDs are skipped because those pairs were already scored from
        the other side, which halves the comparisons.

        Raises:
            ContactNotFoundError: if contact_id is not in the collection
        """
        logger = get_logger()
        source = self._get(contact_id)
        scores: Dict[int, float] = {}
        for match_id in self._ids[bisect_right(self._ids, contact_id):]:
            breakdown = explain(source, self._contacts[match_id], self.weights)
            logger.record_pair_scored(breakdown.email_match)
            scores[match_id] = breakdown.total
        return scores

    def all_pair_scores(self) -> Dict[int, Dict[int, float]]:
        """Scores of every unordered pair, keyed by the lower ID then the higher."""
        return {contact_id: self.score(contact_id) for contact_id in self._ids}

    def generate_report(self, threshold: float = 0.0, use_labels: bool = True) -> List[ReportRow]:
        """
        Build report rows for every pair scoring at least `threshold`.

        Args:
            threshold: Minimum score for a pair to be reported
            use_labels: Render scores as labels instead of two-decimal numbers

        Returns:
            Rows ordered by (source_id, match_id)

        Raises:
            ValueError: if threshold is NaN
        """
        if math.isnan(threshold):
            raise ValueError("threshold must be a number, got NaN")
        logger = get_logger()
        logger.info(
            "Generating report",
            contacts=len(self._contacts),
            threshold=threshold,
            use_labels=use_labels,
        )

        rows: List[ReportRow] = []
        # one source at a time; only emitted rows are kept
        for source_id in self._ids:
            for match_id, score in self.score(source_id).items():
                if score < threshold:
                    logger.record_row_suppressed()
                    continue
                logger.record_row_emitted(label_score(score))
                rows.append(ReportRow(source_id, match_id, score, render_score(score, use_labels)))

        logger.debug("Report generated", rows=len(rows))
        return rows
