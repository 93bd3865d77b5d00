# review_insights/domain/services/ranking.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from collections.abc import Sequence

from review_insights.domain.models import MentionCandidate


def deduplicate_mentions(candidates: Sequence[MentionCandidate]) -> list[MentionCandidate]:
    """
    Keep one candidate per (staff_id, start_index, end_index).

    - A later candidate replaces the kept one only with strictly higher confidence,
      so equal-confidence ties keep the first one seen.
    - Result is sorted by descending confidence; the sort is stable, so ties keep
      input order.
    """
    seen: dict[tuple[str, int, int], MentionCandidate] = {}
    for c in candidates:
        existing = seen.get(c.key)
        if existing is None or c.confidence > existing.confidence:
            seen[c.key] = c
    return sorted(seen.values(), key=lambda m: m.confidence, reverse=True)


def filter_by_confidence(
    candidates: Sequence[MentionCandidate],
    threshold: float = 0.5,
) -> list[MentionCandidate]:
    """Candidates strictly above `threshold`, order preserved."""
    return [c for c in candidates if c.confidence > threshold]


def best_per_staff(candidates: Sequence[MentionCandidate]) -> list[MentionCandidate]:
    """
    Collapse to one candidate per staff member (highest confidence, first on ties).

    Matches the storage model of one mention row per (review, staff).
    """
    best: dict[str, MentionCandidate] = {}
    for c in candidates:
        existing = best.get(c.staff_id)
        if existing is None or c.confidence > existing.confidence:
            best[c.staff_id] = c
    return sorted(best.values(), key=lambda m: m.confidence, reverse=True)
