# review_insights/application/dto/analysis_dto.py
from __future__ import annotations

from dataclasses import dataclass

from review_insights.domain.models import SentimentResult


@dataclass(frozen=True)
class ProcessReviewRequest:
    """
    DTO for analysing one imported review.

    - review_id: caller's review key (non-empty)
    - company_id: tenant whose active staff roster is searched
    - text: review body as imported from the platform
    - confidence_threshold: mentions must score strictly above this to be accepted
    """

    review_id: str
    company_id: str
    text: str
    confidence_threshold: float = 0.5


@dataclass(frozen=True)
class AcceptedMention:
    """Mention ready to be stored as a (review, staff) row."""

    review_id: str
    staff_id: str
    matched_text: str
    context: str
    confidence: float


@dataclass(frozen=True)
class ReviewAnalysis:
    review_id: str
    sentiment: SentimentResult
    mentions: tuple[AcceptedMention, ...]


@dataclass(frozen=True)
class BatchSentimentRequest:
    texts: tuple[str, ...]
