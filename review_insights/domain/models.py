# review_insights/domain/models.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Sentiment(str, Enum):
    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"


class MentionKind(str, Enum):
    FULL_NAME = "full_name"
    POSITION = "position"
    PARTIAL_NAME = "partial_name"


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True)
class StaffRef:
    """
    Roster entry supplied by the caller.

    - id:        stable staff identifier (owned by the caller's schema)
    - name:      display name, e.g. "Maria Lopez"
    - position:  optional role, e.g. "manager"; None skips role-based matching
    """

    id: str
    name: str
    position: str | None = None


@dataclass(frozen=True)
class SentimentResult:
    """Label plus confidence in [0, 1] and signed score in [-1, 1]."""

    sentiment: Sentiment
    confidence: float
    score: float


@dataclass(frozen=True)
class SentimentDistribution:
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative


@dataclass(frozen=True)
class BatchSentimentResult:
    """Aggregate over several texts; `individual` keeps input order."""

    overall: SentimentResult
    individual: tuple[SentimentResult, ...]
    distribution: SentimentDistribution


@dataclass(frozen=True)
class MentionCandidate:
    """
    One detected occurrence of a staff member inside a review.

    Offsets index into the lower-cased review text; `end_index` is exclusive.
    """

    staff_id: str
    matched_text: str
    context: str
    confidence: float
    start_index: int
    end_index: int
    kind: MentionKind = MentionKind.FULL_NAME

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.staff_id, self.start_index, self.end_index)


@dataclass(frozen=True)
class LabelledReview:
    """A review whose sentiment was already stored by the caller."""

    sentiment: Sentiment | None
    created_at: datetime


@dataclass(frozen=True)
class SentimentTrend:
    direction: TrendDirection
    change: float
    period: str
