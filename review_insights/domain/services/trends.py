# review_insights/domain/services/trends.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from collections.abc import Sequence

from review_insights.domain.models import (
    LabelledReview,
    Sentiment,
    SentimentTrend,
    TrendDirection,
)

TREND_THRESHOLD = 0.1

_LABEL_SCORES = {
    Sentiment.POSITIVE: 1.0,
    Sentiment.NEGATIVE: -1.0,
    Sentiment.NEUTRAL: 0.0,
}


def average_label_score(reviews: Sequence[LabelledReview]) -> float:
    """Mean of +1/0/-1 per label; unlabelled reviews count as neutral."""
    if not reviews:
        return 0.0
    return sum(_LABEL_SCORES.get(r.sentiment, 0.0) for r in reviews) / len(reviews)


def analyze_trends(reviews: Sequence[LabelledReview]) -> SentimentTrend:
    """
    Compare the older half of the reviews with the newer half.

    - Fewer than two reviews -> stable, "insufficient data".
    - `change` is the absolute shift of the half-averages in percent points.
    - Input order is irrelevant; reviews are sorted by `created_at` (copy).
    """
    if len(reviews) < 2:
        return SentimentTrend(TrendDirection.STABLE, 0.0, "insufficient data")

    ordered = sorted(reviews, key=lambda r: r.created_at)
    midpoint = len(ordered) // 2
    first, second = ordered[:midpoint], ordered[midpoint:]

    change = average_label_score(second) - average_label_score(first)
    if change > TREND_THRESHOLD:
        direction = TrendDirection.IMPROVING
    elif change < -TREND_THRESHOLD:
        direction = TrendDirection.DECLINING
    else:
        direction = TrendDirection.STABLE

    return SentimentTrend(
        direction=direction,
        change=abs(change) * 100,
        period=f"{len(first)} to {len(second)} reviews",
    )
