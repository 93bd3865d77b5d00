"""Plain-dict views of domain/application results for CLI and HTTP output."""

from __future__ import annotations

from typing import Any

from review_insights.application.dto.analysis_dto import ReviewAnalysis
from review_insights.domain.models import (
    BatchSentimentResult,
    MentionCandidate,
    SentimentResult,
    SentimentTrend,
)


def sentiment_to_dict(r: SentimentResult) -> dict[str, Any]:
    return {"sentiment": r.sentiment.value, "confidence": r.confidence, "score": r.score}


def batch_to_dict(b: BatchSentimentResult) -> dict[str, Any]:
    return {
        "overall": sentiment_to_dict(b.overall),
        "individual": [sentiment_to_dict(r) for r in b.individual],
        "distribution": {
            "positive": b.distribution.positive,
            "neutral": b.distribution.neutral,
            "negative": b.distribution.negative,
        },
    }


def mention_to_dict(m: MentionCandidate) -> dict[str, Any]:
    return {
        "staff_id": m.staff_id,
        "matched_text": m.matched_text,
        "context": m.context,
        "confidence": m.confidence,
        "start_index": m.start_index,
        "end_index": m.end_index,
        "kind": m.kind.value,
    }


def analysis_to_dict(a: ReviewAnalysis) -> dict[str, Any]:
    return {
        "review_id": a.review_id,
        "sentiment": sentiment_to_dict(a.sentiment),
        "mentions": [
            {
                "staff_id": m.staff_id,
                "matched_text": m.matched_text,
                "context": m.context,
                "confidence": m.confidence,
            }
            for m in a.mentions
        ],
    }


def trend_to_dict(t: SentimentTrend) -> dict[str, Any]:
    return {"trend": t.direction.value, "change": t.change, "period": t.period}
