"""HTTP API for review sentiment and staff-mention analysis.

Why: Consumable API without business logic; pure delegation.
"""

import logging
from datetime import UTC, datetime
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from review_insights.application.dto.analysis_dto import (
    BatchSentimentRequest,
    ProcessReviewRequest,
)
from review_insights.application.use_cases.analyze_sentiment import (
    AnalyzeSentimentBatch,
    AnalyzeSentimentTrends,
)
from review_insights.application.use_cases.process_review import ProcessReview
from review_insights.config.composition import (
    build_batch_sentiment_use_case,
    build_mention_detector,
    build_process_review_use_case,
    build_sentiment_scorer,
    build_trends_use_case,
)
from review_insights.config.settings import AppSettings
from review_insights.domain.errors import StaffDirectoryError, ValidationError
from review_insights.domain.models import LabelledReview, Sentiment, StaffRef
from review_insights.domain.services.mention_detection import MentionDetector
from review_insights.domain.services.ranking import filter_by_confidence
from review_insights.domain.services.sentiment_scoring import SentimentScorer
from review_insights.interface.presenters import (
    analysis_to_dict,
    batch_to_dict,
    mention_to_dict,
    sentiment_to_dict,
    trend_to_dict,
)

logger = logging.getLogger(__name__)


# Pydantic models for request/response validation
class SentimentRequestModel(BaseModel):
    """Request model for /v1/sentiment endpoint."""

    text: str


class SentimentResponseModel(BaseModel):
    sentiment: Sentiment
    confidence: float
    score: float


class BatchRequestModel(BaseModel):
    """Request model for /v1/sentiment/batch endpoint."""

    texts: list[str]


class StaffModel(BaseModel):
    id: str
    name: str
    position: str | None = None


class MentionsRequestModel(BaseModel):
    """Request model for /v1/mentions endpoint."""

    text: str
    staff: list[StaffModel]
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)


class ProcessReviewRequestModel(BaseModel):
    """Request model for /v1/reviews/process endpoint."""

    review_id: str
    company_id: str
    text: str
    confidence_threshold: float | None = Field(default=None, ge=0.0, le=1.0)


class LabelledReviewModel(BaseModel):
    sentiment: Sentiment | None = None
    created_at: datetime


class TrendsRequestModel(BaseModel):
    reviews: list[LabelledReviewModel]


app = FastAPI(title="Review Insights API", version="1.0.0")


# ===== Dependencies (override in tests via app.dependency_overrides) =====


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


def get_scorer() -> SentimentScorer:
    return build_sentiment_scorer()


def get_detector(settings: AppSettings = Depends(get_settings)) -> MentionDetector:
    return build_mention_detector(settings)


def get_batch_use_case(settings: AppSettings = Depends(get_settings)) -> AnalyzeSentimentBatch:
    return build_batch_sentiment_use_case(settings)


def get_process_review_use_case(
    settings: AppSettings = Depends(get_settings),
) -> ProcessReview:
    return build_process_review_use_case(settings)


def get_trends_use_case() -> AnalyzeSentimentTrends:
    return build_trends_use_case()


# ===== Endpoints =====


@app.post("/v1/sentiment", response_model=SentimentResponseModel)
async def analyze_sentiment(
    req: SentimentRequestModel,
    scorer: SentimentScorer = Depends(get_scorer),
) -> dict[str, Any]:
    """Score one text.

    Example:
        POST /v1/sentiment
        {"text": "Our server was very friendly"}
    """
    return sentiment_to_dict(scorer.analyze_sentiment(req.text))


@app.post("/v1/sentiment/batch")
async def analyze_batch(
    req: BatchRequestModel,
    uc: AnalyzeSentimentBatch = Depends(get_batch_use_case),
) -> dict[str, Any]:
    """Score several texts; 400 if `texts` is empty."""
    result = uc.execute(BatchSentimentRequest(texts=tuple(req.texts)))
    if not result.ok or result.value is None:
        raise HTTPException(status_code=400, detail=str(result.error))
    return batch_to_dict(result.value)


@app.post("/v1/mentions")
async def detect_mentions(
    req: MentionsRequestModel,
    detector: MentionDetector = Depends(get_detector),
) -> dict[str, Any]:
    """Detect mentions of the supplied staff roster in `text`.

    Example:
        POST /v1/mentions
        {
            "text": "Maria at the front desk helped us",
            "staff": [{"id": "s1", "name": "Maria Lopez", "position": "receptionist"}],
            "threshold": 0.5
        }
    """
    staff = [StaffRef(id=s.id, name=s.name, position=s.position) for s in req.staff]
    mentions = detector.detect_mentions(req.text, staff)
    if req.threshold is not None:
        mentions = filter_by_confidence(mentions, req.threshold)
    return {"mentions": [mention_to_dict(m) for m in mentions]}


@app.post("/v1/reviews/process")
async def process_review(
    req: ProcessReviewRequestModel,
    uc: ProcessReview = Depends(get_process_review_use_case),
    settings: AppSettings = Depends(get_settings),
) -> dict[str, Any]:
    """Mentions of the company's active staff plus review sentiment."""
    threshold = (
        settings.mention_threshold
        if req.confidence_threshold is None
        else req.confidence_threshold
    )
    result = uc.execute(
        ProcessReviewRequest(
            review_id=req.review_id,
            company_id=req.company_id,
            text=req.text,
            confidence_threshold=threshold,
        )
    )
    if result.ok and result.value is not None:
        return analysis_to_dict(result.value)

    err = result.error
    if isinstance(err, ValidationError):
        raise HTTPException(status_code=400, detail=str(err))
    if isinstance(err, StaffDirectoryError):
        logger.error("review %s not processed: %s", req.review_id, err)
        raise HTTPException(status_code=502, detail=str(err))
    raise HTTPException(status_code=500, detail=f"Internal error: {err}")


@app.post("/v1/sentiment/trends")
async def sentiment_trends(
    req: TrendsRequestModel,
    uc: AnalyzeSentimentTrends = Depends(get_trends_use_case),
) -> dict[str, Any]:
    # Mixed naive/aware timestamps cannot be ordered; naive ones are read as UTC.
    reviews = [
        LabelledReview(
            sentiment=r.sentiment,
            created_at=r.created_at if r.created_at.tzinfo else r.created_at.replace(tzinfo=UTC),
        )
        for r in req.reviews
    ]
    result = uc.execute(reviews)
    if not result.ok or result.value is None:
        raise HTTPException(status_code=400, detail=str(result.error))
    return trend_to_dict(result.value)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "review-insights"}
