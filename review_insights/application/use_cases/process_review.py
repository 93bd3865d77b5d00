# review_insights/application/use_cases/process_review.py
from __future__ import annotations

import logging

from review_insights.application.dto.analysis_dto import (
    AcceptedMention,
    ProcessReviewRequest,
    ReviewAnalysis,
)
from review_insights.application.ports.staff_directory_port import StaffDirectoryPort
from review_insights.application.ports.telemetry_port import TelemetryPort
from review_insights.domain.errors import StaffDirectoryError, ValidationError
from review_insights.domain.services.mention_detection import MentionDetector
from review_insights.domain.services.ranking import best_per_staff, filter_by_confidence
from review_insights.domain.services.sentiment_scoring import SentimentScorer
from review_insights.domain.types import Result

logger = logging.getLogger(__name__)


class ProcessReview:
    """
    Application Use-Case run by the review-ingestion pipeline for each review.
    No I/O besides ports; handles errors via Result[T, E].

    Steps: load active roster -> detect mentions -> confidence gate ->
    one mention per staff member -> sentiment of the full review text.
    """

    def __init__(
        self,
        staff_directory: StaffDirectoryPort,
        detector: MentionDetector | None = None,
        scorer: SentimentScorer | None = None,
        telemetry: TelemetryPort | None = None,
    ) -> None:
        self.staff_directory = staff_directory
        self.detector = detector or MentionDetector()
        self.scorer = scorer or SentimentScorer()
        self.telemetry = telemetry

    def execute(self, req: ProcessReviewRequest) -> Result[ReviewAnalysis, Exception]:
        # 1) Validate
        if not req.review_id or not req.review_id.strip():
            return Result.failure(ValidationError("review_id must not be empty"))
        if not 0.0 <= req.confidence_threshold <= 1.0:
            return Result.failure(
                ValidationError("confidence_threshold must be between 0 and 1")
            )

        # 2) Load roster
        try:
            staff = list(self.staff_directory.active_staff(req.company_id))
        except StaffDirectoryError as ex:
            return Result.failure(ex)
        except Exception as ex:
            logger.warning("staff roster lookup failed for %s: %s", req.company_id, ex)
            return Result.failure(StaffDirectoryError(req.company_id, str(ex)))

        # 3) Detect + gate
        candidates = self.detector.detect_mentions(req.text, staff)
        accepted = best_per_staff(filter_by_confidence(candidates, req.confidence_threshold))
        logger.debug(
            "review %s: %d candidates, %d accepted (threshold %.2f)",
            req.review_id,
            len(candidates),
            len(accepted),
            req.confidence_threshold,
        )

        # 4) Sentiment over the whole review
        sentiment = self.scorer.analyze_sentiment(req.text)

        mentions = tuple(
            AcceptedMention(
                review_id=req.review_id,
                staff_id=m.staff_id,
                matched_text=m.matched_text,
                context=m.context,
                confidence=m.confidence,
            )
            for m in accepted
        )
        self._record(sentiment.sentiment.value, sentiment.score, len(mentions))
        logger.info(
            "processed review %s: sentiment=%s mentions=%d",
            req.review_id,
            sentiment.sentiment.value,
            len(mentions),
        )
        return Result.success(
            ReviewAnalysis(review_id=req.review_id, sentiment=sentiment, mentions=mentions)
        )

    def _record(self, label: str, score: float, mention_count: int) -> None:
        if self.telemetry is None:
            return
        tags = {"sentiment": label}
        self.telemetry.incr("reviews.processed.total", tags)
        self.telemetry.observe("reviews.mentions.accepted", float(mention_count), tags)
        self.telemetry.observe("reviews.sentiment.score", score, tags)
