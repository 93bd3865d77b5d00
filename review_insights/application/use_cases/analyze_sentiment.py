# review_insights/application/use_cases/analyze_sentiment.py
from __future__ import annotations

import logging
from collections.abc import Sequence

from review_insights.application.dto.analysis_dto import BatchSentimentRequest
from review_insights.application.ports.telemetry_port import TelemetryPort
from review_insights.domain.errors import InvalidArgumentError
from review_insights.domain.models import BatchSentimentResult, LabelledReview, SentimentTrend
from review_insights.domain.services.sentiment_scoring import SentimentScorer
from review_insights.domain.services.trends import analyze_trends
from review_insights.domain.types import Result

logger = logging.getLogger(__name__)


class AnalyzeSentimentBatch:
    """Scores a batch of review texts (e.g. every review still missing a label)."""

    def __init__(
        self,
        scorer: SentimentScorer | None = None,
        telemetry: TelemetryPort | None = None,
    ) -> None:
        self.scorer = scorer or SentimentScorer()
        self.telemetry = telemetry

    def execute(self, req: BatchSentimentRequest) -> Result[BatchSentimentResult, Exception]:
        try:
            batch = self.scorer.analyze_batch(req.texts)
        except InvalidArgumentError as ex:
            return Result.failure(ex)

        if self.telemetry is not None:
            self.telemetry.observe(
                "sentiment.batch.size",
                float(len(req.texts)),
                {"overall": batch.overall.sentiment.value},
            )
        logger.info(
            "scored %d texts: +%d ~%d -%d",
            len(req.texts),
            batch.distribution.positive,
            batch.distribution.neutral,
            batch.distribution.negative,
        )
        return Result.success(batch)


class AnalyzeSentimentTrends:
    """Direction of stored review sentiment over time."""

    def execute(self, reviews: Sequence[LabelledReview]) -> Result[SentimentTrend, Exception]:
        trend = analyze_trends(reviews)
        logger.debug("trend over %d reviews: %s", len(reviews), trend.direction.value)
        return Result.success(trend)
