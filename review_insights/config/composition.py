"""Composition root: the only place that wires adapters into use cases."""

from dataclasses import replace

from review_insights.application.ports.staff_directory_port import StaffDirectoryPort
from review_insights.application.ports.telemetry_port import TelemetryPort
from review_insights.application.use_cases.analyze_sentiment import (
    AnalyzeSentimentBatch,
    AnalyzeSentimentTrends,
)
from review_insights.application.use_cases.process_review import ProcessReview
from review_insights.config.settings import AppSettings
from review_insights.domain.lexicons import DEFAULT_MENTION_RULES
from review_insights.domain.services.mention_detection import MentionDetector
from review_insights.domain.services.sentiment_scoring import SentimentScorer
from review_insights.infrastructure.staff.json_staff_directory import JsonStaffDirectory
from review_insights.infrastructure.telemetry.otel_adapter import (
    NullTelemetry,
    OpenTelemetryAdapter,
    OtelConfig,
)


def build_sentiment_scorer() -> SentimentScorer:
    return SentimentScorer()


def build_mention_detector(settings: AppSettings) -> MentionDetector:
    rules = DEFAULT_MENTION_RULES
    if settings.context_radius != rules.context_radius:
        rules = replace(rules, context_radius=settings.context_radius)
    return MentionDetector(rules)


def build_staff_directory(settings: AppSettings) -> StaffDirectoryPort:
    return JsonStaffDirectory(settings.staff_roster_path)


def build_telemetry(settings: AppSettings) -> TelemetryPort:
    """Build telemetry adapter.

    Returns:
        OpenTelemetryAdapter when TELEMETRY_ENABLED=true, else NullTelemetry.
    """
    if not settings.telemetry_enabled:
        return NullTelemetry()
    return OpenTelemetryAdapter(
        OtelConfig(
            otlp_endpoint=settings.otlp_endpoint or None,
            environment=settings.telemetry_environment,
        )
    )


def build_process_review_use_case(
    settings: AppSettings | None = None,
    staff_directory: StaffDirectoryPort | None = None,
) -> ProcessReview:
    settings = settings or AppSettings()
    return ProcessReview(
        staff_directory=staff_directory or build_staff_directory(settings),
        detector=build_mention_detector(settings),
        scorer=build_sentiment_scorer(),
        telemetry=build_telemetry(settings),
    )


def build_batch_sentiment_use_case(settings: AppSettings | None = None) -> AnalyzeSentimentBatch:
    settings = settings or AppSettings()
    return AnalyzeSentimentBatch(
        scorer=build_sentiment_scorer(),
        telemetry=build_telemetry(settings),
    )


def build_trends_use_case() -> AnalyzeSentimentTrends:
    return AnalyzeSentimentTrends()
