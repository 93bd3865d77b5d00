"""OpenTelemetry adapter for review-analysis metrics.

Why: Throughput and mention/sentiment distributions of the ingestion
     pipeline must be observable without touching domain code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from review_insights.application.ports import TelemetryPort

logger = logging.getLogger(__name__)


@dataclass
class OtelConfig:
    """Configuration for OpenTelemetry."""

    service_name: str = "review-insights"
    otlp_endpoint: str | None = None  # e.g., "http://localhost:4317"
    environment: str = "production"
    enable_console: bool = False  # Debug: print metrics to console


class NullTelemetry(TelemetryPort):
    """Telemetry disabled: every call is a no-op."""

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        return None

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        return None


class OpenTelemetryAdapter(TelemetryPort):
    """OpenTelemetry adapter for metrics.

    Metrics:
    - Counters: incr() for events (reviews processed, batch runs)
    - Histograms: observe() for distributions (sentiment score, accepted mentions)

    The SDK is imported lazily; without it installed the adapter is a no-op.
    """

    def __init__(self, cfg: OtelConfig) -> None:
        self._cfg = cfg
        self._meter: Any | None = None
        self._counters: dict[str, Any] = {}
        self._histograms: dict[str, Any] = {}
        self._init_otel()

    @property
    def enabled(self) -> bool:
        return self._meter is not None

    def _init_otel(self) -> None:
        try:
            otel_sdk = import_module("opentelemetry.sdk.metrics")
            otel_export = import_module("opentelemetry.sdk.metrics.export")
            otel_resources = import_module("opentelemetry.sdk.resources")
        except ImportError:
            logger.info("opentelemetry-sdk not installed; metrics disabled")
            return

        resource = otel_resources.Resource.create(
            {
                "service.name": self._cfg.service_name,
                "deployment.environment": self._cfg.environment,
            }
        )

        readers = []
        if self._cfg.otlp_endpoint:
            otel_otlp = import_module("opentelemetry.exporter.otlp.proto.grpc.metric_exporter")
            exporter = otel_otlp.OTLPMetricExporter(endpoint=self._cfg.otlp_endpoint)
            readers.append(otel_export.PeriodicExportingMetricReader(exporter))
        if self._cfg.enable_console:
            readers.append(
                otel_export.PeriodicExportingMetricReader(otel_export.ConsoleMetricExporter())
            )

        provider = otel_sdk.MeterProvider(resource=resource, metric_readers=readers)
        self._meter = provider.get_meter(__name__)

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        """Increment a counter metric.

        Examples:
            - incr("reviews.processed.total", {"sentiment": "POSITIVE"})
        """
        if self._meter is None:
            return
        if name not in self._counters:
            self._counters[name] = self._meter.create_counter(
                name=name,
                description=f"Counter for {name}",
            )
        self._counters[name].add(1, attributes=tags or {})

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        """Record a value on a histogram metric.

        Examples:
            - observe("reviews.sentiment.score", 0.42, {"sentiment": "POSITIVE"})
            - observe("reviews.mentions.accepted", 2, {"sentiment": "NEUTRAL"})
        """
        if self._meter is None:
            return
        if name not in self._histograms:
            self._histograms[name] = self._meter.create_histogram(
                name=name,
                description=f"Histogram for {name}",
            )
        self._histograms[name].record(value, attributes=tags or {})
