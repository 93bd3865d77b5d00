"""Metrics sink used by the review-analysis use cases."""

from typing import Any, Protocol


class TelemetryPort(Protocol):
    """Counters and histograms for processed reviews and sentiment batches.

    Adapters must never raise: a broken metrics backend cannot fail a review.
    """

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        """Count one event, e.g. a processed review tagged with its sentiment."""
        ...

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        """Record one sample, e.g. a sentiment score or an accepted-mention count."""
        ...
