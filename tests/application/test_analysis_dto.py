"""Tests for analysis DTOs."""

import pytest

from review_insights.application.dto.analysis_dto import ProcessReviewRequest


def test_process_review_request_defaults() -> None:
    req = ProcessReviewRequest(review_id="r1", company_id="c1", text="hi")
    assert req.confidence_threshold == 0.5


def test_process_review_request_is_frozen() -> None:
    req = ProcessReviewRequest(review_id="r1", company_id="c1", text="hi")
    with pytest.raises(AttributeError):
        req.text = "changed"  # type: ignore[misc]
