"""Tests for domain errors."""

import pytest

from review_insights.domain.errors import (
    DomainError,
    InvalidArgumentError,
    StaffDirectoryError,
    ValidationError,
)


def test_invalid_argument_is_validation_error() -> None:
    err = InvalidArgumentError("empty batch")
    assert isinstance(err, ValidationError)
    assert isinstance(err, DomainError)
    assert str(err) == "empty batch"


def test_staff_directory_error_carries_company() -> None:
    err = StaffDirectoryError(company_id="c1", detail="file missing")
    assert isinstance(err, DomainError)
    assert err.company_id == "c1"
    assert "c1" in str(err)
    assert "file missing" in str(err)


def test_staff_directory_error_is_frozen() -> None:
    err = StaffDirectoryError(company_id="c1")
    with pytest.raises(AttributeError):
        err.company_id = "c2"  # type: ignore[misc]
