from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from review_insights.domain.models import StaffRef


class StaffDirectoryPort(Protocol):
    """Port for loading the roster searched by mention detection."""

    def active_staff(self, company_id: str) -> Sequence[StaffRef]:
        """Return active staff of `company_id` (empty if unknown)."""
        ...
