"""Staff roster adapters (JSON file and in-memory).

Roster file layouts accepted:

- list form, single tenant:  [{"id": "s1", "name": "Maria Lopez", "position": "manager"}]
- mapping form, per tenant:  {"company-1": [...], "company-2": [...]}

Entries with "isActive": false are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from review_insights.application.ports.staff_directory_port import StaffDirectoryPort
from review_insights.domain.errors import StaffDirectoryError
from review_insights.domain.models import StaffRef

logger = logging.getLogger(__name__)


def parse_staff(entries: Iterable[Mapping[str, Any]]) -> list[StaffRef]:
    """Map raw roster records to StaffRef, dropping inactive ones."""
    staff: list[StaffRef] = []
    for raw in entries:
        if not raw.get("isActive", raw.get("is_active", True)):
            continue
        position = raw.get("position")
        staff.append(
            StaffRef(
                id=str(raw["id"]),
                name=str(raw.get("name", "")),
                position=str(position) if position else None,
            )
        )
    return staff


class InMemoryStaffDirectory(StaffDirectoryPort):
    """Roster held in memory, keyed by company id."""

    def __init__(self, rosters: Mapping[str, Sequence[StaffRef]] | None = None) -> None:
        self._rosters: dict[str, tuple[StaffRef, ...]] = {
            company: tuple(staff) for company, staff in (rosters or {}).items()
        }

    def active_staff(self, company_id: str) -> Sequence[StaffRef]:
        return self._rosters.get(company_id, ())


class JsonStaffDirectory(StaffDirectoryPort):
    """Roster read from a JSON file on each lookup (file may be edited live)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def active_staff(self, company_id: str) -> Sequence[StaffRef]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as ex:
            raise StaffDirectoryError(company_id, f"roster file not found: {self.path}") from ex
        except json.JSONDecodeError as ex:
            raise StaffDirectoryError(company_id, f"invalid roster JSON: {ex}") from ex

        if isinstance(data, list):
            entries = data
        elif isinstance(data, dict):
            entries = data.get(company_id, [])
        else:
            raise StaffDirectoryError(company_id, "roster must be a list or an object")

        try:
            staff = parse_staff(entries)
        except (KeyError, AttributeError, TypeError) as ex:
            raise StaffDirectoryError(company_id, f"malformed staff entry: {ex}") from ex
        logger.debug("loaded %d active staff for %s from %s", len(staff), company_id, self.path)
        return staff
