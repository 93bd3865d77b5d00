"""Domain errors (typed) for review analysis.

Why: Unified error family for Application layer, without Infra leaks.
"""

from dataclasses import dataclass


class DomainError(Exception):
    """Base class for domain-specific errors."""


class ValidationError(DomainError):
    """Invalid input/domain state."""


class InvalidArgumentError(ValidationError):
    """Argument outside the domain of an analysis operation (e.g. empty batch)."""


@dataclass(frozen=True)
class StaffDirectoryError(DomainError):
    """Staff roster could not be loaded (after infra errors were mapped)."""

    company_id: str
    detail: str = ""

    def __str__(self) -> str:
        return f"staff roster unavailable for company {self.company_id!r}: {self.detail}"
