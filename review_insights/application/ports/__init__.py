"""Application ports package.

Re-exports the ports implemented by infrastructure adapters.
"""

from review_insights.application.ports.staff_directory_port import StaffDirectoryPort
from review_insights.application.ports.telemetry_port import TelemetryPort

__all__ = [
    "StaffDirectoryPort",
    "TelemetryPort",
]
