"""Application settings with environment-driven configuration.

Why: Single place that reads the environment; other layers receive
     settings via dependency injection.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from environment variables.

    This is the ONLY place where environment variables are read.
    All other layers receive settings via dependency injection.
    """

    # ===== Mention Detection =====
    mention_threshold: float = field(
        default_factory=lambda: float(os.getenv("REVIEW_MENTION_THRESHOLD", "0.5"))
    )
    # Mentions must score strictly above this to be stored (0.0-1.0)

    context_radius: int = field(
        default_factory=lambda: int(os.getenv("REVIEW_CONTEXT_RADIUS", "50"))
    )
    # Characters kept on each side of a match

    # ===== Staff Roster =====
    staff_roster_path: str = field(
        default_factory=lambda: os.getenv("STAFF_ROSTER_PATH", "var/staff.json")
    )

    # ===== Logging =====
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # ===== Telemetry Configuration =====
    telemetry_enabled: bool = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENABLED", "false").lower() == "true"
    )
    otlp_endpoint: str = field(default_factory=lambda: os.getenv("OTLP_ENDPOINT", ""))
    # Empty string = no OTLP export

    telemetry_environment: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENVIRONMENT", "production")
    )
