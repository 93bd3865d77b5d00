"""Process-wide logging setup for CLI and HTTP entry points."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "review_insights.console"


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the package logger (idempotent)."""
    logger = logging.getLogger("review_insights")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
