"""
Process logging setup.

The package ships no entry point of its own; the embedding application
(web app, worker or CLI) calls configure_logging() once at startup. Library
modules only create their loggers with logging.getLogger(__name__).
"""
import logging

from app.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the process. Safe to call more than once."""
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        force=True,
    )
    # groq/httpx request lines are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
