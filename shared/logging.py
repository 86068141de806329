"""
Logging setup.

Modules obtain loggers with ``logging.getLogger(__name__)``; this module only
configures the root handler once at application start.
"""

import logging
import sys

from .config import get_settings


def setup_logging() -> None:
    """Configure root logging from settings."""
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    # Supabase's HTTP client logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)

    logging.getLogger(__name__).info(
        "Logging configured", extra={"level": settings.log_level}
    )
