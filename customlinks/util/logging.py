"""Stdlib logging setup for route modules.

Domain services report through Logfire; the HTTP layer logs through
``logging.getLogger(__name__)`` under the ``customlinks`` logger tree.
"""

import logging
import sys

from customlinks.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Chatty third-party loggers, kept at WARNING unless debugging
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root handler and logger levels for this environment."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    if not settings.debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("customlinks").info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}, providers={settings.auth.providers}"
    )
