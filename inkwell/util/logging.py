"""stdlib logging setup for modules that use ``logging.getLogger(__name__)``."""

import logging
import sys

from inkwell.config import Settings

_LEVELS = {"test": logging.WARNING}


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout at a level chosen by environment.

    DEBUG wins when ``settings.debug`` is set; tests only see warnings.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else _LEVELS.get(
        settings.environment, logging.INFO
    )

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    # Quiet chatty libraries; logfire already traces queries and requests
    for noisy in ("sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging ready ({settings.environment}, {logging.getLevelName(level)})"
    )
