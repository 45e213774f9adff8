"""Stdout logging for the account service.

Spans and structured events go to logfire. Plain log lines from routes
and scripts go through the standard logging tree set up here.
"""

import logging
import sys

from spoon.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("botocore", "boto3", "urllib3", "multipart")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once at process start.

    DEBUG when settings.debug is on, INFO otherwise. The S3 client and
    multipart parser loggers are held at WARNING.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("spoon").setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``spoon`` tree (pass ``__name__``)."""
    return logging.getLogger(name)
