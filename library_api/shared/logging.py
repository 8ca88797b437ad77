"""
Logging configuration for the application.

One format for every logger, configured once by the application factory.
Never logs credentials: no passwords, password hashes or tokens.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers never log below WARNING.
QUIET_LOGGERS = ("uvicorn.access", "slowapi", "authlib")


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    At DEBUG the SQL emitted by SQLAlchemy is logged as well.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))

    sql_level = logging.INFO if root_level == logging.DEBUG else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
