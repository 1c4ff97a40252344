"""
Application-wide logging setup.
"""

import logging
import os
import sys

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging() -> None:
    """
    Configure the root logger.

    - Level defaults to INFO, override with the LOG_LEVEL env var
    - Logs go to stdout
    - Engine.IO / Socket.IO packet chatter is reduced to warnings
    """
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level_name, logging.INFO)

    root_logger = logging.getLogger()
    # Uvicorn may already have installed handlers
    if root_logger.handlers:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logging.getLogger("engineio").setLevel(logging.WARNING)
    logging.getLogger("socketio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
