"""Application logging utilities.

Everything is written to stdout through Python's ``logging`` module so the
container runtime can ship it to whatever log sink the deployment uses.
"""

import logging
import os
import sys
from typing import Optional

# Module & line number make the origin of each message clear even when the
# root logger is used directly.
DEFAULT_FORMAT = "%(asctime)s - %(module)s:%(lineno)d - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    stream: Optional[object] = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure the root logger; calling it again only adjusts the level.

    * ``LOG_LEVEL`` in the environment wins over *level*.
    * Uvicorn's loggers are pointed at the same handlers so request logs and
      application logs share one format.
    """
    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        level = getattr(logging, env_level.upper(), level)

    if stream is None:
        stream = sys.stdout

    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)

    for pkg in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(pkg).handlers = root.handlers
        logging.getLogger(pkg).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, making sure logging is configured first."""
    setup_logging()
    return logging.getLogger(name)
