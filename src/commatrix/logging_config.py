"""Process-wide logging setup for the commatrix command line."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger; unknown level names fall back to WARNING."""
    levelno = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(levelno, int):
        levelno = logging.WARNING
    logging.basicConfig(level=levelno, format=LOG_FORMAT)
