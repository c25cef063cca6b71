"""Logging setup for strongpass front-ends."""

import sys

from loguru import logger


def configure(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink at `level`."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{level: <8}</level> {name}: {message}")
    logger.enable("strongpass")
