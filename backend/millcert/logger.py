"""
Logging configuration.

Level comes from LOG_LEVEL; unknown names fall back to INFO.
"""
import logging
import sys

from millcert.config import settings


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = resolve_level(settings.LOG_LEVEL)

# Create logger
logger = logging.getLogger("millcert")
logger.setLevel(LOG_LEVEL)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(LOG_LEVEL)

# Formatter: time | level | logger | message
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
console_handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(console_handler)
