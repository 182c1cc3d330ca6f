"""
Configuration - Environment-driven settings.

Read once at import time:
    LUDO_ENV          development | production (default: development)
    ALLOWED_ORIGINS   comma-separated CORS origins (default: *)
    LUDO_LOG_LEVEL    logging level name (default: INFO)
    LUDO_DICE_SEED    optional int; seeds the die of every new game
    LUDO_MAX_GAMES    live games kept in memory before the oldest is evicted
"""

import logging
import os

LUDO_ENV = os.getenv("LUDO_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LUDO_LOG_LEVEL = os.getenv("LUDO_LOG_LEVEL", "INFO").upper()
LUDO_MAX_GAMES = int(os.getenv("LUDO_MAX_GAMES", "100"))

_seed = os.getenv("LUDO_DICE_SEED")
LUDO_DICE_SEED = int(_seed) if _seed not in (None, "") else None

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI and the API server."""
    logging.basicConfig(
        level=getattr(logging, level or LUDO_LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
    )
