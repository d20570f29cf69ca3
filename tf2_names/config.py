"""
Configuration for tf2-names
Values are read from the environment; a .env file is honoured
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Configuration
LOG_LEVEL = os.getenv("TF2_NAMES_LOG_LEVEL", "WARNING")
CATALOG_MAX_AGE_SECONDS = int(os.getenv("CATALOG_MAX_AGE_SECONDS", "86400"))
CATALOG_PROPER_NAMES = os.getenv("CATALOG_PROPER_NAMES", "true").lower() in ("1", "true", "yes")

LOG_FORMAT = "tf2-names | %(asctime)s - [%(levelname)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger"""
    logger = logging.getLogger("tf2_names")
    logger.setLevel((level or LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
