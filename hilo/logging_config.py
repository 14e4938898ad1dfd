"""
Logging setup for the CLI and the API server.

The level comes from Settings.log_level; this module does not read the
environment itself.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(level: Union[int, str] = "INFO") -> int:
    """Set up the root logger and return the level that was applied.

    `level` is a logging level number or a level name such as "debug".
    Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
