"""Loguru logging configuration.

stderr gets human-readable lines by default or one JSON object per record
when ``LOG_JSON`` is set. A rotating text log file is added when ``LOG_DIR``
is configured.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "address-news.log"

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, json_logs: bool = False) -> None:
    """Replace Loguru's sinks with the application's.

    Args:
        log_level: Minimum level emitted by every sink (case-insensitive).
        log_dir: Optional directory for ``address-news.log``, rotated every
            24 hours and kept for 7 days.
        json_logs: Serialize stderr records as JSON for log shippers.
    """
    level = log_level.upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_LOG_FORMAT, colorize=sys.stderr.isatty())

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / LOG_FILE_NAME,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
