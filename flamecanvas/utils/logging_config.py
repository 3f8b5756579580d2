"""
Loguru sinks for flamecanvas.

The library only emits records (box counts, zoom targets, cache misses);
hosts decide where they go. ``setup_logging`` is what the ``flamecanvas``
command uses, and embedding applications can call it too. By default the
sinks only accept records from ``flamecanvas.*`` modules so the host's own
loguru records are left to the host's sinks.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from flamecanvas.config.validation import ConfigValidator


PACKAGE = "flamecanvas"
LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    package_only: bool = True,
) -> List[int]:
    """
    Replace loguru's sinks with a stderr sink and an optional file sink.

    Args:
        level: Minimum level, one of ``ConfigValidator.VALID_LOG_LEVELS`` (any case)
        log_file: Also write records to this file, rotated at 10 MB
        package_only: Drop records that do not come from flamecanvas modules

    Returns:
        Ids of the added sinks, for ``logger.remove``

    Raises:
        ValidationError: If ``level`` is not a known level name
    """
    level = ConfigValidator.validate_log_level(level)
    record_filter = PACKAGE if package_only else None

    logger.remove()
    sink_ids = [
        logger.add(sys.stderr, format=LOG_FORMAT, level=level, filter=record_filter, colorize=True)
    ]
    if log_file is not None:
        sink_ids.append(
            logger.add(
                log_file,
                format=LOG_FORMAT,
                level=level,
                filter=record_filter,
                rotation="10 MB",
                retention="7 days",
            )
        )
    return sink_ids
