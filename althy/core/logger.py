"""Logger configuration for Althy."""

import sys
from pathlib import Path

from loguru import logger

from althy.config.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(config: Settings, rotation: str = "10 MB", retention: str = "7 days") -> list[int]:
    """Route loguru output according to the application settings.

    The console sink always logs at config.log_level. When config.log_file is
    set, a rotating, zip-compressed file sink is added at the same level.

    Args:
        config: Settings providing log_level and log_file
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")

    Returns:
        Ids of the sinks that were added, in case a caller needs to remove them
    """
    logger.remove()

    sink_ids = [logger.add(sys.stderr, format=CONSOLE_FORMAT, level=config.log_level, colorize=True)]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        sink_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=config.log_level,
                rotation=rotation,
                retention=retention,
                compression="zip",
                backtrace=True,
                diagnose=True,
            )
        )

    logger.info("Logger initialized", level=config.log_level, log_file=config.log_file)
    return sink_ids
