"""
Logging setup
Loguru based console and file logging
"""
import sys
from loguru import logger

from config.settings import Settings


def setup_logging(settings: Settings):
    """Initialize logging sinks"""

    # Drop the default handler
    logger.remove()

    # Console log (stdout)
    logger.add(
        sys.stdout,
        level=settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=True
    )

    if not settings.LOG_TO_FILE:
        return

    # Script run log (daily rotation)
    logger.add(
        settings.LOGS_DIR / "cleanup_{time:YYYY-MM-DD}.log",
        level="INFO",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation=settings.LOG_ROTATION,
        retention=f"{settings.LOG_RETENTION_DAYS} days",
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=True
    )

    # Error log (separate file)
    logger.add(
        settings.LOGS_DIR / "error_{time:YYYY-MM-DD}.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}\n{exception}",
        rotation=settings.LOG_ROTATION,
        retention=f"{settings.LOG_RETENTION_DAYS * 3} days",  # errors are kept 3x longer
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=True
    )

    logger.debug(f"Log directory: {settings.LOGS_DIR}")


def get_logger(name: str):
    """
    Per-module logger

    Args:
        name: module name (usually __name__)

    Returns:
        logger: bound loguru logger
    """
    return logger.bind(name=name)
