"""
Logging configuration for the application.
"""
import logging
import os
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Colour a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _level_from_env(default: int = logging.INFO) -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "").upper())
    return level if isinstance(level, int) else default


def setup_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Set up a logger writing to stdout.

    Args:
        name: Logger name
        level: Logging level, defaults to LOG_LEVEL or INFO

    Returns:
        Configured logger instance
    """
    if level is None:
        level = _level_from_env()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    logger.addHandler(handler)
    return logger


app_logger = setup_logger("everywhere_digital_school")
