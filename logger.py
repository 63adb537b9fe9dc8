"""Logging configuration for Spendbook.

The CLI prints its listings and reports through the application logger, so
the console shows INFO lines as bare text and only prefixes warnings and
errors with their level. The dated log file keeps full records.
"""

import logging
from datetime import date
from pathlib import Path
from config import Config

LOGGER_NAME = "spendbook"


class ConsoleFormatter(logging.Formatter):
    """Bare messages for report output, "LEVEL - message" for problems."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname} - {message}"
        return message


def log_file_path(config: Config, day: date) -> Path:
    """Get the log file for a given day, e.g. logs/spendbook-2024-01-05.log."""
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Attach a dated file handler and a console handler to the app logger.

    Calling it again replaces the handlers instead of duplicating output.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file_path(config, date.today()), encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Debug records (e.g. load details) go to the file only
    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(logger.level, logging.INFO))
    console_handler.setFormatter(ConsoleFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The spendbook logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
