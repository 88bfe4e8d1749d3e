"""
Logging configuration
"""

import logging
import sys


def setup_logger(name: str = None, level: str = 'WARNING',
                 log_file: str = None) -> logging.Logger:
    """
    Setup logger with console and optional file output

    The console handler writes to stderr; stdout carries the machine dialogue.

    Args:
        name: Logger name (None for root logger)
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Optional log file path

    Returns:
        Configured logger

    Raises:
        ValueError: If level is not a known log level name
    """
    numeric_level = logging.getLevelName(level.upper()) if isinstance(level, str) else None
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)

    # Formatter
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
