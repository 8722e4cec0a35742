"""
Logging configuration and utilities for quandlkit.

This module provides a centralized logging setup with:
- Colored console output
- Optional rotating file output
- Configurable log levels
"""

import logging
import logging.handlers
from pathlib import Path
import sys


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m'  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Format the log record with colors when writing to a terminal."""
        if hasattr(sys.stderr, 'isatty') and sys.stderr.isatty():
            levelname = record.levelname
            if levelname in self.COLORS:
                record = logging.makeLogRecord(record.__dict__)
                record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        return super().format(record)


def setup_logger(
    name: str,
    log_dir: str = "logs",
    log_level: str = "INFO",
    console_output: bool = True,
    file_output: bool = False,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up a logger with console and (optionally) file handlers.

    Args:
        name: Logger name (typically __name__ of the module)
        log_dir: Directory for log files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to output to console
        file_output: Whether to output to a rotating file in log_dir
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance

    Example:
        >>> from quandlkit.utils.logging import setup_logger
        >>> logger = setup_logger('quandlkit', log_level='DEBUG')
        >>> logger.debug("Built URL ...")
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    # Keep a level the host application already chose
    if logger.level == logging.NOTSET:
        logger.setLevel(getattr(logging, log_level.upper()))

    fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    datefmt = '%Y-%m-%d %H:%M:%S'

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(ColoredFormatter(fmt, datefmt=datefmt))
        logger.addHandler(console_handler)

    if file_output:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        safe_name = name.replace('.', '_')
        file_handler = logging.handlers.RotatingFileHandler(
            log_path / f"{safe_name}.log",
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(logging.DEBUG)  # File gets all levels
        file_handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the 'quandlkit' namespace.

    Module loggers carry no handlers of their own; records propagate to the
    package logger configured by configure_logging().

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(settings=None) -> logging.Logger:
    """
    Configure the package logger from LoggingConfig settings.

    Args:
        settings: Optional Settings instance. If None, uses get_settings()

    Returns:
        The 'quandlkit' package logger
    """
    if settings is None:
        from ..config import get_settings
        settings = get_settings()

    cfg = settings.logging
    return setup_logger(
        'quandlkit',
        log_dir=cfg.log_dir,
        log_level=cfg.log_level,
        console_output=cfg.console_output,
        file_output=cfg.file_output,
        max_bytes=cfg.max_bytes,
        backup_count=cfg.backup_count
    )
