"""
Logging module for application-wide logging configuration.

Console output goes to stderr so normalized text on stdout stays clean.
A DEBUG-level log file is added when a log directory is configured.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


# Log format constants
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "mathprep"
DEFAULT_LOG_FILE = "mathprep.log"

# Store initialized loggers
_loggers: dict[str, logging.Logger] = {}
_initialized: bool = False


def setup_logger(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: str = DEFAULT_LOG_FILE
) -> logging.Logger:
    """
    Set up the package root logger with console and optional file handlers.

    Args:
        log_level: Minimum log level for console output (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for log files. No file handler when None.
        log_file: Name of the log file. Defaults to mathprep.log.

    Returns:
        Configured root logger instance.

    Example:
        >>> logger = setup_logger("DEBUG")
        >>> logger.info("Normalization started")
    """
    global _initialized

    if _initialized:
        return logging.getLogger(ROOT_LOGGER_NAME)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers
    if root_logger.handlers:
        root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_level = getattr(logging, log_level.upper(), logging.INFO)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.debug(f"Log file: {log_path.absolute()}")

    root_logger.debug(f"Logger initialized - Console: {log_level}")

    _initialized = True
    _loggers[ROOT_LOGGER_NAME] = root_logger

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger that inherits from the package root logger.

    Args:
        name: Name for the logger (typically __name__).

    Returns:
        Logger instance with the given name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing started")
    """
    if not _initialized:
        setup_logger()

    full_name = name if name.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{name}"

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)

    return _loggers[full_name]


class LoggerMixin:
    """
    Mixin class to provide logging capability to any class.

    Example:
        >>> class MyStage(LoggerMixin):
        ...     def run(self):
        ...         self.logger.info("Running...")
    """

    @property
    def logger(self) -> logging.Logger:
        """Get logger named after this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger


def log_processing_stats(
    logger: logging.Logger,
    operation: str,
    items_processed: int,
    duration_seconds: float,
    extra_info: Optional[dict] = None
) -> None:
    """
    Log standardized processing statistics.

    Args:
        logger: Logger instance to use.
        operation: Name of the operation performed.
        items_processed: Number of items processed.
        duration_seconds: Time taken in seconds.
        extra_info: Additional information to log.
    """
    rate = items_processed / duration_seconds if duration_seconds > 0 else 0

    message = (
        f"{operation} completed: "
        f"{items_processed} items in {duration_seconds:.2f}s "
        f"({rate:.2f} items/sec)"
    )

    if extra_info:
        extra_str = ", ".join(f"{k}={v}" for k, v in extra_info.items())
        message += f" [{extra_str}]"

    logger.info(message)
