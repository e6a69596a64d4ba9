# versecard/logging_config.py
"""
Logging configuration for the verse card generator.

Developer Mode:
    Set environment variable: VERSECARD_DEV_MODE=1
    This enables:
    - DEBUG level logging (every pipeline stage is logged)
    - Colored console output
    - Timing logs for each formatting run
"""
import logging
import sys
import os
from typing import Optional, Union


class LogColors:
    """ANSI color codes for colored logging."""
    RESET = "\033[0m"

    # Levels
    DEBUG = "\033[36m"      # Cyan
    INFO = "\033[32m"       # Green
    WARNING = "\033[33m"    # Yellow
    ERROR = "\033[31m"      # Red
    CRITICAL = "\033[35m"   # Magenta

    # Special markers
    STAGE = "\033[1;34m"    # Bold Blue
    SUCCESS = "\033[1;32m"  # Bold Green
    FAIL = "\033[1;31m"     # Bold Red
    TIMING = "\033[35m"     # Magenta


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds colors to console output.

    Only adds colors when outputting to a TTY (not when piped to file).
    """

    LEVEL_COLORS = {
        logging.DEBUG: LogColors.DEBUG,
        logging.INFO: LogColors.INFO,
        logging.WARNING: LogColors.WARNING,
        logging.ERROR: LogColors.ERROR,
        logging.CRITICAL: LogColors.CRITICAL,
    }

    def __init__(self, *args, use_colors: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_colors = use_colors and sys.stdout.isatty()

    def _message_color(self, message: str) -> Optional[str]:
        if "⏱️" in message or "DONE" in message:
            return LogColors.TIMING
        if "✨" in message or "✅" in message:
            return LogColors.SUCCESS
        if "❌" in message or "FALLBACK" in message:
            return LogColors.FAIL
        if "🧠" in message or "STAGE" in message:
            return LogColors.STAGE
        return None

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname = record.levelname
        if record.levelno in self.LEVEL_COLORS:
            record.levelname = f"{self.LEVEL_COLORS[record.levelno]}{levelname}{LogColors.RESET}"

        message = record.getMessage()
        color = self._message_color(message)
        if color:
            message = f"{color}{message}{LogColors.RESET}"

        record.msg = message
        record.args = ()

        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def is_dev_mode() -> bool:
    """
    Check if developer mode is enabled.

    Returns:
        True if VERSECARD_DEV_MODE environment variable is set to 1, yes, or true
    """
    dev_mode = os.getenv('VERSECARD_DEV_MODE', '').lower()
    return dev_mode in ('1', 'yes', 'true', 'on')


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Logging level (default: INFO; dev mode always uses DEBUG)
        log_file: Optional file path for log output
        format_string: Custom format string for log messages
        use_colors: Whether to use colored output (default: True)

    Returns:
        Configured ``versecard`` logger
    """
    dev_mode = is_dev_mode()

    if dev_mode:
        level = logging.DEBUG
    elif level is None:
        level = logging.INFO

    if format_string is None:
        if dev_mode:
            format_string = '[%(asctime)s] %(levelname)-8s | %(name)-28s | %(message)s'
        else:
            format_string = '[%(asctime)s] %(levelname)s - %(name)s - %(message)s'

    logger = logging.getLogger('versecard')
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if use_colors:
        formatter = ColoredFormatter(format_string, datefmt='%H:%M:%S')
    else:
        formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File output is never colored
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '[%(asctime)s] %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    if dev_mode:
        logger.info("🔧 DEVELOPER MODE ENABLED - every pipeline stage is logged")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name

    Returns:
        Logger named ``versecard.<name>``
    """
    return logging.getLogger(f'versecard.{name}')


def log_section(logger: logging.Logger, title: str, width: int = 60) -> None:
    """Log a section header for better readability."""
    separator = "=" * width
    logger.info(separator)
    logger.info(f"  {title}")
    logger.info(separator)
