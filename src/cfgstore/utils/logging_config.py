"""
Logging configuration for cfgstore.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "cfgstore"


class ColoredFormatter(logging.Formatter):
    """Formatter with colored level names for console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        # Color only the level name
        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


class CSVFormatter(logging.Formatter):
    """CSV-safe formatter for file logging."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = record.levelname.ljust(8)
        duration = f"{int(record.relativeCreated)} ms"
        module = record.name
        line_no = str(record.lineno)
        message = record.getMessage()

        # Standard CSV quote escaping
        message = message.replace('"', '""')

        return f'"{timestamp}";{level};"{duration}";"{module}";"{line_no}";"{message}"'


def setup_logging(
    level: Union[int, str] = "INFO",
    use_colors: bool = True,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Setup cfgstore logging with a console handler and an optional file handler.

    Args:
        level: Console logging level
        use_colors: Color the level names on the console
        log_file: Path of a rotating CSV log file (DEBUG and above)

    Returns:
        The configured cfgstore logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    cfg_logger = logging.getLogger(LOGGER_NAME)
    cfg_logger.setLevel(logging.DEBUG)

    # Clear handlers from a previous setup
    for handler in list(cfg_logger.handlers):
        cfg_logger.removeHandler(handler)
        handler.close()

    if use_colors:
        console_formatter: logging.Formatter = ColoredFormatter(
            fmt="%(asctime)s : %(levelname)-8s : %(name)s : %(message)s", datefmt="%H:%M:%S"
        )
    else:
        console_formatter = logging.Formatter(
            fmt="%(asctime)s : %(levelname)-8s : %(name)s : %(message)s", datefmt="%H:%M:%S"
        )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)
    cfg_logger.addHandler(console_handler)

    log_path = None
    if log_file is not None:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
            cfg_logger.addHandler(file_handler)
        except OSError as e:
            # Continue with console logging only
            log_path = None
            cfg_logger.warning(f"Could not setup file logging: {e}")

    logger = logging.getLogger(__name__)
    logger.debug("Logging initialized")
    if log_path:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")

    return cfg_logger
