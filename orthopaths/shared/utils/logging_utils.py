"""Logging utilities for orthopaths."""
import logging
import logging.handlers
import sys
from pathlib import Path

from ..configuration.settings import LoggingSettings


def init_logging(level: int = logging.INFO) -> None:
    """Install a minimal stderr handler before configuration is loaded.

    Does nothing if the root logger already has handlers.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr
    )


def setup_logging(settings: LoggingSettings) -> None:
    """Setup logging configuration based on settings.

    Args:
        settings: Logging settings configuration
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.level.upper()))

    # Clear existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=settings.format_string,
        datefmt=settings.date_format
    )

    if settings.console_output:
        # stderr keeps log lines out of the rendered grid on stdout
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, settings.level.upper()))
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if settings.file_output:
        try:
            log_path = Path(settings.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=settings.max_file_size_mb * 1024 * 1024,
                backupCount=settings.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(getattr(logging, settings.level.upper()))
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        except OSError as e:
            # If file logging fails, log to console
            root_logger.error(f"Failed to setup file logging: {e}")

    for component, level in settings.component_levels.items():
        component_logger = logging.getLogger(component)
        component_logger.setLevel(getattr(logging, level.upper()))

    root_logger.debug("orthopaths logging initialized")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
