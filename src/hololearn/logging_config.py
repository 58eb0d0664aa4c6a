"""
Logging Configuration
Console (and optional file) output for everything under the `hololearn` logger.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

# Network chatter from the tutor's HTTP stack
QUIET_LOGGERS = ("httpx", "httpcore", "google_genai")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the application logger.

    Calling it again replaces the previous handlers instead of stacking them.

    Args:
        level: Threshold for the application logger and its handlers.
        log_file: If given, records are also written there (overwritten each run).

    Returns:
        The configured `hololearn` logger.
    """
    app_logger = logging.getLogger("hololearn")
    app_logger.setLevel(level)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    app_logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return app_logger
