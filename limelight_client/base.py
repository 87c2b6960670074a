import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Set up console logging for the client and all components.

    Args:
        level: Root logger level
        stream: Output stream (default: stderr, where snapshot failures are reported)
    """
    root_logger = logging.getLogger()

    # Remove any existing handlers to avoid duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.addHandler(console)
    root_logger.setLevel(level)


class BaseComponent:
    """Base class for every object bound to a Limelight table, with integrated logging."""

    def __init__(self):
        # Set up logger with component's class name
        self.logger = logging.getLogger(self.__class__.__name__)

    def log_error(self, message: str):
        """Log an error.

        Args:
            message: Error message
        """
        self.logger.error(f"❌ {message}")
