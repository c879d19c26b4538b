"""Console logging with colored levels and process context."""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO


class KillTreeLogFormatter(logging.Formatter):
    """Custom formatter with process context."""

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        # Records logged with extra={"pid": ...} carry the process they concern
        pid_context = ""
        if hasattr(record, "pid"):
            pid_context = f"[pid {record.pid}] "

        # Color codes (only if enabled)
        if self.use_colors:
            level_colors = {
                "DEBUG": "\033[36m",      # Cyan
                "INFO": "\033[32m",       # Green
                "WARNING": "\033[33m",    # Yellow
                "ERROR": "\033[31m",      # Red
                "CRITICAL": "\033[35m",   # Magenta
            }
            reset = "\033[0m"
            level_color = level_colors.get(record.levelname, "")
        else:
            level_color = ""
            reset = ""

        message = (
            f"{timestamp} {level_color}{record.levelname:8s}{reset} "
            f"[{record.name}] {pid_context}{record.getMessage()}"
        )
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(
    log_level: str = "WARNING",
    use_colors: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a console handler to the ``kill_tree`` logger.

    The library itself never calls this; it is for the CLI and for
    applications that want kill_tree's diagnostics on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        use_colors: Force colors on/off (default: only when stream is a tty)
        stream: Output stream (default: stderr)

    Returns:
        The configured ``kill_tree`` logger
    """
    stream = stream or sys.stderr
    if use_colors is None:
        use_colors = stream.isatty() if hasattr(stream, "isatty") else False

    logger = logging.getLogger("kill_tree")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Close existing handlers before clearing (prevents duplicate output on re-setup)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(KillTreeLogFormatter(use_colors=use_colors))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
