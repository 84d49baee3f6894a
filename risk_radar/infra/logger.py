from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(level_style)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
CYAN = "\033[36m"

LEVEL_COLORS = {
    logging.DEBUG: DIM + CYAN,
    logging.INFO: GREEN,
    logging.WARNING: YELLOW,
    logging.ERROR: RED + BOLD,
    logging.CRITICAL: RED + BOLD,
}


class ColoredFormatter(logging.Formatter):
    """Adds a colored level column when stderr is a TTY, plain text otherwise."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_color: bool | None = None,
    ) -> None:
        super().__init__(fmt=fmt or LOG_FORMAT, datefmt=datefmt or DATE_FORMAT)
        if use_color is None:
            use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if self.use_color and color:
            record.level_style = f"{color}{record.levelname:<8}{RESET}"
        else:
            record.level_style = f"{record.levelname:<8}"
        return super().format(record)


def setup_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure a console logger writing to stderr.

    Child loggers created with ``logging.getLogger(__name__)`` inside the package
    propagate to the logger configured here, so entry points call this once with
    the package name.

    Example:
        >>> logger = setup_logger("risk_radar", "DEBUG")
        >>> logger.info("ready")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Streamlit re-runs the script on every interaction.
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColoredFormatter())
    handler.setLevel(level)

    logger.addHandler(handler)
    logger.propagate = False
    return logger
