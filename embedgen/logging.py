"""Logger setup shared by the embedgen CLI, generator and service."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "embedgen"
CONSOLE_FORMAT = "embedgen: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return ``embedgen`` or the ``embedgen.<component>`` child logger."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def configure_logging(
    *, verbose: bool = False, log_file: Path | str | None = None
) -> logging.Logger:
    """Route embedgen records to stderr and, when ``log_file`` is given, to a file.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        # The file always records the per-artifact debug trail.
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
        console.setLevel(level)

    return logger


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "ROOT_LOGGER", "configure_logging", "get_logger"]
