"""Logging setup for the command line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

__all__ = ["configure_logging"]

_MANAGED_HANDLER_FLAG = "_ascii_block_renderer_managed_handler"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _remove_managed_handlers(logger: logging.Logger) -> None:
    """Detach any handlers previously installed by :func:`configure_logging`."""

    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED_HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    level: int = logging.WARNING,
    *,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Send log records to stderr and, optionally, to ``log_file``.

    Calling this again replaces the handlers installed by the previous call.
    Standard output is left alone so printed art stays clean.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)
    _remove_managed_handlers(root_logger)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    setattr(console_handler, _MANAGED_HANDLER_FLAG, True)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        setattr(file_handler, _MANAGED_HANDLER_FLAG, True)
        root_logger.addHandler(file_handler)

    return root_logger
