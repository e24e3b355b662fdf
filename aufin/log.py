from __future__ import annotations

import logging

LOGGER_NAME = "aufin"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def get_logger(child: str | None = None) -> logging.Logger:
    base = logging.getLogger(LOGGER_NAME)
    return base.getChild(child) if child else base


def configure_logging(level: str | int = "WARNING") -> None:
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel(level)


__all__ = ["LOGGER_NAME", "LOG_FORMAT", "configure_logging", "get_logger"]
