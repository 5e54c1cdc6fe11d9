"""Package logging helpers."""

from __future__ import annotations

import logging

_ROOT_NAME = "aoc_bench"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_HANDLER_NAME = "aoc_bench.stderr"


def get_logger(name: str = _ROOT_NAME) -> logging.Logger:
    """Return the package logger, or one of its children for a dotted module name."""
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this again only updates the level.
    """
    if level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log_level: {level}")

    logger = get_logger()
    logger.setLevel(getattr(logging, level.upper()))
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s", datefmt="%H:%M:%S")
        )
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    return logger
