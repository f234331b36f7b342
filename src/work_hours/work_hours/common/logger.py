"""Logging helpers.

Provides a ``get_logger`` function that returns a logger with a standard
format. The logger uses a :class:`~logging.StreamHandler` so store and storage
failures are visible on the console by default.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a configured :class:`logging.Logger` instance.

    Parameters
    ----------
    name:
        Name of the logger, typically ``__name__`` of the caller.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
