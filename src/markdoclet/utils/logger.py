"""Minimal logging utilities for markdoclet.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from markdoclet.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering comment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "markdoclet." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("state")
        >>> logger.name
        'markdoclet.state'
    """
    if not (name == "markdoclet" or name.startswith("markdoclet.")):
        name = f"markdoclet.{name}"
    return logging.getLogger(name)
