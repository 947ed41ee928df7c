"""Logging helper for mdit-shortcode.

Every module logs through a ``mdit_shortcode.``-prefixed standard library
logger. The library never configures handlers; hosts opt in with the usual
``logging.basicConfig`` or their own handler setup.

Example:
    >>> from mdit_shortcode.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Installing shortcode rules")
"""

from __future__ import annotations

import logging

_ROOT = "mdit_shortcode"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``mdit_shortcode``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("render").name
        'mdit_shortcode.render'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
