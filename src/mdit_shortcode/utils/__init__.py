"""Utility modules for mdit-shortcode.

Provides:
- logger: get_logger for namespaced logging
"""

from mdit_shortcode.utils.logger import get_logger

__all__ = [
    "get_logger",
]
