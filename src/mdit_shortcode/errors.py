"""Exception classes for mdit-shortcode.

Only setup can fail. Rendering degrades to the host's default raw HTML
output whenever a tag cannot be resolved.
"""

from __future__ import annotations


class ShortcodeError(Exception):
    """Base exception for all mdit-shortcode errors.

    Subclass this for specific error categories.
    """

    pass


class ShortcodeSetupError(ShortcodeError):
    """Error while installing shortcodes into a MarkdownIt instance.

    Raised when a definition has no callable ``render``, when a tag name
    is registered twice, or when the configuration is unusable. Halts
    pipeline construction.
    """

    def __init__(self, tag: str, message: str) -> None:
        """Initialize setup error.

        Args:
            tag: Name of the offending shortcode tag
            message: Description of the problem
        """
        self.tag = tag
        self.message = message
        super().__init__(f"Shortcode '{tag}': {message}")
