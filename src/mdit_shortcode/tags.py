"""Tag classification for raw HTML tokens.

A token is a shortcode invocation when its content starts with ``<`` directly
followed by a registered name. Closing tags (``</box>``) never classify,
because ``/`` is not a word character.
"""

from __future__ import annotations

import re
from collections.abc import Collection

TAG_PATTERN = re.compile(r"<(\w+)")


def extract_tag(content: str) -> str | None:
    """Return the tag name opening ``content``, or None."""
    match = TAG_PATTERN.match(content)
    if match is None:
        return None
    return match.group(1)


def match_tag(content: str, names: Collection[str]) -> str | None:
    """Return the opening tag name of ``content`` if it is one of ``names``.

    Matching is exact and case-sensitive.

    Example:
        >>> match_tag('<box first>', {"box"})
        'box'
        >>> match_tag('</box>', {"box"}) is None
        True

    """
    tag = extract_tag(content)
    if tag is not None and tag in names:
        return tag
    return None


__all__ = [
    "TAG_PATTERN",
    "extract_tag",
    "match_tag",
]
