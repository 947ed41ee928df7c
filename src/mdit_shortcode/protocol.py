"""ShortcodeHandler protocol for class-based shortcodes.

A shortcode only needs a ``render`` callable. Plain functions are wrapped in
a ShortcodeDefinition; classes can implement this protocol directly.

Thread Safety:
Handlers must be stateless. All per-occurrence data arrives as arguments,
and the same handler may be called concurrently from multiple threads.

Example:
    >>> class BoxShortcode:
    ...     inline = True
    ...
    ...     def render(self, params, env):
    ...         return f'<div class="box">{params.get("title", "")}</div>'

"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any, Protocol, TypeAlias, runtime_checkable

RenderFunc: TypeAlias = Callable[[dict[str, Any], MutableMapping[str, Any]], str]
"""Signature of a shortcode renderer: ``(parameters, env) -> html``."""


@runtime_checkable
class ShortcodeHandler(Protocol):
    """Protocol for shortcode implementations.

    Attributes:
        inline: Optional. When true, a shortcode standing alone on its own
            line is wrapped in a paragraph instead of forming an HTML block.

    """

    def render(self, params: dict[str, Any], env: MutableMapping[str, Any]) -> str:
        """Produce the output that replaces the tag.

        Args:
            params: Parsed attributes of this occurrence
            env: Environment passed to ``MarkdownIt.render``

        Returns:
            Final HTML. It is emitted verbatim, without escaping.
        """
        ...


__all__ = [
    "RenderFunc",
    "ShortcodeHandler",
]
