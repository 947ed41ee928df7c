"""@shortcode decorator for declaring shortcodes next to their renderers.

Works with both functions and classes. Decorated objects carry their tag
name, so a registry can be assembled without repeating it.

Example (function):
    >>> @shortcode("youtube")
    ... def render_youtube(params, env):
    ...     return f'<iframe src="https://youtube.com/embed/{params["id"]}"></iframe>'

Example (class):
    >>> @shortcode("badge", inline=True)
    ... class Badge:
    ...     def render(self, params, env):
    ...         return f'<span class="badge">{params.get("text", "")}</span>'

    >>> md.use(shortcode_plugin, collect_shortcodes(render_youtube, Badge))
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import TYPE_CHECKING, Any

from mdit_shortcode.errors import ShortcodeSetupError

if TYPE_CHECKING:
    from mdit_shortcode.protocol import RenderFunc


def shortcode(name: str, *, inline: bool = False) -> Callable[[RenderFunc | type], type]:
    """Decorator to turn a render function or class into a shortcode handler.

    Args:
        name: Tag name as written after ``<``
        inline: Promote standalone occurrences into a paragraph

    Returns:
        The decorated class, or a generated handler class for functions

    """
    if not name:
        msg = "A shortcode name must be provided"
        raise ValueError(msg)

    def decorator(func_or_class: RenderFunc | type) -> type:
        if isinstance(func_or_class, type):
            func_or_class.shortcode_name = name
            func_or_class.inline = inline
            return func_or_class

        render_func = func_or_class
        _name = name
        _inline = inline

        class GeneratedShortcode:
            shortcode_name = _name
            inline = _inline

            def render(self, params: dict[str, Any], env: MutableMapping[str, Any]) -> str:
                return render_func(params, env)

        func_name = getattr(render_func, "__name__", "anonymous")
        func_qualname = getattr(render_func, "__qualname__", "anonymous")
        GeneratedShortcode.__name__ = f"{func_name}_shortcode"
        GeneratedShortcode.__qualname__ = f"{func_qualname}_shortcode"
        return GeneratedShortcode

    return decorator


def collect_shortcodes(*handlers: Any) -> dict[str, Any]:
    """Build a ``{tag: handler}`` mapping from decorated handlers.

    Classes are instantiated with no arguments; instances are used as-is.

    Raises:
        ShortcodeSetupError: If a handler was not decorated, or two share a name
    """
    shortcodes: dict[str, Any] = {}
    for handler in handlers:
        name = getattr(handler, "shortcode_name", None)
        if name is None:
            label = getattr(handler, "__name__", type(handler).__name__)
            raise ShortcodeSetupError(label, "not decorated with @shortcode")
        if name in shortcodes:
            raise ShortcodeSetupError(name, "already registered")
        shortcodes[name] = handler() if isinstance(handler, type) else handler
    return shortcodes


__all__ = [
    "collect_shortcodes",
    "shortcode",
]
