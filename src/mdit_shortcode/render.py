"""Render dispatch for ``html_block`` and ``html_inline`` tokens.

The dispatcher replaces markdown-it's raw HTML render rules. Tokens opening
with a registered tag are handed to the shortcode's renderer; every other
token goes to the rule that was installed before the plugin, so plain HTML
renders exactly as it would without shortcodes.

Thread Safety:
The dispatcher only reads the registry and the captured fallback rules.
All per-token state is local.

"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any, TypeAlias

from mdit_shortcode.attributes import parse_attributes
from mdit_shortcode.tags import match_tag
from mdit_shortcode.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.renderer import RendererProtocol
    from markdown_it.token import Token
    from markdown_it.utils import OptionsDict

    from mdit_shortcode.interpolation import Interpolator
    from mdit_shortcode.registry import ShortcodeRegistry

logger = get_logger(__name__)

HTML_TOKEN_TYPES: tuple[str, ...] = ("html_block", "html_inline")

BoundRenderRule: TypeAlias = Callable[
    [Sequence["Token"], int, "OptionsDict", MutableMapping[str, Any]], str
]


def capture_fallbacks(renderer: RendererProtocol) -> dict[str, BoundRenderRule | None]:
    """Snapshot the render rules currently installed for raw HTML tokens.

    A missing entry means the renderer falls back to ``renderToken``.
    """
    rules = getattr(renderer, "rules", {})
    return {token_type: rules.get(token_type) for token_type in HTML_TOKEN_TYPES}


def make_render_rule(
    registry: ShortcodeRegistry,
    interpolator: Interpolator,
    fallbacks: dict[str, BoundRenderRule | None],
) -> Callable[..., str]:
    """Create the render rule to install for both raw HTML token types.

    Args:
        registry: Registered shortcodes
        interpolator: Hook for bare ``#{expr}`` attribute values
        fallbacks: Rules to defer to when a token is not a shortcode

    Returns:
        Function with markdown-it's ``(self, tokens, idx, options, env)``
        render rule signature, ready for ``MarkdownIt.add_render_rule``.
    """

    def render_shortcode(
        self: Any,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        token = tokens[idx]
        content = token.content

        tag = match_tag(content, registry)
        definition = registry.get(tag) if tag is not None else None
        if definition is not None:
            parameters = parse_attributes(content, env, interpolator)
            logger.debug("Rendering shortcode <%s> with %d attribute(s)", tag, len(parameters))
            return definition.render(parameters, env)

        fallback = fallbacks.get(token.type)
        if fallback is not None:
            return fallback(tokens, idx, options, env)
        return self.renderToken(tokens, idx, options, env)

    return render_shortcode


__all__ = [
    "HTML_TOKEN_TYPES",
    "capture_fallbacks",
    "make_render_rule",
]
