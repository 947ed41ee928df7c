"""markdown-it-py plugin entry point.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from mdit_shortcode import shortcode_plugin
    >>>
    >>> md = MarkdownIt("commonmark", {"html": True})
    >>> md.use(shortcode_plugin, {
    ...     "box": {"render": lambda params, env: f"<div>{params}</div>"},
    ... })
    >>> md.render('<box first n=3>\\n')
    "<div>{'first': True, 'n': 3.0}</div>"

Installation is a no-op when no shortcodes are given or when the host has no
``html_block`` block rule. Shortcodes only appear in the token stream when
the MarkdownIt ``html`` option is enabled.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from markdown_it import MarkdownIt

from mdit_shortcode.config import ShortcodeConfig
from mdit_shortcode.registry import ShortcodeRegistry
from mdit_shortcode.render import HTML_TOKEN_TYPES, capture_fallbacks, make_render_rule
from mdit_shortcode.rules import RULE_NAME, make_promotion_rule
from mdit_shortcode.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.utils import PresetType

logger = get_logger(__name__)


def shortcode_plugin(
    md: MarkdownIt,
    shortcodes: Mapping[str, Any] | None = None,
    options: ShortcodeConfig | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> None:
    """Install shortcode handling on ``md``.

    Args:
        md: MarkdownIt instance to extend
        shortcodes: Mapping of tag name to definition. A definition is a
            ShortcodeDefinition, a ``{"render": ..., "inline": ...}`` dict,
            or an object with a ``render`` method.
        options: ShortcodeConfig or dictionary of config values
        **kwargs: Config values overriding ``options`` (e.g. ``interpolator``)

    Raises:
        ShortcodeSetupError: If a definition has no callable render, or the
            interpolator is not callable

    """
    config = ShortcodeConfig.resolve(options, **kwargs)
    registry = ShortcodeRegistry.from_mapping(shortcodes)

    if not registry:
        logger.debug("No shortcodes registered; plugin is inert")
        return
    if "html_block" not in md.block.ruler.get_all_rules():
        logger.debug("Host has no html_block rule; plugin is inert")
        return

    if registry.inline_names:
        md.core.ruler.after("block", RULE_NAME, make_promotion_rule(registry.inline_names))

    render_rule = make_render_rule(registry, config.interpolator, capture_fallbacks(md.renderer))
    for token_type in HTML_TOKEN_TYPES:
        md.add_render_rule(token_type, render_rule)

    logger.debug(
        "Installed %d shortcode(s) (%d inline): %s",
        len(registry),
        len(registry.inline_names),
        ", ".join(registry),
    )


def create_markdown(
    shortcodes: Mapping[str, Any] | None = None,
    config: str | PresetType = "commonmark",
    options_update: Mapping[str, Any] | None = None,
    **options: Any,
) -> MarkdownIt:
    """Create a MarkdownIt instance with raw HTML enabled and shortcodes installed.

    Args:
        shortcodes: Mapping of tag name to definition
        config: MarkdownIt preset name or preset dict
        options_update: Extra MarkdownIt options; ``html`` is forced on
        **options: Shortcode config values (e.g. ``interpolator``)

    Example:
        >>> md = create_markdown({"now": {"render": lambda p, env: env["now"]}})
        >>> md.render("Today is <now>.", {"now": "Monday"})
        '<p>Today is Monday.</p>\\n'

    """
    md = MarkdownIt(config, {**(options_update or {}), "html": True})
    md.use(shortcode_plugin, shortcodes, **options)
    return md


__all__ = [
    "create_markdown",
    "shortcode_plugin",
]
