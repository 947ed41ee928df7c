"""Block promotion core rule.

markdown-it turns a tag standing alone on its own line into an
``html_block`` token, which renders outside any paragraph. For shortcodes
registered with ``inline=True`` this rule rewrites such tokens into

    paragraph_open (level L)
    inline         (level L+1, content = block HTML, children = [])
    paragraph_close(level L)

so they flow with the surrounding text. It runs right after the ``block``
core rule, before ``inline``, so the new inline token is parsed like any
other paragraph and the tag comes back as an ``html_inline`` child.

"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TYPE_CHECKING

from markdown_it.token import Token

from mdit_shortcode.tags import match_tag
from mdit_shortcode.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.rules_core import StateCore

logger = get_logger(__name__)

RULE_NAME = "shortcode"


def promote_html_block(token: Token) -> list[Token]:
    """Wrap an ``html_block`` token's content in a paragraph."""
    level = token.level

    paragraph_open = Token("paragraph_open", "p", 1)
    paragraph_open.level = level
    paragraph_open.map = token.map
    paragraph_open.block = True

    inline = Token("inline", "", 0)
    inline.content = token.content
    inline.level = level + 1
    inline.map = token.map
    inline.children = []

    paragraph_close = Token("paragraph_close", "p", -1)
    paragraph_close.level = level
    paragraph_close.block = True

    return [paragraph_open, inline, paragraph_close]


def promote_inline_shortcodes(
    tokens: list[Token], inline_names: Collection[str]
) -> tuple[list[Token], int]:
    """Return a new token list with inline shortcode blocks promoted.

    Returns:
        Tuple of (new tokens, number of promoted blocks)
    """
    result: list[Token] = []
    promoted = 0
    for token in tokens:
        if token.type == "html_block" and match_tag(token.content, inline_names) is not None:
            result.extend(promote_html_block(token))
            promoted += 1
        else:
            result.append(token)
    return result, promoted


def make_promotion_rule(inline_names: Collection[str]) -> Callable[[StateCore], None]:
    """Create the core rule promoting ``inline_names`` tags."""

    def shortcode_promotion(state: StateCore) -> None:
        if not state.md.options["html"]:
            return
        tokens, promoted = promote_inline_shortcodes(state.tokens, inline_names)
        if promoted:
            logger.debug("Promoted %d shortcode block(s) to paragraphs", promoted)
            state.tokens = tokens

    return shortcode_promotion


__all__ = [
    "RULE_NAME",
    "make_promotion_rule",
    "promote_html_block",
    "promote_inline_shortcodes",
]
