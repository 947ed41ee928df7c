"""
mdit-shortcode: Shortcode tags for markdown-it-py

Write custom tags as pseudo-HTML in Markdown and replace each occurrence
with the output of a Python function.

Quick Start:
    >>> from markdown_it import MarkdownIt
    >>> from mdit_shortcode import shortcode_plugin
    >>>
    >>> def greet(params, env):
    ...     return f"<b>Hello {params['name']}</b>"
    >>>
    >>> md = MarkdownIt("commonmark", {"html": True})
    >>> md.use(shortcode_plugin, {"greet": {"render": greet}})
    >>> md.render('Hi <greet name="#{user}">!', {"user": "Ada"})
    '<p>Hi <b>Hello Ada</b>!</p>\\n'

Attribute Grammar:
    <tag flag n=3.7 text="quoted #{var}" value=#{expr}>

    flag        -> True
    n=3.7       -> float
    text="..."  -> str, ``#{var}`` replaced by str(env[var])
    value=#{e}  -> interpolator("e", env), default env.get("e")

Installation:
    pip install mdit-shortcode
"""

from mdit_shortcode.attributes import (
    AttributeKind,
    AttributeToken,
    iter_attributes,
    parse_attributes,
)
from mdit_shortcode.config import ShortcodeConfig
from mdit_shortcode.decorator import collect_shortcodes, shortcode
from mdit_shortcode.errors import ShortcodeError, ShortcodeSetupError
from mdit_shortcode.interpolation import Interpolator, default_interpolator
from mdit_shortcode.plugin import create_markdown, shortcode_plugin
from mdit_shortcode.protocol import RenderFunc, ShortcodeHandler
from mdit_shortcode.registry import (
    ShortcodeDefinition,
    ShortcodeRegistry,
    ShortcodeRegistryBuilder,
)
from mdit_shortcode.tags import extract_tag, match_tag

__version__ = "0.1.0"

__all__ = [
    # Plugin
    "shortcode_plugin",
    "create_markdown",
    # Configuration
    "ShortcodeConfig",
    "Interpolator",
    "default_interpolator",
    # Registry
    "ShortcodeDefinition",
    "ShortcodeRegistry",
    "ShortcodeRegistryBuilder",
    "ShortcodeHandler",
    "RenderFunc",
    "shortcode",
    "collect_shortcodes",
    # Lexing
    "AttributeKind",
    "AttributeToken",
    "iter_attributes",
    "parse_attributes",
    "extract_tag",
    "match_tag",
    # Errors
    "ShortcodeError",
    "ShortcodeSetupError",
]
