"""Attribute lexer for shortcode tags.

Scans the raw text of an HTML token and extracts ``name[=value]`` pairs.
Four attribute forms are recognized:

    <box flag n=3.7 title="Hi #{user}" data=#{items}>

- ``flag``           -> True
- ``n=3.7``          -> 3.7 (always float)
- ``title="..."``    -> str, with each embedded ``#{key}`` replaced by
                        ``str(env[key])``
- ``data=#{items}``  -> interpolator("items", env), uncoerced

Anything that does not fit the grammar (unterminated quotes, stray
punctuation) is skipped without error.

Thread Safety:
The compiled patterns are module constants scanned with ``finditer``,
so no scan position is shared between calls.

"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from enum import Enum, auto
from typing import Any, NamedTuple

from mdit_shortcode.interpolation import Interpolator, default_interpolator, lookup

_NAME = r"(?P<name>[a-zA-Z_:][a-zA-Z0-9:._-]*)"
_NUMBER = r"(?P<number>-?(?:\d*\.\d+|\d+)(?:[eE]-?\d+)?)"
_STRING = r"(?P<string>'[^']*'|\"[^\"]*\")"
_EXPR = r"(?P<expr>#\{[^}]*\})"

ATTRIBUTE_PATTERN = re.compile(
    r"\s+" + _NAME + r"(?:\s*=\s*(?:" + _NUMBER + "|" + _STRING + "|" + _EXPR + "))?"
)
EMBEDDED_EXPR_PATTERN = re.compile(r"#\{([^}]*)\}")


class AttributeKind(Enum):
    """Literal kind of an attribute value."""

    FLAG = auto()
    NUMBER = auto()
    STRING = auto()
    EXPRESSION = auto()


class AttributeToken(NamedTuple):
    """One lexed attribute, before evaluation.

    ``raw`` keeps the source text of the value: quotes included for
    strings, ``#{...}`` delimiters included for expressions, and an
    empty string for flags.
    """

    name: str
    kind: AttributeKind
    raw: str


def iter_attributes(content: str) -> Iterator[AttributeToken]:
    """Yield attribute lexemes from ``content`` left to right.

    The tag name itself is never yielded, since every attribute must be
    preceded by whitespace.
    """
    for match in ATTRIBUTE_PATTERN.finditer(content):
        name = match.group("name")
        if match.group("expr") is not None:
            yield AttributeToken(name, AttributeKind.EXPRESSION, match.group("expr"))
        elif match.group("string") is not None:
            yield AttributeToken(name, AttributeKind.STRING, match.group("string"))
        elif match.group("number") is not None:
            yield AttributeToken(name, AttributeKind.NUMBER, match.group("number"))
        else:
            yield AttributeToken(name, AttributeKind.FLAG, "")


def interpolate_string(raw: str, env: Mapping[str, Any]) -> str:
    """Replace every ``#{key}`` in ``raw`` with ``str(env[key])``."""
    return EMBEDDED_EXPR_PATTERN.sub(lambda m: lookup(m.group(1), env), raw)


def evaluate(
    token: AttributeToken,
    env: Mapping[str, Any],
    interpolator: Interpolator = default_interpolator,
) -> Any:
    """Turn a lexed attribute into its typed value."""
    if token.kind is AttributeKind.EXPRESSION:
        return interpolator(token.raw[2:-1].strip(), env)
    if token.kind is AttributeKind.STRING:
        return interpolate_string(token.raw[1:-1], env)
    if token.kind is AttributeKind.NUMBER:
        return float(token.raw)
    return True


def parse_attributes(
    content: str,
    env: Mapping[str, Any] | None = None,
    interpolator: Interpolator = default_interpolator,
) -> dict[str, Any]:
    """Parse all attributes of a shortcode tag.

    Args:
        content: Raw tag text, e.g. ``'<box first n=3.7>'``
        env: Render environment used for interpolation
        interpolator: Hook for bare ``#{expr}`` values

    Returns:
        Mapping of attribute name to typed value. Later duplicates win.

    Example:
        >>> parse_attributes('<box first n=3.7 label="a#{x}b">', {"x": 1})
        {'first': True, 'n': 3.7, 'label': 'a1b'}

    """
    if env is None:
        env = {}
    parameters: dict[str, Any] = {}
    for token in iter_attributes(content):
        parameters[token.name] = evaluate(token, env, interpolator)
    return parameters


__all__ = [
    "ATTRIBUTE_PATTERN",
    "EMBEDDED_EXPR_PATTERN",
    "AttributeKind",
    "AttributeToken",
    "evaluate",
    "interpolate_string",
    "iter_attributes",
    "parse_attributes",
]
