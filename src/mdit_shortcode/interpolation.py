"""Expression interpolation for ``#{expr}`` attribute values.

An interpolator receives the expression text (without the ``#{`` and ``}``
delimiters, surrounding whitespace stripped) and the environment of the
current render call. Whatever it returns becomes the attribute value.

Example:
    >>> default_interpolator("user", {"user": "ada"})
    'ada'
    >>> default_interpolator("missing", {}) is None
    True

Thread Safety:
Interpolators are called concurrently when one MarkdownIt instance renders
on several threads. They must not mutate the environment.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

Interpolator: TypeAlias = Callable[[str, Mapping[str, Any]], Any]


def default_interpolator(expr: str, env: Mapping[str, Any]) -> Any:
    """Look ``expr`` up as a key of ``env``.

    Missing keys resolve to None.
    """
    return env.get(expr)


def lookup(expr: str, env: Mapping[str, Any]) -> str:
    """Stringify ``env[expr]`` for substitution inside a quoted value.

    This is the direct lookup used for embedded ``#{expr}`` forms; it never
    goes through a configured interpolator. Missing keys substitute as an
    empty string; a key bound to None substitutes as ``"None"``.
    """
    if expr not in env:
        return ""
    return str(env[expr])


__all__ = [
    "Interpolator",
    "default_interpolator",
    "lookup",
]
