"""Shortcode registry for tag lookup and setup-time validation.

The registry maps tag names to ShortcodeDefinitions. It is built once,
when the plugin is installed, and never changes afterwards.

Thread Safety:
ShortcodeRegistry is immutable after creation. Safe to share.
Use ShortcodeRegistryBuilder for mutable construction.

Example:
    >>> registry = ShortcodeRegistry.from_mapping({
    ...     "box": {"render": lambda params, env: "<div></div>", "inline": True},
    ... })
    >>> registry.inline_names
    ('box',)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mdit_shortcode.errors import ShortcodeSetupError

if TYPE_CHECKING:
    from mdit_shortcode.protocol import RenderFunc


@dataclass(frozen=True, slots=True)
class ShortcodeDefinition:
    """A registered shortcode.

    Attributes:
        render: Callable producing the tag's replacement HTML
        inline: Promote the tag into a paragraph when it stands alone

    """

    render: RenderFunc
    inline: bool = False

    @classmethod
    def coerce(cls, tag: str, value: Any) -> ShortcodeDefinition:
        """Build a definition from what a host passed in.

        Accepts an existing ShortcodeDefinition, a mapping with ``render``
        and optional ``inline`` keys, or any object with a ``render``
        attribute (see ShortcodeHandler).

        Raises:
            ShortcodeSetupError: If no callable render is found
        """
        if isinstance(value, ShortcodeDefinition):
            render, inline = value.render, value.inline
        elif isinstance(value, Mapping):
            render = value.get("render")
            inline = value.get("inline", False)
        else:
            render = getattr(value, "render", None)
            inline = getattr(value, "inline", False)

        if not callable(render):
            raise ShortcodeSetupError(tag, "missing render function")

        if isinstance(value, ShortcodeDefinition):
            return value
        return cls(render=render, inline=bool(inline))


class ShortcodeRegistry:
    """Immutable registry of shortcode definitions.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_by_name", "_inline_names")

    def __init__(self, by_name: dict[str, ShortcodeDefinition]) -> None:
        """Initialize registry from validated definitions.

        Use from_mapping() or ShortcodeRegistryBuilder to create instances.
        """
        self._by_name = by_name
        self._inline_names = tuple(
            name for name, definition in by_name.items() if definition.inline
        )

    @classmethod
    def from_mapping(cls, shortcodes: Mapping[str, Any] | None) -> ShortcodeRegistry:
        """Validate a host-supplied ``{tag: definition}`` mapping.

        None or an empty mapping gives an empty registry.

        Raises:
            ShortcodeSetupError: If any definition lacks a callable render
        """
        builder = ShortcodeRegistryBuilder()
        if shortcodes:
            builder.register_all(shortcodes)
        return builder.build()

    def get(self, name: str) -> ShortcodeDefinition | None:
        """Get definition for tag name, or None."""
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if tag name is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """All registered tag names."""
        return frozenset(self._by_name)

    @property
    def inline_names(self) -> tuple[str, ...]:
        """Tag names flagged inline, in registration order."""
        return self._inline_names

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"ShortcodeRegistry({sorted(self._by_name)!r})"


class ShortcodeRegistryBuilder:
    """Mutable builder for ShortcodeRegistry.

    Example:
        >>> builder = ShortcodeRegistryBuilder()
        >>> builder.register("box", BoxShortcode())
        >>> registry = builder.build()

    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_name: dict[str, ShortcodeDefinition] = {}

    def register(self, name: str, definition: Any) -> ShortcodeRegistryBuilder:
        """Register a shortcode under ``name``.

        Args:
            name: Tag name as written after ``<``
            definition: ShortcodeDefinition, mapping or handler object

        Returns:
            Self for chaining

        Raises:
            ShortcodeSetupError: If render is missing or name is taken
        """
        if name in self._by_name:
            raise ShortcodeSetupError(name, "already registered")
        self._by_name[name] = ShortcodeDefinition.coerce(name, definition)
        return self

    def register_all(self, shortcodes: Mapping[str, Any]) -> ShortcodeRegistryBuilder:
        """Register every entry of a ``{tag: definition}`` mapping."""
        for name, definition in shortcodes.items():
            self.register(name, definition)
        return self

    def build(self) -> ShortcodeRegistry:
        """Build immutable registry from registered definitions."""
        return ShortcodeRegistry(dict(self._by_name))

    def __len__(self) -> int:
        """Number of registered shortcodes."""
        return len(self._by_name)


__all__ = [
    "ShortcodeDefinition",
    "ShortcodeRegistry",
    "ShortcodeRegistryBuilder",
]
