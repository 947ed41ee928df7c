"""Tests for shortcode definitions, the registry, and the @shortcode decorator."""

from __future__ import annotations

import inspect

import pytest

from mdit_shortcode import (
    ShortcodeDefinition,
    ShortcodeHandler,
    ShortcodeRegistry,
    ShortcodeRegistryBuilder,
    ShortcodeSetupError,
    collect_shortcodes,
    shortcode,
)


def render_box(params, env) -> str:
    return "<div></div>"


class BoxHandler:
    inline = True

    def render(self, params, env) -> str:
        return "<div class='box'></div>"


class TestShortcodeDefinition:
    """ShortcodeDefinition coercion and validation."""

    def test_defaults(self) -> None:
        definition = ShortcodeDefinition(render=render_box)
        assert definition.inline is False

    def test_immutability(self) -> None:
        definition = ShortcodeDefinition(render=render_box)
        with pytest.raises(AttributeError):
            definition.inline = True  # type: ignore[misc]

    def test_coerce_mapping(self) -> None:
        definition = ShortcodeDefinition.coerce("box", {"render": render_box, "inline": 1})
        assert definition.render is render_box
        assert definition.inline is True

    def test_coerce_handler_object(self) -> None:
        handler = BoxHandler()
        definition = ShortcodeDefinition.coerce("box", handler)
        assert definition.inline is True
        assert definition.render({}, {}) == "<div class='box'></div>"

    def test_coerce_existing_definition(self) -> None:
        definition = ShortcodeDefinition(render=render_box, inline=True)
        assert ShortcodeDefinition.coerce("box", definition) is definition

    @pytest.mark.parametrize(
        "value",
        [
            {},
            {"inline": True},
            {"render": "not callable"},
            None,
            object(),
            ShortcodeDefinition(render=None),  # type: ignore[arg-type]
        ],
    )
    def test_missing_render_raises(self, value: object) -> None:
        with pytest.raises(ShortcodeSetupError, match="box") as exc_info:
            ShortcodeDefinition.coerce("box", value)
        assert exc_info.value.tag == "box"
        assert "missing render function" in str(exc_info.value)

    def test_handler_protocol(self) -> None:
        assert isinstance(BoxHandler(), ShortcodeHandler)
        assert not isinstance(object(), ShortcodeHandler)


class TestShortcodeRegistry:
    """Immutable registry lookups."""

    @pytest.fixture
    def registry(self) -> ShortcodeRegistry:
        return ShortcodeRegistry.from_mapping(
            {
                "box": {"render": render_box},
                "badge": BoxHandler(),
                "note": {"render": render_box, "inline": True},
            }
        )

    def test_lookup(self, registry: ShortcodeRegistry) -> None:
        definition = registry.get("box")
        assert definition is not None
        assert definition.render is render_box
        assert registry.get("missing") is None

    def test_membership(self, registry: ShortcodeRegistry) -> None:
        assert "box" in registry
        assert registry.has("badge")
        assert "Box" not in registry

    def test_names(self, registry: ShortcodeRegistry) -> None:
        assert registry.names == frozenset({"box", "badge", "note"})
        assert len(registry) == 3

    def test_inline_names_keep_order(self, registry: ShortcodeRegistry) -> None:
        assert registry.inline_names == ("badge", "note")

    def test_iteration_order(self, registry: ShortcodeRegistry) -> None:
        assert list(registry) == ["box", "badge", "note"]

    @pytest.mark.parametrize("shortcodes", [None, {}])
    def test_empty(self, shortcodes: dict | None) -> None:
        registry = ShortcodeRegistry.from_mapping(shortcodes)
        assert len(registry) == 0
        assert not registry
        assert registry.inline_names == ()

    def test_invalid_definition_fails_whole_mapping(self) -> None:
        with pytest.raises(ShortcodeSetupError, match="'broken'"):
            ShortcodeRegistry.from_mapping(
                {"box": {"render": render_box}, "broken": {"inline": True}}
            )

    def test_repr(self, registry: ShortcodeRegistry) -> None:
        assert repr(registry) == "ShortcodeRegistry(['badge', 'box', 'note'])"


class TestShortcodeRegistryBuilder:
    """Mutable builder behavior."""

    def test_chaining(self) -> None:
        registry = (
            ShortcodeRegistryBuilder()
            .register("box", {"render": render_box})
            .register_all({"badge": BoxHandler()})
            .build()
        )
        assert registry.names == frozenset({"box", "badge"})

    def test_duplicate_rejected(self) -> None:
        builder = ShortcodeRegistryBuilder()
        builder.register("box", {"render": render_box})
        with pytest.raises(ShortcodeSetupError, match="already registered"):
            builder.register("box", BoxHandler())

    def test_build_is_snapshot(self) -> None:
        builder = ShortcodeRegistryBuilder().register("box", {"render": render_box})
        registry = builder.build()
        builder.register("badge", BoxHandler())
        assert "badge" not in registry
        assert len(builder) == 2

    def test_docstring_example_aligned(self) -> None:
        doc = inspect.cleandoc(ShortcodeRegistryBuilder.__doc__ or "")
        example = doc.split("Example:", 1)[1].strip("\n").splitlines()
        assert example
        assert all(line.startswith("    >>> ") for line in example)


class TestShortcodeDecorator:
    """@shortcode and collect_shortcodes."""

    def test_function(self) -> None:
        @shortcode("greet")
        def greet(params, env):
            return f"Hello {params['name']}"

        handler = greet()
        assert greet.shortcode_name == "greet"
        assert greet.inline is False
        assert greet.__name__ == "greet_shortcode"
        assert handler.render({"name": "Ada"}, {}) == "Hello Ada"
        assert isinstance(handler, ShortcodeHandler)

    def test_class(self) -> None:
        @shortcode("badge", inline=True)
        class Badge:
            def render(self, params, env):
                return "<span></span>"

        assert Badge.shortcode_name == "badge"
        assert Badge.inline is True

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="name"):
            shortcode("")

    def test_collect(self) -> None:
        @shortcode("greet")
        def greet(params, env):
            return "hi"

        @shortcode("badge", inline=True)
        class Badge:
            def render(self, params, env):
                return "<span></span>"

        shortcodes = collect_shortcodes(greet, Badge)
        registry = ShortcodeRegistry.from_mapping(shortcodes)
        assert registry.names == frozenset({"greet", "badge"})
        assert registry.inline_names == ("badge",)

    def test_collect_instance(self) -> None:
        @shortcode("badge")
        class Badge:
            def render(self, params, env):
                return ""

        instance = Badge()
        assert collect_shortcodes(instance) == {"badge": instance}

    def test_collect_undecorated(self) -> None:
        with pytest.raises(ShortcodeSetupError, match="not decorated"):
            collect_shortcodes(BoxHandler)

    def test_collect_duplicate(self) -> None:
        first = shortcode("box")(render_box)
        second = shortcode("box")(render_box)
        with pytest.raises(ShortcodeSetupError, match="already registered"):
            collect_shortcodes(first, second)
