"""Plugin configuration for mdit-shortcode.

Configuration is fixed when the plugin is installed on a MarkdownIt
instance. Per-document data travels in the render environment instead.

Usage:
    md.use(shortcode_plugin, shortcodes, interpolator=my_interpolator)

    # Or with an explicit config object
    config = ShortcodeConfig(interpolator=my_interpolator)
    md.use(shortcode_plugin, shortcodes, config)

    # Or from a plain dictionary (e.g. loaded from YAML)
    md.use(shortcode_plugin, shortcodes, {"interpolator": my_interpolator})

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from mdit_shortcode.errors import ShortcodeSetupError
from mdit_shortcode.interpolation import Interpolator, default_interpolator


@dataclass(frozen=True, slots=True)
class ShortcodeConfig:
    """Immutable plugin configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        interpolator: Evaluates bare ``#{expr}`` attribute values.
            Called as ``interpolator(expr, env)``.

    """

    interpolator: Interpolator = default_interpolator

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ShortcodeConfig:
        """Create ShortcodeConfig from a dictionary.

        Only includes keys that are valid ShortcodeConfig fields; unknown keys
        are silently ignored. A None value keeps the field's default.

        Example:
            >>> config = ShortcodeConfig.from_dict({"unknown_key": "ignored"})
            >>> config.interpolator is default_interpolator
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {
            k: v for k, v in config_dict.items() if k in valid_fields and v is not None
        }
        return cls(**filtered)

    @classmethod
    def resolve(
        cls,
        options: ShortcodeConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ShortcodeConfig:
        """Merge plugin arguments into a validated config.

        Args:
            options: Config object, dictionary, or None for defaults
            **overrides: Keyword options taking precedence over ``options``

        Raises:
            ShortcodeSetupError: If the interpolator is not callable
        """
        if options is None:
            config = DEFAULT_CONFIG
        elif isinstance(options, ShortcodeConfig):
            config = options
        else:
            config = cls.from_dict(options)

        if overrides:
            valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
            config = replace(
                config,
                **{k: v for k, v in overrides.items() if k in valid_fields and v is not None},
            )

        if not callable(config.interpolator):
            raise ShortcodeSetupError("<config>", "interpolator must be callable")
        return config


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: ShortcodeConfig = ShortcodeConfig()

__all__ = [
    "DEFAULT_CONFIG",
    "ShortcodeConfig",
]
