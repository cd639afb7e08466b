#!/usr/bin/env python
"""
Theme value types - the data shapes shared by the whole theme pipeline.

A Theme maps component names to ComponentTheme definitions. Each
ComponentTheme holds:
- styles: slot name -> Static(style object) or Computed(props -> style object)
- config: Static(mapping) or Computed(props -> mapping)

Plain data and plain callables are accepted wherever a tagged value is
expected and are wrapped by as_value().
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Optional, TypeVar, Union

P = TypeVar("P")

# Opaque to the pipeline: whatever the rendering primitives consume.
StyleObject = Any


class ThemeError(Exception):
    """Raised when loosely-typed data cannot be read as a theme."""
    pass


@dataclass(frozen=True)
class Static:
    """A value that does not depend on props."""
    value: Any

    def evaluate(self, props: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Computed:
    """A value computed from the component's current props."""
    fn: Callable[[Any], Any]

    def evaluate(self, props: Any) -> Any:
        return self.fn(props)


ThemeValue = Union[Static, Computed]


def as_value(value: Any) -> ThemeValue:
    """Wrap plain data or a callable in its tagged variant."""
    if isinstance(value, (Static, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Static(value)


def _coerce_styles(styles: Optional[Mapping]) -> Optional[dict[str, ThemeValue]]:
    if styles is None:
        return None
    return {slot: as_value(value) for slot, value in styles.items()}


@dataclass(init=False)
class ComponentTheme(Generic[P]):
    """Theme definition for one component: per-slot styles plus config."""

    styles: Optional[dict[str, ThemeValue]]
    config: Optional[ThemeValue]

    def __init__(
        self,
        styles: Optional[Mapping[str, Any]] = None,
        config: Any = None,
    ):
        self.styles = _coerce_styles(styles)
        self.config = None if config is None else as_value(config)

    @classmethod
    def from_dict(cls, data: Any) -> "ComponentTheme":
        """Create a component theme from a ``{"styles": ..., "config": ...}`` dict."""
        if isinstance(data, ComponentTheme):
            return data
        if not isinstance(data, Mapping):
            raise ThemeError(
                f"component theme must be a mapping, got {type(data).__name__}"
            )
        styles = data.get("styles")
        if styles is not None and not isinstance(styles, Mapping):
            raise ThemeError(
                f"component styles must be a mapping, got {type(styles).__name__}"
            )
        return cls(styles=styles, config=data.get("config"))


@dataclass
class ResolvedComponentTheme(Generic[P]):
    """A component theme whose style slots are all concrete style objects.

    ``config`` keeps its tagged shape; call ``config.evaluate(props)`` when
    the component needs the concrete mapping.
    """

    styles: dict[str, StyleObject] = field(default_factory=dict)
    config: Optional[ThemeValue] = None


@dataclass
class Theme:
    """Complete theme: component name -> ComponentTheme."""

    components: dict[str, ComponentTheme] = field(default_factory=dict)

    def __post_init__(self):
        if self.components is None:
            self.components = {}
        else:
            # A None definition means "no override" for that name.
            self.components = {
                name: ComponentTheme.from_dict(definition)
                for name, definition in self.components.items()
                if definition is not None
            }

    @classmethod
    def from_dict(cls, data: Any) -> "Theme":
        """Create a theme from a full or partial dict.

        A missing ``components`` key yields an empty component registry.
        """
        if isinstance(data, Theme):
            return data
        if not isinstance(data, Mapping):
            raise ThemeError(f"theme must be a mapping, got {type(data).__name__}")
        components = data.get("components")
        if components is not None and not isinstance(components, Mapping):
            raise ThemeError(
                f"theme components must be a mapping, got {type(components).__name__}"
            )
        return cls(components=dict(components or {}))


def _read_only(theme: Theme) -> Theme:
    theme.components = MappingProxyType(theme.components)
    return theme


# Ambient theme when no provider has been entered; shared, so not writable
DEFAULT_THEME = _read_only(Theme())
