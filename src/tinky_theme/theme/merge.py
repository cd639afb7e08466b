"""
Theme merging - deep, override-wins combination of theme structures.

Rules applied at every level:
- mapping + mapping: merged key by key, override wins, one-sided keys kept
- anything else: the override value replaces the base value wholesale
  (lists, tuples, scalars, callables, Computed slots)

Inputs are never mutated and results never share mutable containers with
them. Callables are kept by reference.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Optional

from tinky_theme.theme.schemes import (
    ComponentTheme,
    Computed,
    Static,
    Theme,
    ThemeValue,
)

logger = logging.getLogger(__name__)


def deep_merge(base: Any, override: Any) -> Any:
    """Merge two JSON-like values, returning a new value."""
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        merged = {key: copy.deepcopy(value) for key, value in base.items()}
        for key, value in override.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(override)


def _copy_value(value: ThemeValue) -> ThemeValue:
    if isinstance(value, Static):
        return Static(copy.deepcopy(value.value))
    return Computed(value.fn)


def merge_values(
    base: Optional[ThemeValue], override: Optional[ThemeValue]
) -> Optional[ThemeValue]:
    """Merge two tagged slot/config values; ``None`` means absent."""
    if override is None:
        return None if base is None else _copy_value(base)
    if base is None:
        return _copy_value(override)
    if isinstance(base, Static) and isinstance(override, Static):
        return Static(deep_merge(base.value, override.value))
    # A Computed on either side cannot be merged into; the override wins.
    return _copy_value(override)


def _merge_styles(
    base: Optional[dict[str, ThemeValue]],
    override: Optional[dict[str, ThemeValue]],
) -> Optional[dict[str, ThemeValue]]:
    if base is None and override is None:
        return None
    merged = {slot: _copy_value(value) for slot, value in (base or {}).items()}
    for slot, value in (override or {}).items():
        merged[slot] = merge_values(merged.get(slot), value)
    return merged


def merge_component_themes(
    base: ComponentTheme, override: ComponentTheme
) -> ComponentTheme:
    """
    Merge an override component theme on top of a base one.

    Args:
        base: Built-in default theme of the component
        override: Theme registered for the component name

    Returns:
        A new ComponentTheme; neither argument is modified
    """
    base = ComponentTheme.from_dict(base)
    override = ComponentTheme.from_dict(override)
    merged = ComponentTheme()
    merged.styles = _merge_styles(base.styles, override.styles)
    merged.config = merge_values(base.config, override.config)
    return merged


def _copy_component_theme(theme: ComponentTheme) -> ComponentTheme:
    return merge_component_themes(theme, ComponentTheme())


def extend_theme(base: Theme, override: Theme, *more: Theme) -> Theme:
    """
    Combine themes into a new one, later themes winning.

    Useful for building an application theme out of presets:

        app_theme = extend_theme(base_preset, brand_colours, user_overrides)

    Component names present on only one side are copied unchanged.
    """
    result = Theme.from_dict(base)
    result_components = {
        name: _copy_component_theme(definition)
        for name, definition in result.components.items()
    }
    for layer in (override, *more):
        layer = Theme.from_dict(layer)
        for name, definition in layer.components.items():
            if name in result_components:
                result_components[name] = merge_component_themes(
                    result_components[name], definition
                )
            else:
                result_components[name] = _copy_component_theme(definition)
        logger.debug("Extended theme with %d component(s)", len(layer.components))
    return Theme(components=result_components)
