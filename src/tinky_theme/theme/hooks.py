"""
Per-component theme resolution.

use_component_theme() is called by every themed component on each render:
1. read the ambient theme
2. look up the override registered under the component name
3. merge it over the component's default theme (skipped when absent)
4. resolve style slots against the current props

ComponentThemeCache keeps the last result of one component instance so
that style functions run again only when their inputs change.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Optional

from tinky_theme.config import get_theming_config
from tinky_theme.theme.context import get_current_theme
from tinky_theme.theme.merge import merge_component_themes
from tinky_theme.theme.resolve import resolve_styles
from tinky_theme.theme.schemes import (
    ComponentTheme,
    ResolvedComponentTheme,
    Theme,
)

logger = logging.getLogger(__name__)


def _compute(
    name: str, default_theme: ComponentTheme, ambient: Theme, props: Any
) -> ResolvedComponentTheme:
    default_theme = ComponentTheme.from_dict(default_theme)
    override = ambient.components.get(name)
    if override is None:
        logger.debug("No override for %r, resolving defaults", name)
        return resolve_styles(default_theme, props)

    logger.debug("Merging override for %r", name)
    merged = merge_component_themes(default_theme, override)
    return resolve_styles(merged, props)


@dataclass
class _CacheEntry:
    name: str
    default_theme: ComponentTheme
    ambient: Theme
    props: Any
    result: ResolvedComponentTheme

    def matches(self, name: str, default_theme: ComponentTheme, ambient: Theme, props: Any) -> bool:
        return (
            self.name == name
            and self.default_theme is default_theme
            and self.ambient is ambient
            and self.props == props
        )


class ComponentThemeCache:
    """
    Memo of the last resolved theme for one component instance.

    The entry is reused while the component name is equal, the default
    theme and the ambient theme are the same objects, and the props compare
    equal to a shallow copy taken when the entry was stored.

    The comparison is shallow: mutating a nested value in place (appending
    to a list held in props, say) is not seen as a change. Replace the
    nested value instead, e.g. ``props["items"] = [*props["items"], x]``.
    """

    def __init__(self):
        self._entry: Optional[_CacheEntry] = None
        self._hits = 0
        self._misses = 0

    def get_or_compute(
        self, name: str, default_theme: ComponentTheme, ambient: Theme, props: Any
    ) -> ResolvedComponentTheme:
        entry = self._entry
        if entry is not None and entry.matches(name, default_theme, ambient, props):
            self._hits += 1
            logger.debug("Theme cache hit for %r", name)
            return entry.result

        self._misses += 1
        result = _compute(name, default_theme, ambient, props)
        self._entry = _CacheEntry(
            name=name,
            default_theme=default_theme,
            ambient=ambient,
            props=copy.copy(props),
            result=result,
        )
        return result

    def clear(self):
        """Drop the stored entry (on unmount)."""
        self._entry = None

    def cache_info(self) -> dict:
        return {"hits": self._hits, "misses": self._misses}


def use_component_theme(
    name: str,
    default_theme: ComponentTheme,
    props: Any,
    cache: Optional[ComponentThemeCache] = None,
) -> ResolvedComponentTheme:
    """
    Resolve the theme of a component instance for the current render.

    Args:
        name: Component name the ambient theme registers overrides under
        default_theme: The component's built-in theme
        props: Current props, passed to Computed slots
        cache: The instance's cache; without one every call recomputes

    Returns:
        ResolvedComponentTheme with every style slot concrete
    """
    ambient = get_current_theme()
    if cache is None or not get_theming_config().memoize:
        return _compute(name, default_theme, ambient, props)
    return cache.get_or_compute(name, default_theme, ambient, props)
