"""Theme pipeline package: value types, propagation, merge and resolution."""
from __future__ import annotations

from tinky_theme.theme.context import get_current_theme, theme_provider
from tinky_theme.theme.hooks import ComponentThemeCache, use_component_theme
from tinky_theme.theme.merge import (
    deep_merge,
    extend_theme,
    merge_component_themes,
)
from tinky_theme.theme.resolve import resolve_styles
from tinky_theme.theme.schemes import (
    DEFAULT_THEME,
    ComponentTheme,
    Computed,
    ResolvedComponentTheme,
    Static,
    Theme,
    ThemeError,
    as_value,
)

__all__ = [
    "Theme",
    "ComponentTheme",
    "ResolvedComponentTheme",
    "Static",
    "Computed",
    "as_value",
    "ThemeError",
    "DEFAULT_THEME",
    "get_current_theme",
    "theme_provider",
    "deep_merge",
    "extend_theme",
    "merge_component_themes",
    "resolve_styles",
    "use_component_theme",
    "ComponentThemeCache",
]
