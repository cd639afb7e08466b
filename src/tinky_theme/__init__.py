"""tinky_theme - slot-based theming for component trees.

Components ship a default theme; applications override it globally, per
component name, and per instance props.
"""
from __future__ import annotations

# Theme pipeline
from tinky_theme.theme import (
    DEFAULT_THEME,
    ComponentTheme,
    ComponentThemeCache,
    Computed,
    ResolvedComponentTheme,
    Static,
    Theme,
    ThemeError,
    as_value,
    deep_merge,
    extend_theme,
    get_current_theme,
    merge_component_themes,
    resolve_styles,
    theme_provider,
    use_component_theme,
)

# Components
from tinky_theme.components import (
    BaseComponent,
    Box,
    ComponentState,
    Label,
    ThemedComponent,
    ThemeProvider,
    to_rich_style,
)

# Configuration
from tinky_theme.config import (
    ThemingConfig,
    get_theming_config,
    set_theming_config,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Theme",
    "ComponentTheme",
    "ResolvedComponentTheme",
    "Static",
    "Computed",
    "as_value",
    "ThemeError",
    "DEFAULT_THEME",
    # Propagation
    "get_current_theme",
    "theme_provider",
    "ThemeProvider",
    # Merge / resolve
    "deep_merge",
    "extend_theme",
    "merge_component_themes",
    "resolve_styles",
    "use_component_theme",
    "ComponentThemeCache",
    # Components
    "BaseComponent",
    "ComponentState",
    "ThemedComponent",
    "Label",
    "Box",
    "to_rich_style",
    # Config
    "ThemingConfig",
    "get_theming_config",
    "set_theming_config",
]
