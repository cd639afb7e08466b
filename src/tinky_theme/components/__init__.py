"""Components package."""
from __future__ import annotations

from tinky_theme.components.base import BaseComponent, ComponentState, ThemedComponent
from tinky_theme.components.provider import ThemeProvider
from tinky_theme.components.widgets import Box, Label, to_rich_style

__all__ = [
    "BaseComponent",
    "ComponentState",
    "ThemedComponent",
    "ThemeProvider",
    "Label",
    "Box",
    "to_rich_style",
]
