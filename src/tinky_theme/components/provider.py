"""ThemeProvider - tree node that makes a theme ambient for its children."""
from __future__ import annotations

import logging
from typing import Optional

from tinky_theme.components.base import BaseComponent
from tinky_theme.theme.context import PartialTheme, coerce_theme, theme_provider
from tinky_theme.theme.schemes import Theme

logger = logging.getLogger(__name__)


class ThemeProvider(BaseComponent):
    """
    Injects a theme into the subtree below it.

    Accepts a Theme, a partial theme mapping or nothing (the empty default
    theme). The value replaces any theme from an enclosing provider.

    Example:
        app = ThemeProvider(
            Label(text="hello"),
            theme={"components": {"Label": {"styles": {"label": {"color": "red"}}}}},
        )
    """

    def __init__(self, *children: BaseComponent, theme: Optional[PartialTheme] = None):
        super().__init__(*children)
        self._theme = coerce_theme(theme)

    @property
    def theme(self) -> Theme:
        return self._theme

    @theme.setter
    def theme(self, value: Optional[PartialTheme]):
        self._theme = coerce_theme(value)
        logger.debug("Provider theme replaced")
        self._schedule_refresh()

    def render(self):
        with theme_provider(self._theme):
            return self.render_children()
