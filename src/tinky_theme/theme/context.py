"""
Ambient theme channel.

The current theme lives in a ContextVar. ``theme_provider`` installs a
theme for the extent of a ``with`` block and restores the previous one on
exit, so nested providers shadow their ancestors and never layer onto them.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Optional, Union

from tinky_theme.theme.schemes import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

PartialTheme = Union[Theme, Mapping]

_current_theme: ContextVar[Theme] = ContextVar("tinky_theme_current", default=DEFAULT_THEME)


def get_current_theme() -> Theme:
    """Return the theme installed by the nearest enclosing provider."""
    return _current_theme.get()


def coerce_theme(theme: Optional[PartialTheme]) -> Theme:
    """Normalise a provider argument into a Theme.

    ``None`` gives DEFAULT_THEME, a Theme is returned as-is and a mapping
    is read with Theme.from_dict.
    """
    if theme is None:
        return DEFAULT_THEME
    return Theme.from_dict(theme)


@contextmanager
def theme_provider(theme: Optional[PartialTheme] = None) -> Iterator[Theme]:
    """
    Make ``theme`` the ambient theme inside the block.

    Example:
        with theme_provider({"components": {"Button": {"styles": {...}}}}):
            render(app)
    """
    installed = coerce_theme(theme)
    token = _current_theme.set(installed)
    logger.debug("Theme installed (%d component override(s))", len(installed.components))
    try:
        yield installed
    finally:
        _current_theme.reset(token)
        logger.debug("Theme restored")
