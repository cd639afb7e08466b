#!/usr/bin/env python
"""
Themed widgets - small components rendered with Rich.

Slot style objects are plain mappings using camelCase keys
(``color``, ``backgroundColor``, ``borderColor``...). Keys a widget does not
understand are ignored.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from tinky_theme.components.base import ThemedComponent
from tinky_theme.theme.schemes import ComponentTheme

# style mapping key -> rich.style.Style keyword
_RICH_STYLE_KEYS = {
    "color": "color",
    "backgroundColor": "bgcolor",
    "bold": "bold",
    "dim": "dim",
    "dimColor": "dim",
    "italic": "italic",
    "underline": "underline",
    "strikethrough": "strike",
}


def to_rich_style(style: Any) -> Style:
    """Convert a slot style object into a rich Style."""
    if isinstance(style, Style):
        return style
    if not isinstance(style, Mapping):
        return Style()
    kwargs = {
        rich_key: style[key]
        for key, rich_key in _RICH_STYLE_KEYS.items()
        if style.get(key) is not None
    }
    return Style(**kwargs)


class Label(ThemedComponent):
    """
    A single line of text.

    Slots:
        label: text style
    Props:
        text: content to display
    """

    component_name = "Label"
    default_theme = ComponentTheme(styles={"label": {}})

    def render(self):
        style = self.theme.styles.get("label", {})
        return Text(str(self._props.get("text", "")), style=to_rich_style(style))


class Box(ThemedComponent):
    """
    Bordered container.

    Slots:
        root: ``borderColor`` and ``padding`` (int or tuple)
    Config:
        title: panel title
    """

    component_name = "Box"
    default_theme = ComponentTheme(
        styles={"root": {"borderColor": "white", "padding": (0, 1)}},
        config={"title": ""},
    )

    def render(self):
        theme = self.theme
        root = theme.styles.get("root", {})
        config = theme.config.evaluate(self._props) if theme.config else {}
        return Panel(
            self.render_children(),
            title=config.get("title") or None,
            border_style=Style(color=root.get("borderColor")),
            padding=root.get("padding", (0, 1)),
        )
