"""
Headless rendering for tests.

Usage:
    from tinky_theme.testing import render

    result = render(ThemeProvider(Label(text="hi"), theme=my_theme))
    assert result.last_frame() == "hi"
"""
from __future__ import annotations

import io
from typing import Optional

from rich.console import Console

from tinky_theme.components.base import BaseComponent


class RenderResult:
    """Handle on a mounted root component and the frames it produced."""

    def __init__(self, root: BaseComponent, width: int = 80):
        self._width = width
        self._root: Optional[BaseComponent] = None
        self.frames: list[str] = []
        self.rerender(root)

    @property
    def root(self) -> Optional[BaseComponent]:
        return self._root

    def _draw(self) -> str:
        console = Console(
            file=io.StringIO(),
            width=self._width,
            record=True,
            color_system=None,
            force_terminal=False,
        )
        console.print(self._root.render())
        output = console.export_text(styles=False)
        lines = [line.rstrip() for line in output.rstrip("\n").splitlines()]
        return "\n".join(lines)

    def rerender(self, root: Optional[BaseComponent] = None) -> str:
        """Draw a new frame, replacing the root component if one is given."""
        if root is not None and root is not self._root:
            if self._root is not None:
                self._root.unmount()
            root.mount()
            self._root = root
        if self._root is None:
            raise RuntimeError("Nothing is mounted; pass a root component to rerender()")
        frame = self._draw()
        self._root.clear_refresh()
        self.frames.append(frame)
        return frame

    def last_frame(self) -> str:
        return self.frames[-1]

    def unmount(self):
        if self._root is not None:
            self._root.unmount()
            self._root = None


def render(root: BaseComponent, width: int = 80) -> RenderResult:
    """Mount ``root`` and draw its first frame."""
    return RenderResult(root, width=width)
