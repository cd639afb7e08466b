#!/usr/bin/env python
"""
Base components - the tree that themed components live in.

Provides:
- BaseComponent: lifecycle, children and the Rich console protocol
- ThemedComponent: a component that resolves its theme on every render
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, ClassVar, Optional

from rich.console import Console, ConsoleOptions, Group, RenderResult

from tinky_theme.theme.hooks import ComponentThemeCache, use_component_theme
from tinky_theme.theme.schemes import ComponentTheme, ResolvedComponentTheme


class ComponentState(Enum):
    """Lifecycle states for components."""
    CREATED = auto()
    MOUNTED = auto()
    DESTROYED = auto()


class BaseComponent(ABC):
    """
    Abstract base class for all components.

    Subclasses implement render() and return a Rich renderable. Children
    are rendered by the parent, inside whatever theme the parent has
    established.
    """

    def __init__(self, *children: BaseComponent):
        self._state = ComponentState.CREATED
        self._parent: Optional[BaseComponent] = None
        self._children: list[BaseComponent] = []
        self._refresh_pending = False
        for child in children:
            self.add_child(child)

    @property
    def state(self) -> ComponentState:
        return self._state

    @property
    def children(self) -> list[BaseComponent]:
        return list(self._children)

    @property
    def parent(self) -> Optional[BaseComponent]:
        return self._parent

    def mount(self, parent: Optional[BaseComponent] = None):
        """Called when the component is added to the render tree."""
        self._parent = parent
        self._state = ComponentState.MOUNTED
        for child in self._children:
            child.mount(self)

    def unmount(self):
        """Called when the component is removed from the render tree."""
        for child in self._children:
            child.unmount()
        self._state = ComponentState.DESTROYED
        self._parent = None

    @abstractmethod
    def render(self):
        """Render the component. Must be implemented by subclasses."""
        pass

    def render_children(self) -> Group:
        return Group(*(child.render() for child in self._children))

    def _schedule_refresh(self):
        """Mark component for refresh on next frame."""
        self._refresh_pending = True

    def should_refresh(self) -> bool:
        return self._refresh_pending

    def clear_refresh(self):
        """Clear the refresh flag after rendering."""
        self._refresh_pending = False
        for child in self._children:
            child.clear_refresh()

    def add_child(self, child: BaseComponent):
        """Add a child component."""
        if self._state == ComponentState.MOUNTED:
            child.mount(self)
        else:
            child._parent = self
        self._children.append(child)
        self._schedule_refresh()

    def remove_child(self, child: BaseComponent):
        """Remove a child component."""
        if child in self._children:
            child.unmount()
            self._children.remove(child)
            self._schedule_refresh()

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        """Rich console protocol implementation."""
        yield self.render()


class ThemedComponent(BaseComponent):
    """
    Component styled through the ambient theme.

    Subclasses set ``component_name`` (the key applications override under)
    and ``default_theme``, then read ``self.theme`` inside render().
    Keyword arguments become the props passed to Computed style slots.
    """

    component_name: ClassVar[str] = ""
    default_theme: ClassVar[ComponentTheme] = ComponentTheme()

    def __init__(self, *children: BaseComponent, **props: Any):
        super().__init__(*children)
        self._props: dict[str, Any] = props
        self._theme_cache = ComponentThemeCache()

    @property
    def props(self) -> dict[str, Any]:
        return self._props

    def set_props(self, **changes: Any):
        """Update props and schedule a refresh."""
        self._props.update(changes)
        self._schedule_refresh()

    @property
    def theme(self) -> ResolvedComponentTheme:
        """Theme resolved against the ambient theme and current props."""
        return use_component_theme(
            self.component_name or type(self).__name__,
            self.default_theme,
            self._props,
            cache=self._theme_cache,
        )

    @property
    def theme_cache(self) -> ComponentThemeCache:
        return self._theme_cache

    def unmount(self):
        self._theme_cache.clear()
        super().unmount()
