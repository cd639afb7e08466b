"""Style resolution - turn dynamic style slots into concrete style objects."""
from __future__ import annotations

import logging
from typing import Any

from tinky_theme.config import get_theming_config
from tinky_theme.theme.schemes import (
    ComponentTheme,
    Computed,
    ResolvedComponentTheme,
    Static,
    as_value,
)

logger = logging.getLogger(__name__)


def resolve_styles(theme: ComponentTheme, props: Any) -> ResolvedComponentTheme:
    """
    Resolve every style slot of a component theme against props.

    Computed slots are called with ``props``; Static slots are passed
    through unchanged. ``config`` is carried over as-is, still tagged.

    Args:
        theme: Component theme, possibly holding Computed slots
        props: Current props of the component instance

    Returns:
        ResolvedComponentTheme whose styles are all concrete
    """
    theme = ComponentTheme.from_dict(theme)
    trace = get_theming_config().trace_resolution
    resolved: dict[str, Any] = {}

    for slot, value in (theme.styles or {}).items():
        value = as_value(value)
        if isinstance(value, Computed):
            resolved[slot] = value.fn(props)
            if trace:
                logger.debug("Computed slot %r -> %r", slot, resolved[slot])
        elif isinstance(value, Static):
            resolved[slot] = value.value

    return ResolvedComponentTheme(styles=resolved, config=theme.config)
