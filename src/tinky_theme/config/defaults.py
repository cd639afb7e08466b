"""Default configuration values for tinky_theme.

Environment variable names and their fallback values live here so the
config dataclass and the tests agree on them.

Usage:
    from tinky_theme.config.defaults import THEME_MEMOIZE_DEFAULT
"""

from __future__ import annotations

# =============================================================================
# Resolution Defaults
# =============================================================================

# Per-instance memoization of use_component_theme results
THEME_MEMOIZE_DEFAULT = True

# Debug record for every slot the resolver evaluates
THEME_TRACE_RESOLUTION_DEFAULT = False


# =============================================================================
# Environment Variables
# =============================================================================

ENV_THEME_MEMOIZE = "TINKY_THEME_MEMOIZE"
ENV_THEME_TRACE = "TINKY_THEME_TRACE"

# Values accepted as "true" when parsing boolean env vars
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES = frozenset({"0", "false", "no", "off"})
