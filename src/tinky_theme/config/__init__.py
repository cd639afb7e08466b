"""Theming configuration - switches for the resolution pipeline."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from tinky_theme.config.defaults import (
    ENV_THEME_MEMOIZE,
    ENV_THEME_TRACE,
    FALSY_VALUES,
    THEME_MEMOIZE_DEFAULT,
    THEME_TRACE_RESOLUTION_DEFAULT,
    TRUTHY_VALUES,
)

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    logger.warning("Ignoring unrecognised value %r for %s", raw, name)
    return default


@dataclass
class ThemingConfig:
    """Configuration for theme resolution.

    Attributes:
        memoize: Reuse the last resolved theme of a component instance while
            its name, default theme, ambient theme and props are unchanged.
        trace_resolution: Log a debug record for every style slot resolved.
    """

    memoize: bool = THEME_MEMOIZE_DEFAULT
    trace_resolution: bool = THEME_TRACE_RESOLUTION_DEFAULT

    @classmethod
    def from_env(cls) -> "ThemingConfig":
        """Create config from environment variables with defaults as fallbacks."""
        return cls(
            memoize=_env_flag(ENV_THEME_MEMOIZE, THEME_MEMOIZE_DEFAULT),
            trace_resolution=_env_flag(ENV_THEME_TRACE, THEME_TRACE_RESOLUTION_DEFAULT),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "ThemingConfig":
        """Create config from dict, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def to_dict(self) -> dict:
        """Convert config to dict."""
        return {
            "memoize": self.memoize,
            "trace_resolution": self.trace_resolution,
        }


# Global config instance
_config: Optional[ThemingConfig] = None


def get_theming_config() -> ThemingConfig:
    """Get the global theming config, reading the environment on first use."""
    global _config
    if _config is None:
        _config = ThemingConfig.from_env()
    return _config


def set_theming_config(config: Optional[ThemingConfig]):
    """Set the global theming config (``None`` re-reads the environment)."""
    global _config
    _config = config


__all__ = [
    "ThemingConfig",
    "get_theming_config",
    "set_theming_config",
]
