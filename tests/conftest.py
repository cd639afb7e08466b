"""Pytest configuration for tinky_theme tests."""
import sys
from pathlib import Path

import pytest

# Add src to path for the tests - conftest is in tests/, so parent.parent is project root
project_root = Path(__file__).resolve().parent.parent
src_path = project_root / "src"

# Insert at the very beginning to override any other paths
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_theming_config():
    """Give every test the default theming config, whatever the environment says."""
    from tinky_theme.config import ThemingConfig, set_theming_config

    set_theming_config(ThemingConfig())
    yield
    set_theming_config(None)
