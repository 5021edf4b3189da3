"""
Minimal Conftest.
"""

import pytest

from rulekit.settings import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear cached settings before and after each test to prevent pollution."""
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
