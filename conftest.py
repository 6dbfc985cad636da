"""
Pytest configuration for timemachine
Every test starts and ends on the real system clock
"""

import pytest

from timemachine import get_registry

pytest_plugins = ["timemachine.pytest_plugin", "pytester"]


@pytest.fixture(autouse=True)
def real_clock():
    """Reset the process-wide registry around each test"""
    get_registry().reset()
    yield
    get_registry().reset()
