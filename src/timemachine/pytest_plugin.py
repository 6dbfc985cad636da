"""
TimeMachine pytest plugin

Enable with ``pytest_plugins = ["timemachine.pytest_plugin"]`` in a root
conftest.py.
"""

import pytest

from .registry import get_registry


@pytest.fixture
def timemachine():
    """Process-wide time registry, reset to the real clock after the test"""
    registry = get_registry()
    yield registry
    registry.reset()
