"""
Pytest configuration and shared fixtures for tests.
"""

import logging

import pytest

from carton import ConfigRegistry


@pytest.fixture(autouse=True)
def reset_config():
    """Start and finish every test with the default configuration."""
    ConfigRegistry.reset()
    yield
    ConfigRegistry.reset()


@pytest.fixture
def carton_debug_log(caplog):
    """Capture debug records emitted on the 'carton' logger."""
    caplog.set_level(logging.DEBUG, logger="carton")
    return caplog


@pytest.fixture(params=[0, "", "text", 3.5, [], [1, 2], {"k": "v"}, False, object()])
def non_absent_value(request):
    """Values that are never absent under the default policy, falsy ones included."""
    return request.param
