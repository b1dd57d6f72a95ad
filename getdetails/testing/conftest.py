"""
Pytest plugin for get-details testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["getdetails.testing.conftest"]
"""

from getdetails.testing.fixtures import mock_registry, populated_registry, settings

__all__ = [
    "settings",
    "mock_registry",
    "populated_registry",
]
