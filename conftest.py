"""Shared test configuration."""

pytest_plugins = ["getdetails.testing.conftest"]
