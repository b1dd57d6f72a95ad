"""
get-details settings.

All knobs have defaults suitable for the public registries; `Settings.from_env`
lets a deployment point adapters at mirrors or change target resolution.
"""

import os
from dataclasses import dataclass

from getdetails.exceptions import ConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    """Runtime configuration shared by transports, adapters and page processing."""

    timeout: float = 10.0
    user_agent: str = "get-details/0.1.0"
    npm_url: str = "https://registry.npmjs.org"
    pypi_url: str = "https://pypi.org"
    github_url: str = "https://api.github.com"
    gitlab_url: str = "https://gitlab.com"
    attribute: str = "data-get-details"
    default_selector: str = "#package_version, .current-version"
    strict_targets: bool = True
    date_format: str = "%x"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create settings from environment variables.

        Environment variables (all optional):
            GET_DETAILS_TIMEOUT: Request timeout in seconds
            GET_DETAILS_NPM_URL, GET_DETAILS_PYPI_URL,
            GET_DETAILS_GITHUB_URL, GET_DETAILS_GITLAB_URL: Registry base URLs
            GET_DETAILS_ATTRIBUTE: Trigger attribute name
            GET_DETAILS_SELECTOR: Default target selector
            GET_DETAILS_STRICT: "1"/"0" - whether a missing target is an error
            GET_DETAILS_DATE_FORMAT: strftime format for dates

        Raises:
            ConfigError: If a numeric or boolean variable cannot be parsed
        """
        settings = cls()

        timeout = os.environ.get("GET_DETAILS_TIMEOUT")
        if timeout:
            try:
                settings.timeout = float(timeout)
            except ValueError:
                raise ConfigError(f"Invalid GET_DETAILS_TIMEOUT: {timeout!r}") from None
            if settings.timeout <= 0:
                raise ConfigError("GET_DETAILS_TIMEOUT must be positive")

        strict = os.environ.get("GET_DETAILS_STRICT")
        if strict:
            settings.strict_targets = _parse_bool("GET_DETAILS_STRICT", strict)

        for attr, var in (
            ("npm_url", "GET_DETAILS_NPM_URL"),
            ("pypi_url", "GET_DETAILS_PYPI_URL"),
            ("github_url", "GET_DETAILS_GITHUB_URL"),
            ("gitlab_url", "GET_DETAILS_GITLAB_URL"),
            ("attribute", "GET_DETAILS_ATTRIBUTE"),
            ("default_selector", "GET_DETAILS_SELECTOR"),
            ("date_format", "GET_DETAILS_DATE_FORMAT"),
        ):
            value = os.environ.get(var)
            if value:
                setattr(settings, attr, value)

        return settings


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid {name}: {value!r}. Must be one of 1/0, true/false, yes/no")
