"""
get-details blocking client.

For callers without an event loop that only need data or a rendered report.
"""

from typing import Any

import httpx

from getdetails.config import Settings
from getdetails.exceptions import ConfigError
from getdetails.parser import DEFAULT_SOURCE
from getdetails.renderer import render_report
from getdetails.sources import SourceRegistry
from getdetails.transport import HTTPTransport
from getdetails.types.metadata import PackageMetadata


class GetDetailsClient:
    """
    Blocking client for registry metadata.

    Example:
        ```python
        from getdetails import GetDetailsClient

        with GetDetailsClient() as client:
            print(client.report("octocat/Hello-World", source="github"))
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: SourceRegistry | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.registry = registry or SourceRegistry.default(self.settings)
        self._transport = HTTPTransport(self.settings, client=http_client)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def fetch(self, source: str, identifier: str) -> PackageMetadata | None:
        """
        Fetch metadata from a source.

        Returns:
            PackageMetadata, or None if the lookup failed

        Raises:
            UnsupportedSourceError: If the source is not registered
        """
        adapter = self.registry.get(source)
        return adapter.fetch_sync(self._transport, identifier)

    def report(
        self,
        package_name: str,
        source: str = DEFAULT_SOURCE,
        format: str | None = None,
    ) -> str:
        """
        Fetch and render a report.

        Raises:
            ConfigError: If package_name is empty or the source is unknown
        """
        if not package_name or not package_name.strip():
            raise ConfigError("Package name is required")
        metadata = self.fetch(source or DEFAULT_SOURCE, package_name.strip())
        return render_report(metadata, format)

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GetDetailsClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
