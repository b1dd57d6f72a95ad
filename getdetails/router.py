"""Dispatch of request descriptors to registry adapters."""

from getdetails.async_transport import AsyncHTTPTransport
from getdetails.sources import Source, SourceRegistry
from getdetails.types.metadata import PackageMetadata


class SourceRouter:
    """
    Routes a source name and identifier to the matching adapter.

    Pure dispatch: no retries, no caching. An unknown source raises
    UnsupportedSourceError before the transport is touched.
    """

    def __init__(self, transport: AsyncHTTPTransport, registry: SourceRegistry) -> None:
        self.transport = transport
        self.registry = registry

    def resolve(self, source: str) -> Source:
        """
        Return the adapter for a source name.

        Raises:
            UnsupportedSourceError: If the source is not registered
        """
        return self.registry.get(source)

    async def route(self, source: str, identifier: str) -> PackageMetadata | None:
        """
        Fetch metadata for an identifier from the named source.

        Returns:
            PackageMetadata, or None if the registry lookup failed

        Raises:
            UnsupportedSourceError: If the source is not registered
        """
        adapter = self.resolve(source)
        return await adapter.fetch(self.transport, identifier)
