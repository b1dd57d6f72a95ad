"""
get-details async client.

The programmatic entry point: fetch metadata, render reports, write them into
a document, or hydrate every trigger element of a page.
"""

from typing import Any

import httpx

from getdetails.async_transport import AsyncHTTPTransport
from getdetails.config import Settings
from getdetails.controller import PageController
from getdetails.exceptions import ConfigError
from getdetails.page import Document
from getdetails.parser import DEFAULT_SOURCE
from getdetails.processor import ElementProcessor
from getdetails.renderer import render_report
from getdetails.router import SourceRouter
from getdetails.sources import SourceRegistry
from getdetails.types.metadata import PackageMetadata
from getdetails.types.request import ProcessResult, RequestDescriptor


class AsyncGetDetailsClient:
    """
    Async client for registry metadata and page hydration.

    Example:
        ```python
        import asyncio
        from getdetails import AsyncGetDetailsClient

        async def main():
            async with AsyncGetDetailsClient() as client:
                result = await client.get_details(
                    "flask", source="pypi", format="%name %version (%license)",
                    return_data_only=True,
                )
                print(result.report)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        document: Document | None = None,
        registry: SourceRegistry | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            settings: Runtime configuration (default: Settings())
            document: Page to write reports into; required unless only data is requested
            registry: Source adapters (default: npm, pypi, github, gitlab)
            http_client: Pre-built httpx async client for the transport
        """
        self.settings = settings or Settings()
        self.document = document
        self.registry = registry or SourceRegistry.default(self.settings)

        self._transport = AsyncHTTPTransport(self.settings, client=http_client)
        self.router = SourceRouter(self._transport, self.registry)
        self._controller: PageController | None = None

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def fetch(self, source: str, identifier: str) -> PackageMetadata | None:
        """
        Fetch metadata from a source.

        Returns:
            PackageMetadata, or None if the lookup failed

        Raises:
            UnsupportedSourceError: If the source is not registered
        """
        return await self.router.route(source, identifier)

    async def report(
        self,
        package_name: str,
        source: str = DEFAULT_SOURCE,
        format: str | None = None,
    ) -> str:
        """Fetch and render a report without touching any document."""
        result = await self.get_details(
            package_name, source=source, format=format, return_data_only=True
        )
        return result.report

    async def get_details(
        self,
        package_name: str,
        target: str | None = None,
        source: str = DEFAULT_SOURCE,
        format: str | None = None,
        return_data_only: bool = False,
    ) -> ProcessResult:
        """
        Run the pipeline for explicit parameters instead of a markup attribute.

        Args:
            package_name: Package name, or ``owner/repo`` for GitHub and GitLab
            target: CSS selector of the target(s) (default: settings.default_selector)
            source: Source name, case-insensitive (default: "npm")
            format: Placeholder template; without one the report is the version
            return_data_only: Return metadata and report without writing anything

        Returns:
            ProcessResult with the descriptor, metadata, report and written targets

        Raises:
            ConfigError: If package_name is empty, the source is unknown, or no
                document is attached when writing
            NoTargetError: If no target matched (strict mode)
        """
        if not package_name or not package_name.strip():
            raise ConfigError("Package name is required")

        descriptor = RequestDescriptor(
            package_name=package_name.strip(),
            target_selector=(target or "").strip() or None,
            source=(source or "").strip() or DEFAULT_SOURCE,
            format_template=(format or "").strip() or None,
        )

        if return_data_only:
            metadata = await self.router.route(descriptor.source, descriptor.package_name)
            report = render_report(metadata, descriptor.format_template)
            return ProcessResult(descriptor, metadata, report, [])

        return await self._processor().run(None, descriptor)

    async def hydrate(self) -> list[ProcessResult | None]:
        """
        Process every trigger element of the attached document.

        The trigger elements are discovered on the first call only.

        Raises:
            ConfigError: If no document is attached
        """
        if self._controller is None:
            self._controller = PageController(
                self._require_document(), self._processor(), self.settings
            )
        return await self._controller.hydrate()

    def _processor(self) -> ElementProcessor:
        return ElementProcessor(self._require_document(), self.router, self.settings)

    def _require_document(self) -> Document:
        if self.document is None:
            raise ConfigError("A document is required to write reports")
        return self.document

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGetDetailsClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
