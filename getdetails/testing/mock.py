"""
Mock registries for testing.

Provides a MockRegistry that answers registry URLs from configured JSON
documents through ``httpx.MockTransport`` and records every request.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx

from getdetails.config import Settings
from getdetails.sources import GitHubSource, GitLabSource, NpmSource, PyPISource


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: Any = None
    status_code: int = 200
    error: Exception | None = None
    call_count: int = 0


@dataclass
class MockCall:
    """Record of a request."""

    method: str
    url: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockRegistry:
    """
    In-memory stand-in for the npm, PyPI, GitHub and GitLab APIs.

    Unconfigured URLs answer 404, like a registry asked for an unknown
    package.

    Example:
        ```python
        registry = MockRegistry()
        registry.configure_npm("left-pad", {"name": "left-pad", "version": "1.3.0"})

        async with AsyncGetDetailsClient(http_client=registry.async_client()) as client:
            assert await client.report("left-pad") == "1.3.0"

        assert registry.call_count() == 1
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._responses: dict[str, MockResponse] = {}
        self._calls: list[MockCall] = []

    def configure(
        self,
        url: str,
        data: Any = None,
        status_code: int = 200,
        error: Exception | None = None,
    ) -> None:
        """
        Configure the response for one URL.

        Args:
            url: Exact request URL
            data: JSON-serializable body, or bytes sent verbatim
            status_code: HTTP status to answer with
            error: Exception raised instead of answering (e.g. httpx.ConnectError)
        """
        self._responses[url] = MockResponse(data=data, status_code=status_code, error=error)

    def configure_npm(self, name: str, document: Any = None, **kwargs: Any) -> None:
        self._configure_urls(NpmSource(self.settings).urls(name), [document], **kwargs)

    def configure_pypi(self, name: str, document: Any = None, **kwargs: Any) -> None:
        self._configure_urls(PyPISource(self.settings).urls(name), [document], **kwargs)

    def configure_github(
        self, path: str, release: Any = None, repo: Any = None, **kwargs: Any
    ) -> None:
        self._configure_urls(GitHubSource(self.settings).urls(path), [release, repo], **kwargs)

    def configure_gitlab(
        self, path: str, releases: Any = None, project: Any = None, **kwargs: Any
    ) -> None:
        self._configure_urls(
            GitLabSource(self.settings).urls(path), [releases, project], **kwargs
        )

    def _configure_urls(self, urls: list[str], documents: list[Any], **kwargs: Any) -> None:
        for url, document in zip(urls, documents):
            self.configure(url, document, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        """httpx.MockTransport handler."""
        url = str(request.url)
        self._calls.append(MockCall(method=request.method, url=url))

        response = self._responses.get(url)
        if response is None:
            return httpx.Response(404, json={"message": "Not Found"})

        response.call_count += 1
        if response.error:
            raise response.error
        if isinstance(response.data, bytes):
            return httpx.Response(response.status_code, content=response.data)
        return httpx.Response(response.status_code, json=response.data)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.Client:
        """Blocking httpx client served by this registry."""
        return httpx.Client(transport=self.transport())

    def async_client(self) -> httpx.AsyncClient:
        """Async httpx client served by this registry."""
        return httpx.AsyncClient(transport=self.transport())

    def was_called(self, url_part: str) -> bool:
        """Check if any request URL contains ``url_part``."""
        return any(url_part in call.url for call in self._calls)

    def call_count(self, url_part: str | None = None) -> int:
        """Number of requests, optionally only those whose URL contains ``url_part``."""
        return len(self.get_calls(url_part))

    def get_calls(self, url_part: str | None = None) -> list[MockCall]:
        if url_part is None:
            return list(self._calls)
        return [call for call in self._calls if url_part in call.url]

    def reset(self) -> None:
        """Reset all recorded calls and configured responses."""
        self._calls.clear()
        self._responses.clear()


__all__ = [
    "MockRegistry",
    "MockCall",
    "MockResponse",
]
