"""
Async HTTP Transport for get-details.

Same contract as HTTPTransport, using the httpx async client so every
element on a page can wait on its registry independently.
"""

import time
from typing import Any

import httpx

from getdetails.config import Settings
from getdetails.exceptions import FetchError
from getdetails.logging import log_http_request, log_http_response
from getdetails.transport import check_response


class AsyncHTTPTransport:
    """Async registry transport built on httpx.AsyncClient."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            settings: Timeout and User-Agent source (default: Settings())
            client: Pre-built async httpx client
        """
        self.settings = settings or Settings()
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": self.settings.user_agent,
            },
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_json(self, url: str) -> Any:
        """
        GET a URL and return its decoded JSON body.

        Raises:
            FetchError: On network, HTTP status or decode failures
        """
        log_http_request("GET", url)
        started = time.monotonic()
        try:
            response = await self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FetchError("CONNECTION_ERROR", str(e), url=url) from e

        data = check_response(response, url)
        log_http_response(
            response.status_code,
            url,
            body=data,
            elapsed_ms=(time.monotonic() - started) * 1000,
        )
        return data
