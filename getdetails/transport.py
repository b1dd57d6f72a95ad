"""
HTTP Transport for get-details.

Performs plain unauthenticated GET requests against registry JSON APIs and
maps every failure onto FetchError. Failures are reported once, without
retries.
"""

import time
from typing import Any

import httpx

from getdetails.config import Settings
from getdetails.exceptions import FetchError
from getdetails.logging import log_http_request, log_http_response


def check_response(response: httpx.Response, url: str) -> Any:
    """
    Validate a registry response and decode its JSON body.

    Args:
        response: Response returned by httpx
        url: Requested URL, for error reporting

    Returns:
        Decoded JSON document

    Raises:
        FetchError: On a non-2xx status or a body that is not JSON
    """
    if not response.is_success:
        raise FetchError(
            "HTTP_ERROR",
            f"HTTP error! status: {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        raise FetchError(
            "DECODE_ERROR",
            f"Invalid JSON in response: {e}",
            url=url,
            status_code=response.status_code,
        ) from e


class HTTPTransport:
    """Blocking registry transport built on httpx.Client."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            settings: Timeout and User-Agent source (default: Settings())
            client: Pre-built httpx client, e.g. one wired to httpx.MockTransport
        """
        self.settings = settings or Settings()
        self._client = client or httpx.Client(
            timeout=self.settings.timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": self.settings.user_agent,
            },
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_json(self, url: str) -> Any:
        """
        GET a URL and return its decoded JSON body.

        Raises:
            FetchError: On network, HTTP status or decode failures
        """
        log_http_request("GET", url)
        started = time.monotonic()
        try:
            response = self._client.get(url)
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
