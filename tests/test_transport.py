"""
Tests for the HTTP transports.
"""

import asyncio

import httpx
import pytest

from getdetails.async_transport import AsyncHTTPTransport
from getdetails.config import Settings
from getdetails.exceptions import FetchError
from getdetails.testing import MockRegistry
from getdetails.transport import HTTPTransport

URL = "https://registry.npmjs.org/left-pad/latest"


def test_get_json(mock_registry: MockRegistry) -> None:
    mock_registry.configure(URL, {"version": "1.3.0"})

    with HTTPTransport(client=mock_registry.client()) as transport:
        assert transport.get_json(URL) == {"version": "1.3.0"}

    assert mock_registry.get_calls()[0].method == "GET"


def test_async_get_json(mock_registry: MockRegistry) -> None:
    mock_registry.configure(URL, [1, 2, 3])

    async def run():
        async with AsyncHTTPTransport(client=mock_registry.async_client()) as transport:
            return await transport.get_json(URL)

    assert asyncio.run(run()) == [1, 2, 3]


@pytest.mark.parametrize("status_code", [300, 304, 400, 404, 429, 500, 503])
def test_error_status_raises_fetch_error(mock_registry: MockRegistry, status_code: int) -> None:
    mock_registry.configure(URL, {"error": "x"}, status_code=status_code)

    with HTTPTransport(client=mock_registry.client()) as transport:
        with pytest.raises(FetchError) as exc_info:
            transport.get_json(URL)

    assert exc_info.value.code == "HTTP_ERROR"
    assert exc_info.value.status_code == status_code
    assert exc_info.value.url == URL
    # One attempt only
    assert mock_registry.call_count() == 1


def test_connection_error(mock_registry: MockRegistry) -> None:
    mock_registry.configure(URL, error=httpx.ConnectTimeout("timed out"))

    async def run():
        async with AsyncHTTPTransport(client=mock_registry.async_client()) as transport:
            await transport.get_json(URL)

    with pytest.raises(FetchError) as exc_info:
        asyncio.run(run())

    assert exc_info.value.code == "CONNECTION_ERROR"


def test_decode_error(mock_registry: MockRegistry) -> None:
    mock_registry.configure(URL, b"{not json")

    with HTTPTransport(client=mock_registry.client()) as transport:
        with pytest.raises(FetchError) as exc_info:
            transport.get_json(URL)

    assert exc_info.value.code == "DECODE_ERROR"


def test_default_client_headers() -> None:
    transport = HTTPTransport(Settings(user_agent="test-agent/1.0", timeout=3.0))

    assert transport._client.headers["User-Agent"] == "test-agent/1.0"
    assert transport._client.timeout.connect == 3.0
    transport.close()
