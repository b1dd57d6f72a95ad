"""Base registry adapter and value-normalization helpers."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any

from getdetails.config import Settings
from getdetails.exceptions import FetchError
from getdetails.logging import get_logger
from getdetails.types.metadata import PackageMetadata

if TYPE_CHECKING:
    from getdetails.async_transport import AsyncHTTPTransport
    from getdetails.transport import HTTPTransport

logger = get_logger("sources")


class Source(ABC):
    """
    Abstract registry adapter.

    Subclasses declare the URLs to look up for an identifier and a pure
    mapping from the decoded documents (in URL order) to PackageMetadata.
    The fetch methods are the adapter boundary: FetchError never escapes
    them, it is logged and reported as None.
    """

    name: str = "unknown"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    @abstractmethod
    def urls(self, identifier: str) -> list[str]:
        """Return the lookup URLs for a package or repository identifier."""

    @abstractmethod
    def to_metadata(self, *documents: Any) -> PackageMetadata:
        """Map decoded registry documents onto PackageMetadata."""

    async def fetch(
        self, transport: "AsyncHTTPTransport", identifier: str
    ) -> PackageMetadata | None:
        """Look up an identifier; returns None when the registry gave no data."""
        try:
            documents = [await transport.get_json(url) for url in self.urls(identifier)]
            return self.map_documents(documents)
        except FetchError as e:
            self._log_failure(identifier, e)
            return None

    def fetch_sync(
        self, transport: "HTTPTransport", identifier: str
    ) -> PackageMetadata | None:
        """Blocking variant of fetch()."""
        try:
            documents = [transport.get_json(url) for url in self.urls(identifier)]
            return self.map_documents(documents)
        except FetchError as e:
            self._log_failure(identifier, e)
            return None

    def map_documents(self, documents: list[Any]) -> PackageMetadata:
        """
        Run to_metadata(), turning a malformed document shape into FetchError.

        Raises:
            FetchError: With code DECODE_ERROR if the mapping fails
        """
        try:
            return self.to_metadata(*documents)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise FetchError(
                "DECODE_ERROR", f"Unexpected {self.name} response shape: {e!r}"
            ) from e

    def format_date(self, value: Any) -> str:
        return format_date(value, self.settings.date_format)

    def _log_failure(self, identifier: str, error: FetchError) -> None:
        logger.warning(f"Fetching {self.name} data for {identifier!r} failed: {error}")


def text(value: Any) -> str:
    """Coerce an optional registry value to a display string."""
    if value is None:
        return ""
    return str(value).strip()


def count(value: Any) -> int | None:
    """Coerce a registry counter to a non-negative int, or None if unknown."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number >= 0 else None


def strip_tag_prefix(tag: Any) -> str:
    """Turn a release tag such as "v1.2.3" into "1.2.3"."""
    tag = text(tag)
    return tag[1:] if tag.startswith("v") else tag


def format_date(value: Any, date_format: str) -> str:
    """
    Format an ISO 8601 timestamp with strftime; unparseable input gives "".

    Examples:
        >>> format_date("2024-01-15T10:30:00Z", "%Y-%m-%d")
        '2024-01-15'
        >>> format_date(None, "%Y-%m-%d")
        ''
    """
    if not value or not isinstance(value, str):
        return ""
    try:
        parsed = datetime.fromisoformat(value.strip().rstrip("Z"))
    except ValueError:
        return ""
    return parsed.strftime(date_format)
