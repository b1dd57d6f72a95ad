"""Registry adapters and the open, name-keyed registry of sources."""

from getdetails.config import Settings
from getdetails.exceptions import UnsupportedSourceError
from getdetails.sources.base import Source
from getdetails.sources.github import GitHubSource
from getdetails.sources.gitlab import GitLabSource
from getdetails.sources.npm import NpmSource
from getdetails.sources.pypi import PyPISource

BUILTIN_SOURCES: tuple[type[Source], ...] = (NpmSource, PyPISource, GitHubSource, GitLabSource)


class SourceRegistry:
    """Maps case-insensitive source names to adapter instances."""

    def __init__(self, sources: list[Source] | None = None) -> None:
        self._sources: dict[str, Source] = {}
        for source in sources or []:
            self.register(source)

    @classmethod
    def default(cls, settings: Settings | None = None) -> "SourceRegistry":
        """Registry holding npm, pypi, github and gitlab."""
        return cls([source_cls(settings) for source_cls in BUILTIN_SOURCES])

    def register(self, source: Source) -> None:
        """Add or replace the adapter registered under ``source.name``."""
        self._sources[source.name.lower()] = source

    def get(self, name: str) -> Source:
        """
        Look up an adapter by name.

        Raises:
            UnsupportedSourceError: If no adapter has that name
        """
        try:
            return self._sources[name.strip().lower()]
        except KeyError:
            raise UnsupportedSourceError(name) from None

    def names(self) -> list[str]:
        return sorted(self._sources)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._sources


__all__ = [
    "Source",
    "SourceRegistry",
    "NpmSource",
    "PyPISource",
    "GitHubSource",
    "GitLabSource",
    "BUILTIN_SOURCES",
]
