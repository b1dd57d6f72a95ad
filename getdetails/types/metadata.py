"""Canonical package metadata shared by all registry adapters."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class Downloads:
    """Download counters; None when the registry does not report them."""

    last_day: int | None = None
    last_week: int | None = None
    last_month: int | None = None


@dataclass
class PackageMetadata:
    """
    Superset of the fields exposed by npm, PyPI, GitHub and GitLab.

    String fields default to "" and counters to None, so every field can be
    rendered without special-casing the source it came from.
    """

    version: str = ""
    name: str = ""
    description: str = ""
    author: str = ""
    author_email: str = ""
    license: str = ""
    homepage: str = ""
    repository_url: str = ""
    last_update: str = ""
    keywords: str = ""
    maintainers: str = ""
    dependency_count: int | None = None
    requires_runtime: str = ""
    downloads: Downloads = field(default_factory=Downloads)
    stars: int | None = None
    forks: int | None = None
    watchers: int | None = None
    open_issues: int | None = None
    language: str = ""
    owner: str = ""
    full_name: str = ""
    default_branch: str = ""
    release_date: str = ""
    release_author: str = ""
    release_notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
