"""PyPI JSON API adapter."""

from typing import Any

from getdetails.sources.base import Source, count, text
from getdetails.types.metadata import Downloads, PackageMetadata


class PyPISource(Source):
    """Reads ``/pypi/<name>/json``; package metadata lives under ``info``."""

    name = "pypi"

    def urls(self, identifier: str) -> list[str]:
        return [f"{self.settings.pypi_url.rstrip('/')}/pypi/{identifier}/json"]

    def to_metadata(self, data: dict[str, Any]) -> PackageMetadata:
        info = data["info"]
        project_urls = info.get("project_urls") or {}
        downloads = info.get("downloads") or {}
        files = data.get("urls") or []
        first_file = files[0] if files else {}

        return PackageMetadata(
            version=text(info.get("version")),
            name=text(info.get("name")),
            description=text(info.get("summary")),
            author=text(info.get("author")),
            author_email=text(info.get("author_email")),
            license=text(info.get("license")),
            homepage=text(info.get("home_page") or info.get("project_url")),
            repository_url=text(project_urls.get("Source")),
            last_update=self.format_date(first_file.get("upload_time")),
            keywords=text(info.get("keywords")),
            maintainers=text(info.get("maintainer")),
            requires_runtime=text(info.get("requires_python")),
            downloads=Downloads(
                last_day=count(first_file.get("downloads")),
                last_week=count(downloads.get("last_week")),
                last_month=count(downloads.get("last_month")),
            ),
        )
