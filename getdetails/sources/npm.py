"""npm registry adapter."""

from typing import Any

from getdetails.sources.base import Source, count, text
from getdetails.types.metadata import PackageMetadata


class NpmSource(Source):
    """Reads the latest published version document from the npm registry."""

    name = "npm"

    def urls(self, identifier: str) -> list[str]:
        return [f"{self.settings.npm_url.rstrip('/')}/{identifier}/latest"]

    def to_metadata(self, data: dict[str, Any]) -> PackageMetadata:
        author = data.get("author")
        if isinstance(author, dict):
            author = author.get("name")

        repository = data.get("repository")
        if isinstance(repository, dict):
            repository = repository.get("url")

        keywords = data.get("keywords")
        maintainers = data.get("maintainers")
        time_info = data.get("time")

        return PackageMetadata(
            version=text(data.get("version")),
            name=text(data.get("name")),
            description=text(data.get("description")),
            author=text(author),
            license=_license(data.get("license")),
            homepage=text(data.get("homepage")),
            repository_url=text(repository),
            last_update=self.format_date(
                time_info.get("modified") if isinstance(time_info, dict) else None
            ),
            keywords=", ".join(text(k) for k in keywords) if isinstance(keywords, list) else "",
            maintainers=", ".join(
                text(m.get("name") if isinstance(m, dict) else m) for m in maintainers
            ) if isinstance(maintainers, list) else "",
            dependency_count=count(len(data.get("dependencies") or {})),
        )


def _license(value: Any) -> str:
    # Older packages publish {"type": "MIT", "url": ...}
    if isinstance(value, dict):
        return text(value.get("type"))
    return text(value)
