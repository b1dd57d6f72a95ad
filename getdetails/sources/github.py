"""GitHub REST API adapter."""

from typing import Any

from getdetails.sources.base import Source, count, strip_tag_prefix, text
from getdetails.types.metadata import PackageMetadata


class GitHubSource(Source):
    """Combines the latest release with the repository details of ``owner/repo``."""

    name = "github"

    def urls(self, identifier: str) -> list[str]:
        base = f"{self.settings.github_url.rstrip('/')}/repos/{identifier}"
        return [f"{base}/releases/latest", base]

    def to_metadata(
        self, release: dict[str, Any], repo: dict[str, Any]
    ) -> PackageMetadata:
        owner = repo.get("owner") or {}
        license_info = repo.get("license") or {}
        release_author = release.get("author") or {}

        return PackageMetadata(
            version=strip_tag_prefix(release.get("tag_name")),
            name=text(repo.get("name")),
            full_name=text(repo.get("full_name")),
            description=text(repo.get("description")),
            owner=text(owner.get("login")),
            stars=count(repo.get("stargazers_count")),
            watchers=count(repo.get("watchers_count")),
            forks=count(repo.get("forks_count")),
            open_issues=count(repo.get("open_issues_count")),
            homepage=text(repo.get("homepage")),
            repository_url=text(repo.get("html_url")),
            license=text(license_info.get("name")),
            last_update=self.format_date(repo.get("updated_at")),
            language=text(repo.get("language")),
            default_branch=text(repo.get("default_branch")),
            release_date=self.format_date(release.get("published_at")),
            release_author=text(release_author.get("login")),
            release_notes=text(release.get("body")),
        )
