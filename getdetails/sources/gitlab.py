"""GitLab REST API (v4) adapter."""

from typing import Any
from urllib.parse import quote

from getdetails.sources.base import Source, count, strip_tag_prefix, text
from getdetails.types.metadata import PackageMetadata


class GitLabSource(Source):
    """
    Combines the releases list and project details of a GitLab project.

    The project path may contain subgroups (``group/subgroup/project``) and
    is sent percent-encoded as a single path segment. The releases endpoint
    returns newest first, so the first entry is the latest release.
    """

    name = "gitlab"

    def urls(self, identifier: str) -> list[str]:
        project = quote(identifier, safe="")
        base = f"{self.settings.gitlab_url.rstrip('/')}/api/v4/projects/{project}"
        return [f"{base}/releases", f"{base}?license=true"]

    def to_metadata(
        self, releases: list[dict[str, Any]], project: dict[str, Any]
    ) -> PackageMetadata:
        release = releases[0] if releases else {}
        namespace = project.get("namespace") or {}
        owner = project.get("owner") or {}
        license_info = project.get("license") or {}
        release_author = release.get("author") or {}

        return PackageMetadata(
            version=strip_tag_prefix(release.get("tag_name")),
            name=text(project.get("name")),
            full_name=text(project.get("path_with_namespace")),
            description=text(project.get("description")),
            owner=text(owner.get("username") or namespace.get("full_path")),
            stars=count(project.get("star_count")),
            forks=count(project.get("forks_count")),
            open_issues=count(project.get("open_issues_count")),
            homepage=text(project.get("web_url")),
            repository_url=text(project.get("http_url_to_repo")),
            license=text(license_info.get("name")),
            last_update=self.format_date(project.get("last_activity_at")),
            default_branch=text(project.get("default_branch")),
            release_date=self.format_date(release.get("released_at")),
            release_author=text(release_author.get("username")),
            release_notes=text(release.get("description")),
        )
