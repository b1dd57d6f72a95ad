"""
Pytest fixtures and registry payload factories for get-details testing.

The payload factories return documents shaped like the public registry
APIs, trimmed to the fields the adapters read.
"""

from collections.abc import Generator
from typing import Any

import pytest

from getdetails.config import Settings
from getdetails.testing.mock import MockRegistry

# ============================================================================
# Payload Factories
# ============================================================================


def create_npm_document(
    name: str = "left-pad", version: str = "1.3.0", **kwargs: Any
) -> dict[str, Any]:
    """Document returned by ``GET /<name>/latest`` on the npm registry."""
    document: dict[str, Any] = {
        "name": name,
        "version": version,
        "description": "String left pad",
        "author": {"name": "azer", "email": "azer@roadbeats.com"},
        "license": "WTFPL",
        "homepage": f"https://github.com/stevemao/{name}#readme",
        "repository": {"type": "git", "url": f"git+https://github.com/stevemao/{name}.git"},
        "keywords": ["leftpad", "left", "pad"],
        "maintainers": [{"name": "azer"}, {"name": "stevemao"}],
        "dependencies": {},
    }
    document.update(kwargs)
    return document


def create_pypi_document(
    name: str = "flask", version: str = "2.3.0", **info: Any
) -> dict[str, Any]:
    """Document returned by ``GET /pypi/<name>/json``; kwargs override ``info``."""
    info_doc: dict[str, Any] = {
        "name": name,
        "version": version,
        "summary": "A simple framework for building complex web applications.",
        "author": "",
        "author_email": "Armin Ronacher <armin.ronacher@active-4.com>",
        "license": "BSD-3-Clause",
        "home_page": "",
        "project_url": f"https://pypi.org/project/{name}/",
        "project_urls": {"Source": f"https://github.com/pallets/{name}/"},
        "keywords": "",
        "maintainer": "",
        "requires_python": ">=3.8",
        "downloads": {"last_day": -1, "last_month": -1, "last_week": -1},
    }
    info_doc.update(info)
    return {
        "info": info_doc,
        "urls": [
            {
                "filename": f"{name}-{version}-py3-none-any.whl",
                "downloads": -1,
                "upload_time": "2023-04-25T19:21:22",
            }
        ],
    }


def create_github_release(tag_name: str = "v2.0.0", **kwargs: Any) -> dict[str, Any]:
    """Document returned by ``GET /repos/<path>/releases/latest``."""
    release: dict[str, Any] = {
        "tag_name": tag_name,
        "published_at": "2024-01-15T10:30:00Z",
        "author": {"login": "octocat"},
        "body": "Bug fixes",
    }
    release.update(kwargs)
    return release


def create_github_repo(full_name: str = "octocat/hello-world", **kwargs: Any) -> dict[str, Any]:
    """Document returned by ``GET /repos/<path>``."""
    owner, _, name = full_name.partition("/")
    repo: dict[str, Any] = {
        "name": name,
        "full_name": full_name,
        "description": "My first repository",
        "owner": {"login": owner},
        "stargazers_count": 80,
        "watchers_count": 80,
        "forks_count": 9,
        "open_issues_count": 0,
        "homepage": "https://github.com",
        "html_url": f"https://github.com/{full_name}",
        "license": {"key": "mit", "name": "MIT License"},
        "updated_at": "2024-02-01T08:00:00Z",
        "language": "Python",
        "default_branch": "main",
    }
    repo.update(kwargs)
    return repo


def create_gitlab_releases(*tags: str) -> list[dict[str, Any]]:
    """Document returned by ``GET /projects/<id>/releases``, newest first."""
    return [
        {
            "tag_name": tag,
            "released_at": "2024-03-10T12:00:00.000Z",
            "author": {"username": "maintainer"},
            "description": f"Release {tag}",
        }
        for tag in (tags or ("v3.1.0",))
    ]


def create_gitlab_project(
    path_with_namespace: str = "group/subgroup/project", **kwargs: Any
) -> dict[str, Any]:
    """Document returned by ``GET /projects/<id>?license=true``."""
    namespace, _, name = path_with_namespace.rpartition("/")
    project: dict[str, Any] = {
        "name": name,
        "path_with_namespace": path_with_namespace,
        "description": "A GitLab project",
        "namespace": {"full_path": namespace},
        "star_count": 12,
        "forks_count": 3,
        "open_issues_count": 4,
        "web_url": f"https://gitlab.com/{path_with_namespace}",
        "http_url_to_repo": f"https://gitlab.com/{path_with_namespace}.git",
        "license": {"key": "apache-2.0", "name": "Apache License 2.0"},
        "last_activity_at": "2024-03-11T09:15:00.000Z",
        "default_branch": "main",
    }
    project.update(kwargs)
    return project


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with a locale-independent date format."""
    return Settings(date_format="%Y-%m-%d")


@pytest.fixture
def mock_registry(settings: Settings) -> Generator[MockRegistry, None, None]:
    """
    Provide an empty MockRegistry.

    Example:
        ```python
        def test_version(mock_registry):
            mock_registry.configure_npm("left-pad", create_npm_document())
        ```
    """
    registry = MockRegistry(settings)
    yield registry
    registry.reset()


@pytest.fixture
def populated_registry(mock_registry: MockRegistry) -> MockRegistry:
    """MockRegistry answering for left-pad, flask, octocat/hello-world and a GitLab project."""
    mock_registry.configure_npm("left-pad", create_npm_document())
    mock_registry.configure_pypi("flask", create_pypi_document())
    mock_registry.configure_github(
        "octocat/hello-world", create_github_release(), create_github_repo()
    )
    mock_registry.configure_gitlab(
        "group/subgroup/project", create_gitlab_releases(), create_gitlab_project()
    )
    return mock_registry
