"""get-details testing utilities.

Provides a mock registry, a recording document and payload factories for
testing pages and applications that use get-details.
"""

from getdetails.testing.dom import RecordingDocument
from getdetails.testing.fixtures import (
    create_github_release,
    create_github_repo,
    create_gitlab_project,
    create_gitlab_releases,
    create_npm_document,
    create_pypi_document,
)
from getdetails.testing.mock import MockCall, MockRegistry, MockResponse

__all__ = [
    "MockRegistry",
    "MockCall",
    "MockResponse",
    "RecordingDocument",
    "create_npm_document",
    "create_pypi_document",
    "create_github_release",
    "create_github_repo",
    "create_gitlab_releases",
    "create_gitlab_project",
]
