"""Request descriptors and processing results."""

from dataclasses import dataclass
from typing import Any

from getdetails.types.metadata import PackageMetadata


@dataclass(frozen=True)
class RequestDescriptor:
    """Parsed form of one trigger attribute or one programmatic call."""

    package_name: str
    target_selector: str | None = None
    source: str = "npm"
    format_template: str | None = None


@dataclass
class ProcessResult:
    """Outcome of running the pipeline for one element or call."""

    descriptor: RequestDescriptor
    metadata: PackageMetadata | None
    report: str
    written: list[Any]

    @property
    def found(self) -> bool:
        """True when the registry returned usable metadata."""
        return self.metadata is not None
