"""get-details - live package metadata for web pages."""

from getdetails.async_client import AsyncGetDetailsClient
from getdetails.client import GetDetailsClient
from getdetails.config import Settings
from getdetails.controller import PageController
from getdetails.exceptions import (
    ConfigError,
    FetchError,
    GetDetailsError,
    NoTargetError,
    UnsupportedSourceError,
)
from getdetails.logging import configure_logging, get_logger
from getdetails.page import Document, Element
from getdetails.parser import parse_attribute
from getdetails.processor import ElementProcessor
from getdetails.renderer import render_report
from getdetails.router import SourceRouter
from getdetails.sources import Source, SourceRegistry
from getdetails.types import (
    Downloads,
    PackageMetadata,
    ProcessResult,
    RequestDescriptor,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "AsyncGetDetailsClient",
    "GetDetailsClient",
    "Settings",
    # Pipeline
    "parse_attribute",
    "SourceRouter",
    "Source",
    "SourceRegistry",
    "render_report",
    "ElementProcessor",
    "PageController",
    "Document",
    "Element",
    # Types
    "RequestDescriptor",
    "PackageMetadata",
    "Downloads",
    "ProcessResult",
    # Exceptions
    "GetDetailsError",
    "ConfigError",
    "UnsupportedSourceError",
    "FetchError",
    "NoTargetError",
    # Logging
    "configure_logging",
    "get_logger",
]
