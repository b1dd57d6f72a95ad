"""get-details type definitions.

This module exports all data model types used by the package.
"""

from getdetails.types.metadata import Downloads, PackageMetadata
from getdetails.types.request import ProcessResult, RequestDescriptor

__all__ = [
    "Downloads",
    "PackageMetadata",
    "RequestDescriptor",
    "ProcessResult",
]
