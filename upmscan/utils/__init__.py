"""
Utility modules for UPMScan.

This package contains shared utility classes used throughout the UPMScan
codebase, such as the exception hierarchy for manifest loading.
"""

from upmscan.utils.exceptions import (
    ManifestNotFoundError,
    ManifestParseError,
    UPMScanError,
)

__all__ = [
    "UPMScanError",
    "ManifestNotFoundError",
    "ManifestParseError",
]
