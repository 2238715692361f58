"""
Exception classes for manifest loading.

These are raised inside the loader and converted into empty results at its
public boundary, so callers of the catalog functions never see them.

Each exception includes:
- Clear error message
- Path of the offending file
- Original exception preserved for debugging
"""

from typing import Optional


class UPMScanError(Exception):
    """
    Base exception for all UPMScan errors.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize UPMScanError.

        Args:
            message: Human-readable error message
            path: File or directory the error relates to
            original_exception: The original exception that was caught
        """
        self.message = message
        self.path = path
        self.original_exception = original_exception

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ManifestNotFoundError(UPMScanError):
    """Raised when the manifest file does not exist."""

    def __init__(self, path: str):
        super().__init__(message="The manifest.json file was not found", path=path)


class ManifestParseError(UPMScanError):
    """
    Raised when the manifest cannot be read or is not a JSON object.

    This typically indicates:
    - Invalid JSON syntax
    - A top-level value that is not an object
    - An I/O failure while reading the file
    """

    def __init__(
        self,
        path: str,
        original_exception: Optional[Exception] = None,
        message: str = "Failed to parse manifest",
    ):
        super().__init__(
            message=message,
            path=path,
            original_exception=original_exception,
        )


__all__ = [
    "UPMScanError",
    "ManifestNotFoundError",
    "ManifestParseError",
]
