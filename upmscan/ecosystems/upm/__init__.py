"""Unity Package Manager ecosystem helpers."""

from .reader import default_manifest_path, get_dependencies, read_manifest
from .scopes import get_openupm_scopes

__all__ = ["read_manifest", "get_dependencies", "default_manifest_path", "get_openupm_scopes"]
