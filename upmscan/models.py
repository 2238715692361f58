from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Dict

from upmscan.versions import UNKNOWN_VERSION, version_from_declared


class PackageType(str, Enum):
    """Origin category of a manifest dependency, in classification priority order."""
    UNITY = "Unity"
    GIT = "Git"
    OPENUPM = "OpenUpm"
    STANDARD = "Standard"


@dataclass
class PackageInfo:
    """A dependency declared in the manifest.

    ``url`` holds the raw manifest value, which may be a version number,
    a git URL or a registry range.
    """
    name: str
    url: str
    type: PackageType

    @cached_property
    def version(self) -> str:
        return version_from_declared(self.url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "url": self.url,
            "type": self.type.value,
            "version": self.version,
        }

    def describe(self, version: str) -> str:
        """Render as ``name@version``, or with the raw URL when the version is unknown."""
        if not version or version == UNKNOWN_VERSION:
            return f"{self.name} (URL: {self.url})"
        return f"{self.name}@{version}"

    def __str__(self) -> str:
        return self.describe(self.version)
