"""Version resolution for manifest dependencies.

Two independent sources are supported:

* the declared manifest value (``version_from_declared``), which reads a
  pinned ``#ref`` fragment, a ``@tag`` suffix or a plain version number;
* the local package cache (``version_from_cache``), whose folders are named
  ``<package>@<version>`` and may carry a ``package.json``.

Neither function raises; failures are logged and yield an empty string.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "unknown"


def version_from_declared(value: str) -> str:
    """Extract a version from a declared manifest value."""
    if "#" in value:
        return value.rsplit("#", 1)[-1]

    lowered = value.lower()
    if "http" not in lowered and "git" not in lowered:
        return value

    if "@" in value:
        return value.rsplit("@", 1)[-1]

    return UNKNOWN_VERSION


def _find_cached_folder(package_name: str, cache_dir: Path) -> Optional[Path]:
    prefix = f"{package_name}@"
    matches = sorted(
        entry for entry in cache_dir.iterdir()
        if entry.is_dir() and entry.name.startswith(prefix)
    )
    return matches[0] if matches else None


def version_from_cache(package_name: str, cache_dir: Union[str, Path]) -> str:
    """Look up the installed version of ``package_name`` in the package cache.

    The folder name supplies the candidate version; a ``version`` field in the
    folder's ``package.json`` takes precedence when present.
    """
    cache_dir = Path(cache_dir)
    try:
        if not cache_dir.is_dir():
            logger.warning(f"Package cache directory not found: {cache_dir}")
            return ""

        folder = _find_cached_folder(package_name, cache_dir)
        if folder is None:
            logger.warning(f"Package {package_name} not found in cache {cache_dir}")
            return ""

        version = folder.name.split("@")[1]

        package_json = folder / "package.json"
        if not package_json.is_file():
            return version

        data = json.loads(package_json.read_text(encoding="utf-8-sig"))
        if isinstance(data, dict) and data.get("version") is not None:
            version = str(data["version"])
        return version
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to read cached version of {package_name}: {e}")
        return ""
