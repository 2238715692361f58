"""Utilities for reading Unity Package Manager manifests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from upmscan.utils.exceptions import ManifestNotFoundError, ManifestParseError

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = Path("Packages") / "manifest.json"


def default_manifest_path(project_root: str = ".") -> Path:
    return Path(project_root) / DEFAULT_MANIFEST


def load_manifest(manifest_path: Path) -> Dict[str, Any]:
    """Parse ``manifest_path`` into a dictionary.

    Raises
    ------
    ManifestNotFoundError
        If the file does not exist.
    ManifestParseError
        If the file cannot be read, is not valid JSON, or its top-level
        value is not an object.
    """

    if not manifest_path.is_file():
        raise ManifestNotFoundError(str(manifest_path))

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8-sig"))
    except (OSError, ValueError) as e:
        raise ManifestParseError(str(manifest_path), original_exception=e)

    if not isinstance(data, dict):
        raise ManifestParseError(
            str(manifest_path), message="Manifest root is not a JSON object"
        )
    return data


def read_manifest(
    manifest_path: Optional[str] = None, project_root: str = "."
) -> Optional[Dict[str, Any]]:
    """Read a ``manifest.json`` and return its parsed contents.

    Parameters
    ----------
    manifest_path:
        Explicit manifest location. When empty, ``Packages/manifest.json``
        under ``project_root`` is used.
    project_root:
        Unity project directory used to locate the default manifest.

    Returns
    -------
    dict or None
        The manifest object, or ``None`` when the file is missing or cannot
        be parsed. Both cases are logged.
    """

    path = Path(manifest_path) if manifest_path else default_manifest_path(project_root)
    try:
        return load_manifest(path)
    except ManifestNotFoundError as e:
        logger.error(str(e))
    except ManifestParseError as e:
        logger.error(str(e))
    return None


def get_dependencies(manifest: Dict[str, Any]) -> Dict[str, str]:
    """Return the ``dependencies`` section as a name to declared value mapping."""

    deps = manifest.get("dependencies")
    if not isinstance(deps, dict):
        return {}
    return {name: str(value) for name, value in deps.items()}
