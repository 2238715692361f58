"""Package catalog queries over a Unity project manifest.

Every query re-reads the manifest; nothing is cached between calls.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console

from upmscan.classify import classify_dependencies
from upmscan.ecosystems.upm import get_dependencies, get_openupm_scopes, read_manifest
from upmscan.models import PackageInfo, PackageType
from upmscan.rich_utils.ui_helpers import get_console
from upmscan.versions import version_from_cache

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path("Library") / "PackageCache"
VERSION_SOURCES = ("declared", "cache")


def default_cache_dir(project_root: str = ".") -> Path:
    return Path(project_root) / DEFAULT_CACHE_DIR


def get_all_packages(manifest_path: Optional[str] = None, project_root: str = ".") -> List[PackageInfo]:
    """Return every dependency of the manifest, classified, in manifest order."""
    try:
        manifest = read_manifest(manifest_path, project_root)
        if manifest is None:
            return []

        dependencies = get_dependencies(manifest)
        types = classify_dependencies(dependencies, get_openupm_scopes(manifest))
        return [
            PackageInfo(name=name, url=value, type=types[name])
            for name, value in dependencies.items()
        ]
    except Exception as e:
        logger.error(f"Errors during package analysis: {e}")
        return []


def get_packages(
    package_type: PackageType, manifest_path: Optional[str] = None, project_root: str = "."
) -> List[PackageInfo]:
    return [p for p in get_all_packages(manifest_path, project_root) if p.type == package_type]


def group_packages(packages: List[PackageInfo]) -> Dict[PackageType, List[PackageInfo]]:
    grouped: Dict[PackageType, List[PackageInfo]] = {}
    for package in packages:
        grouped.setdefault(package.type, []).append(package)
    return grouped


def get_packages_by_type(
    manifest_path: Optional[str] = None, project_root: str = "."
) -> Dict[PackageType, List[PackageInfo]]:
    """Group packages by category. Categories with no members are omitted."""
    return group_packages(get_all_packages(manifest_path, project_root))


def print_packages(
    manifest_path: Optional[str] = None, project_root: str = ".", console: Optional[Console] = None
) -> None:
    console = console or get_console()
    for package_type, members in get_packages_by_type(manifest_path, project_root).items():
        console.print(f"=== {package_type.value} Package ({len(members)}) ===", markup=False, soft_wrap=True)
        for package in members:
            console.print(f"  {package.name} - {package.url}", markup=False, soft_wrap=True)


def get_package_version_from_cache(
    package_name: str, project_root: str = ".", cache_dir: Optional[str] = None
) -> str:
    """Resolve the installed version of a package from the local package cache.

    Returns an empty string when the cache or the package cannot be found.
    """
    return version_from_cache(package_name, cache_dir or default_cache_dir(project_root))


def resolve_version(
    package: PackageInfo, source: str = "declared", project_root: str = ".", cache_dir: Optional[str] = None
) -> str:
    """Resolve ``package``'s version from the requested source."""
    if source == "declared":
        return package.version
    if source == "cache":
        return get_package_version_from_cache(package.name, project_root, cache_dir)
    raise ValueError(f"Unknown version source: {source!r} (expected one of {', '.join(VERSION_SOURCES)})")


__all__ = [
    "get_all_packages",
    "get_packages",
    "get_packages_by_type",
    "group_packages",
    "print_packages",
    "get_package_version_from_cache",
    "resolve_version",
]
