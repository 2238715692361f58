"""UPMScan - classify and version the dependencies of a Unity project manifest."""

from upmscan.catalog import (
    get_all_packages,
    get_package_version_from_cache,
    get_packages,
    get_packages_by_type,
    print_packages,
)
from upmscan.models import PackageInfo, PackageType

__all__ = [
    "PackageInfo",
    "PackageType",
    "get_all_packages",
    "get_packages",
    "get_packages_by_type",
    "print_packages",
    "get_package_version_from_cache",
]
