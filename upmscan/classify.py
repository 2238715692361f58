"""Dependency classifier.

Rules are checked top-down and the first match wins, so a ``com.unity``
package declared through a git URL is still reported as ``Unity``.
"""

from typing import AbstractSet

from upmscan.models import PackageType

UNITY_PREFIX = "com.unity"
GIT_PREFIXES = ("git+", "https://")
GIT_HOSTS = ("github.com", "gitlab.com", "bitbucket.org")


def is_unity_package(name: str) -> bool:
    return name.startswith(UNITY_PREFIX)


def is_git_package(value: str) -> bool:
    lowered = value.lower()
    return lowered.startswith(GIT_PREFIXES) or any(host in lowered for host in GIT_HOSTS)


def is_openupm_package(name: str, scopes: AbstractSet[str]) -> bool:
    return any(name.startswith(scope) for scope in scopes)


CLASSIFICATION_RULES = (
    (lambda name, value, scopes: is_unity_package(name), PackageType.UNITY),
    (lambda name, value, scopes: is_git_package(value), PackageType.GIT),
    (lambda name, value, scopes: is_openupm_package(name, scopes), PackageType.OPENUPM),
)


def classify_package(name: str, declared_value: str, scopes: AbstractSet[str]) -> PackageType:
    for matches, package_type in CLASSIFICATION_RULES:
        if matches(name, declared_value, scopes):
            return package_type
    return PackageType.STANDARD


def classify_dependencies(dependencies, scopes):
    """Classify a ``{name: declared_value}`` mapping, preserving its order."""
    return {
        name: classify_package(name, value, scopes)
        for name, value in dependencies.items()
    }
