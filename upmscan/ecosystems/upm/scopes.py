"""Scoped registry helpers."""

from typing import Any, Dict, Set

OPENUPM_MARKER = "openupm"


def get_openupm_scopes(manifest: Dict[str, Any]) -> Set[str]:
    """Collect the scopes of every scoped registry hosted on OpenUPM.

    A registry qualifies when its ``url`` contains ``"openupm"``
    (case-sensitive). Its ``scopes`` are added verbatim.
    """

    scopes: Set[str] = set()

    registries = manifest.get("scopedRegistries")
    if not isinstance(registries, list):
        return scopes

    for registry in registries:
        if not isinstance(registry, dict):
            continue
        url = registry.get("url")
        if not isinstance(url, str) or OPENUPM_MARKER not in url:
            continue
        registry_scopes = registry.get("scopes")
        if isinstance(registry_scopes, list):
            scopes.update(str(scope) for scope in registry_scopes)

    return scopes
