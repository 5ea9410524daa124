"""Discovery of toolchain bundles and the platforms inside them.

Public API::

    from devtraits.discovery import BundleScanner, find_toolchains

    for bundle in find_toolchains():
        report = BundleScanner().create_report(bundle.path)
        print(f"{bundle.name}: {len(report)} platforms")
"""

from __future__ import annotations

from devtraits.discovery.bundle_scanner import BundleScanner, create_report
from devtraits.discovery.models import ToolchainBundle
from devtraits.discovery.toolchains import (
    DEFAULT_APPLICATIONS_DIR,
    PLATFORMS_SUBPATH,
    TOOLCHAIN_BUNDLE_ID,
    find_toolchains,
    read_bundle_info,
    require_bundle,
    resolve_bundle,
)

__all__ = [
    "BundleScanner",
    "DEFAULT_APPLICATIONS_DIR",
    "PLATFORMS_SUBPATH",
    "TOOLCHAIN_BUNDLE_ID",
    "ToolchainBundle",
    "create_report",
    "find_toolchains",
    "read_bundle_info",
    "require_bundle",
    "resolve_bundle",
]
