"""Platform discovery inside a toolchain bundle.

Given a bundle root, lists ``Contents/Developer/Platforms`` one level deep
and asks the database reader for a report per platform directory. Most
platform directories carry no device database; those are skipped quietly.

Discovery Algorithm:
    1. List the platforms directory. A listing failure counts as empty.
    2. Sort entry names ascending so output order never depends on the
       filesystem.
    3. Build a ``PlatformReport`` per entry; keep the ones that load.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devtraits.core.reader import load_platform_report
from devtraits.core.report import BundleReport, PlatformReport
from devtraits.discovery.toolchains import PLATFORMS_SUBPATH

logger = logging.getLogger(__name__)


class BundleScanner:
    """Builds a ``BundleReport`` for one toolchain bundle.

    Usage::

        scanner = BundleScanner()
        report = scanner.create_report(Path("/Applications/Xcode.app"))
        for platform in report:
            print(f"{platform.platform}: {len(platform)} devices")
    """

    def platform_names(self, bundle_root: Path) -> list[str]:
        """Sorted entry names of the bundle's platforms directory."""
        platforms_dir = bundle_root / PLATFORMS_SUBPATH
        try:
            return sorted(entry.name for entry in platforms_dir.iterdir())
        except (PermissionError, OSError):
            logger.debug("No platforms directory in %s", bundle_root)
            return []

    def create_report(self, bundle_root: Path) -> BundleReport:
        """Discover every platform with a readable device database.

        Args:
            bundle_root: Root of the toolchain bundle (the ``.app``).

        Returns:
            Platform reports ordered by directory name. May be empty;
            never raises.
        """
        platforms_dir = bundle_root / PLATFORMS_SUBPATH
        reports: list[PlatformReport] = []
        for name in self.platform_names(bundle_root):
            report = load_platform_report(platforms_dir / name)
            if report is not None:
                reports.append(report)
        logger.debug(
            "%s: %d platform(s) with device databases", bundle_root, len(reports),
        )
        return tuple(reports)


def create_report(bundle_root: Path) -> BundleReport:
    """Convenience wrapper around ``BundleScanner().create_report``."""
    return BundleScanner().create_report(bundle_root)
