"""Locating toolchain bundles and their fixed internal layout.

A toolchain bundle is an application package laid out as::

    Xcode.app/
        Contents/
            Info.plist                  # CFBundleIdentifier = com.apple.dt.Xcode
            Developer/
                Platforms/
                    iPhoneOS.platform/
                        usr/standalone/device_traits.db
                    WatchOS.platform/
                    ...

Bundles are found by listing the applications directory one level deep and
keeping those whose Info.plist declares ``TOOLCHAIN_BUNDLE_ID``.
"""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from xml.parsers.expat import ExpatError

from devtraits.discovery.models import ToolchainBundle
from devtraits.exceptions import BundleError

logger = logging.getLogger(__name__)

TOOLCHAIN_BUNDLE_ID = "com.apple.dt.Xcode"
DEFAULT_APPLICATIONS_DIR = Path("/Applications")
BUNDLE_SUFFIX = ".app"

# Relative to the bundle root.
INFO_PLIST_SUBPATH = Path("Contents") / "Info.plist"
PLATFORMS_SUBPATH = Path("Contents") / "Developer" / "Platforms"


def read_bundle_info(bundle_path: Path) -> ToolchainBundle | None:
    """Read the identity of the bundle at ``bundle_path``.

    Returns:
        The bundle's identity, or ``None`` when it has no readable
        Info.plist or the plist lacks an identifier.
    """
    plist_path = bundle_path / INFO_PLIST_SUBPATH
    try:
        with plist_path.open("rb") as fh:
            info = plistlib.load(fh)
    except (OSError, ValueError, ExpatError):
        logger.debug("No readable Info.plist in %s", bundle_path)
        return None

    if not isinstance(info, dict):
        return None
    identifier = info.get("CFBundleIdentifier")
    if not isinstance(identifier, str) or not identifier:
        return None
    name = info.get("CFBundleName")
    version = info.get("CFBundleShortVersionString")
    return ToolchainBundle(
        path=bundle_path,
        identifier=identifier,
        name=name if isinstance(name, str) and name else bundle_path.stem,
        version=version if isinstance(version, str) else None,
    )


def find_toolchains(
    applications_dir: Path = DEFAULT_APPLICATIONS_DIR,
    bundle_id: str = TOOLCHAIN_BUNDLE_ID,
) -> list[ToolchainBundle]:
    """Find toolchain bundles directly inside ``applications_dir``.

    Args:
        applications_dir: Directory to list (not recursed).
        bundle_id: Identifier a bundle must declare to be kept.

    Returns:
        Matching bundles sorted by directory name. Empty when the
        directory is missing or unreadable.
    """
    try:
        entries = sorted(applications_dir.iterdir())
    except (PermissionError, OSError):
        logger.debug("Cannot list %s", applications_dir)
        return []

    found: list[ToolchainBundle] = []
    for entry in entries:
        try:
            if not entry.is_dir():
                continue
        except (PermissionError, OSError):
            continue
        bundle = read_bundle_info(entry)
        if bundle is not None and bundle.identifier == bundle_id:
            found.append(bundle)
    return found


def _has_platforms(path: Path) -> bool:
    try:
        return (path / PLATFORMS_SUBPATH).is_dir()
    except OSError:
        return False


def resolve_bundle(path: Path) -> Path | None:
    """Resolve an arbitrary path to the toolchain bundle that contains it.

    Handles paths dropped by a user, which may point at the bundle itself
    or anywhere inside it. Relative paths are resolved against the current
    directory first. The nearest ``.app`` ancestor (including
    ``path``) wins; a directory that directly holds
    ``Contents/Developer/Platforms`` is also accepted.

    Returns:
        The bundle root, or ``None`` when no candidate is found.
    """
    path = path.expanduser().resolve()
    for candidate in (path, *path.parents):
        if candidate.suffix == BUNDLE_SUFFIX:
            return candidate
    if _has_platforms(path):
        return path
    return None


def require_bundle(path: Path) -> Path:
    """Like ``resolve_bundle`` but raises when no bundle is found.

    Raises:
        BundleError: ``path`` is not inside a toolchain bundle.
    """
    bundle = resolve_bundle(path)
    if bundle is None:
        raise BundleError(f"Not a toolchain bundle: {path}")
    return bundle
