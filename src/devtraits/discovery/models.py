"""Data models for the discovery module.

Contains the record type produced when locating toolchain bundles on the
system.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ToolchainBundle:
    """A developer toolchain bundle found on disk.

    Attributes:
        path: Absolute path to the bundle root (the ``.app`` directory).
        identifier: ``CFBundleIdentifier`` from the bundle's Info.plist.
        name: Display name (``CFBundleName``, or the directory stem).
        version: ``CFBundleShortVersionString`` when present.
    """

    path: Path
    identifier: str
    name: str
    version: str | None = None
