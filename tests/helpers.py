"""Shared test helpers for building fake toolchain bundles on disk.

Each helper creates a minimal but realistic directory structure: an
``.app`` bundle with an Info.plist, platform directories under
``Contents/Developer/Platforms``, and real SQLite ``device_traits.db``
files populated with ``Devices`` rows.
"""

from __future__ import annotations

import plistlib
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Any

XCODE_ID = "com.apple.dt.Xcode"

COLUMNS = (
    "Target", "TargetType", "TargetVariant", "Platform", "ProductType",
    "ProductDescription", "CompatibleDeviceFallback", "CompatibleAppVariant",
    "DeviceTraitSet",
)

# Schema as shipped by the toolchain.
STRICT_DEVICES_DDL = """
CREATE TABLE Devices (
    Target TEXT COLLATE NOCASE PRIMARY KEY UNIQUE NOT NULL,
    TargetType TEXT NOT NULL,
    TargetVariant TEXT NOT NULL,
    Platform TEXT COLLATE NOCASE NOT NULL,
    ProductType TEXT COLLATE NOCASE NOT NULL,
    ProductDescription TEXT COLLATE NOCASE,
    CompatibleDeviceFallback TEXT COLLATE NOCASE,
    CompatibleAppVariant TEXT COLLATE NOCASE,
    DeviceTraitSet INTEGER NOT NULL,
    FOREIGN KEY(DeviceTraitSet) REFERENCES DeviceTraits(DeviceTraitSetID)
)
"""

# Same columns without NOT NULL so tests can insert NULLs.
LOOSE_DEVICES_DDL = """
CREATE TABLE Devices (
    Target TEXT PRIMARY KEY,
    TargetType TEXT,
    TargetVariant TEXT,
    Platform TEXT,
    ProductType TEXT,
    ProductDescription TEXT,
    CompatibleDeviceFallback TEXT,
    CompatibleAppVariant TEXT,
    DeviceTraitSet INTEGER
)
"""

IPHONE_14 = {
    "Target": "D27AP",
    "TargetType": "iPhone",
    "TargetVariant": "arm64e",
    "Platform": "iphoneos",
    "ProductType": "iPhone14,7",
    "ProductDescription": "iPhone 14",
    "CompatibleDeviceFallback": "iPhone14,5",
    "CompatibleAppVariant": "iPhone14,5",
    "DeviceTraitSet": 17,
}

IPHONE_14_PRO = {
    "Target": "D73AP",
    "TargetType": "iPhone",
    "TargetVariant": "arm64e",
    "Platform": "iphoneos",
    "ProductType": "iPhone15,2",
    "ProductDescription": "iPhone 14 Pro",
    "CompatibleDeviceFallback": None,
    "CompatibleAppVariant": None,
    "DeviceTraitSet": 18,
}


def write_device_db(
    db_path: Path,
    rows: list[dict[str, Any]],
    ddl: str = LOOSE_DEVICES_DDL,
) -> Path:
    """Create ``db_path`` with a ``Devices`` table holding ``rows``.

    Missing keys in a row are inserted as NULL. Rows keep their order.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with closing(sqlite3.connect(db_path)) as connection:
        connection.execute(ddl)
        placeholders = ", ".join("?" for _ in COLUMNS)
        connection.executemany(
            f"INSERT INTO Devices ({', '.join(COLUMNS)}) VALUES ({placeholders})",
            [tuple(row.get(column) for column in COLUMNS) for row in rows],
        )
        connection.commit()
    return db_path


def device_db_path(platform_dir: Path) -> Path:
    return platform_dir / "usr" / "standalone" / "device_traits.db"


def create_bundle(
    parent: Path,
    name: str = "Xcode.app",
    identifier: str | None = XCODE_ID,
    version: str | None = "15.0",
) -> Path:
    """Create an empty bundle with an Info.plist and a platforms directory."""
    bundle = parent / name
    contents = bundle / "Contents"
    (contents / "Developer" / "Platforms").mkdir(parents=True, exist_ok=True)
    if identifier is not None:
        info: dict[str, Any] = {"CFBundleIdentifier": identifier}
        if version is not None:
            info["CFBundleShortVersionString"] = version
        with (contents / "Info.plist").open("wb") as fh:
            plistlib.dump(info, fh)
    return bundle


def create_platform(
    bundle: Path,
    dir_name: str,
    rows: list[dict[str, Any]] | None = None,
) -> Path:
    """Create a platform directory; with ``rows`` it also gets a database."""
    platform_dir = bundle / "Contents" / "Developer" / "Platforms" / dir_name
    platform_dir.mkdir(parents=True, exist_ok=True)
    if rows is not None:
        write_device_db(device_db_path(platform_dir), rows)
    return platform_dir
