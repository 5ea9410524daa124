"""Platform database reader.

Opens one ``device_traits.db`` read-only, drains its ``Devices`` table, and
converts every row into a ``DeviceRecord``. Each call owns its connection
and closes it before returning, on success and on every failure path.

Failures never escape this module: a missing file, a database that will
not open, or any error while reading a row makes the whole platform absent
(``None``). There are no partial reports.

Schema consumed (the ``DeviceTraitSet`` foreign key is not followed)::

    Devices(
        Target TEXT PRIMARY KEY, TargetType TEXT, TargetVariant TEXT,
        Platform TEXT, ProductType TEXT, ProductDescription TEXT,
        CompatibleDeviceFallback TEXT, CompatibleAppVariant TEXT,
        DeviceTraitSet INTEGER
    )
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from devtraits.core.records import FIELDS, DeviceRecord
from devtraits.core.report import PlatformReport, variants_from_records
from devtraits.exceptions import DatabaseReadError

logger = logging.getLogger(__name__)

DEVICES_TABLE = "Devices"

# Relative location of the database inside a platform directory.
DEVICE_TRAITS_SUBPATH = Path("usr") / "standalone" / "device_traits.db"

_SELECT_DEVICES = "SELECT {columns} FROM {table}".format(
    columns=", ".join(f'"{column}"' for column in FIELDS),
    table=DEVICES_TABLE,
)


def _connect(db_path: Path) -> sqlite3.Connection:
    """Open ``db_path`` read-only; never creates a file."""
    uri = db_path.resolve().as_uri() + "?mode=ro"
    connection = sqlite3.connect(uri, uri=True)
    connection.row_factory = sqlite3.Row
    return connection


def _database_exists(db_path: Path) -> bool:
    try:
        return db_path.is_file()
    except OSError:
        return False


def load_device_records(db_path: Path) -> dict[str, DeviceRecord]:
    """Read every device row from ``db_path``.

    Args:
        db_path: Path to a ``device_traits.db`` file.

    Returns:
        Mapping of product description to record. Rows are applied in
        table order, so a later row with a duplicate description replaces
        the earlier one.

    Raises:
        DatabaseReadError: The file is missing, cannot be opened, or any
            query or row error occurs.
    """
    if not _database_exists(db_path):
        raise DatabaseReadError(f"No device database at {db_path}")
    try:
        with closing(_connect(db_path)) as connection:
            rows = connection.execute(_SELECT_DEVICES)
            return variants_from_records(DeviceRecord.from_row(row) for row in rows)
    except (sqlite3.Error, OSError, ValueError) as exc:
        raise DatabaseReadError(f"Failed to read {db_path}: {exc}") from exc


def read_device_records(db_path: Path) -> dict[str, DeviceRecord] | None:
    """Like ``load_device_records`` but returns ``None`` on any failure."""
    try:
        return load_device_records(db_path)
    except DatabaseReadError:
        logger.warning("Unreadable device database: %s", db_path, exc_info=True)
        return None


def platform_name(platform_dir: Path) -> str:
    """Platform name: directory base name without its extension."""
    return platform_dir.stem


def load_platform_report(platform_dir: Path) -> PlatformReport | None:
    """Build the report for one platform directory.

    Args:
        platform_dir: A platform directory such as
            ``.../Platforms/iPhoneOS.platform``.

    Returns:
        The platform's report, or ``None`` when it has no readable
        device database.
    """
    name = platform_name(platform_dir)
    db_path = platform_dir / DEVICE_TRAITS_SUBPATH
    if not _database_exists(db_path):
        logger.debug("%s: no device database", name)
        return None

    logger.debug("loading %s", db_path)
    variants = read_device_records(db_path)
    if variants is None:
        return None

    logger.debug("%s load complete with %d records", name, len(variants))
    return PlatformReport(platform=name, variants=variants)
