"""``devtraits device BUNDLE DESCRIPTION`` — Show one device record.

Looks the product description up (case-insensitively) in every platform
of the bundle and prints the text export of each match.

Exit Codes:
    0 — At least one record matched.
    2 — No bundle, or no record with that description.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from devtraits.cli._bundle import EXIT_NO_RESULT, select_bundle
from devtraits.core.export import export_record_text
from devtraits.core.records import DeviceRecord
from devtraits.core.report import BundleReport
from devtraits.discovery import DEFAULT_APPLICATIONS_DIR, BundleScanner


def find_records(report: BundleReport, description: str) -> list[DeviceRecord]:
    """Records whose product description equals ``description``, ignoring case."""
    wanted = description.lower()
    return [
        record
        for platform in report
        for key, record in platform.sorted_variants()
        if key.lower() == wanted
    ]


@click.command("device")
@click.argument("bundle", type=click.Path(exists=True, path_type=Path))
@click.argument("description")
def device_command(bundle: Path, description: str) -> None:
    """Print the record of the device named DESCRIPTION."""
    bundle_root = select_bundle(bundle, DEFAULT_APPLICATIONS_DIR)
    records = find_records(BundleScanner().create_report(bundle_root), description)
    if not records:
        click.echo(f"No device named {description!r}.")
        sys.exit(EXIT_NO_RESULT)
    click.echo("".join(export_record_text(record) for record in records).strip())
