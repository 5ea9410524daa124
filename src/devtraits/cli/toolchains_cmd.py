"""``devtraits toolchains`` — List installed toolchain bundles.

Lists the applications directory one level deep and shows every bundle
whose Info.plist declares the toolchain identifier.

Exit Codes:
    0 — At least one toolchain bundle was found.
    2 — No toolchain bundles found.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from devtraits.cli._bundle import EXIT_NO_RESULT, applications_dir_option
from devtraits.discovery import TOOLCHAIN_BUNDLE_ID, find_toolchains


@click.command("toolchains")
@applications_dir_option
@click.option(
    "--bundle-id",
    default=TOOLCHAIN_BUNDLE_ID,
    show_default=True,
    help="Bundle identifier that marks a toolchain.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format: table (default) or json.",
)
def toolchains_command(applications_dir: Path, bundle_id: str, output_format: str) -> None:
    """List toolchain bundles installed in the applications directory."""
    bundles = find_toolchains(applications_dir, bundle_id=bundle_id)

    if output_format == "json":
        click.echo(json.dumps([
            {
                "name": b.name,
                "identifier": b.identifier,
                "version": b.version,
                "path": str(b.path),
            }
            for b in bundles
        ], indent=2))
    else:
        from devtraits.cli.output import print_toolchains
        print_toolchains(bundles)

    sys.exit(0 if bundles else EXIT_NO_RESULT)
