"""Shared bundle selection for commands that take a BUNDLE argument."""

from __future__ import annotations

from pathlib import Path

import click

from devtraits.discovery import DEFAULT_APPLICATIONS_DIR, find_toolchains, require_bundle
from devtraits.exceptions import BundleError

EXIT_NO_RESULT = 2

applications_dir_option = click.option(
    "--applications-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_APPLICATIONS_DIR,
    show_default=True,
    help="Directory searched for toolchain bundles.",
)


def select_bundle(bundle: Path | None, applications_dir: Path) -> Path:
    """Resolve BUNDLE, or fall back to the first toolchain installed.

    Exits with code 2 when nothing usable is found.
    """
    if bundle is not None:
        try:
            return require_bundle(bundle)
        except BundleError as exc:
            click.echo(str(exc), err=True)
            raise SystemExit(EXIT_NO_RESULT) from exc

    toolchains = find_toolchains(applications_dir)
    if not toolchains:
        click.echo(f"No toolchain bundles found in {applications_dir}.", err=True)
        raise SystemExit(EXIT_NO_RESULT)
    return toolchains[0].path
