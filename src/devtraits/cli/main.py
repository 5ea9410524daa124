"""devtraits CLI — Inspect device-trait databases inside developer toolchains.

Entry point for the ``devtraits`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    toolchains — List toolchain bundles in the applications directory.
    report     — Build, filter, and export a bundle's device report.
    device     — Show a single device record.

Usage::

    devtraits toolchains
    devtraits report                                  # First toolchain found
    devtraits report /Applications/Xcode.app -q pro
    devtraits report Xcode.app --format json -o devices.json
    devtraits device Xcode.app "iPhone 14 Pro"
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from devtraits import __version__
from devtraits.cli.device_cmd import device_command
from devtraits.cli.report_cmd import report_command
from devtraits.cli.toolchains_cmd import toolchains_command


def configure_logging(verbose: bool) -> None:
    """Route package logs to stderr; DEBUG when verbose, WARNING otherwise."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    package_logger = logging.getLogger("devtraits")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log discovery and database progress to stderr.",
)
def cli(verbose: bool) -> None:
    """devtraits: Browse the device catalogues shipped inside toolchains.

    Finds each platform's device_traits.db inside a toolchain bundle,
    lists its device records, filters them with free-text search, and
    exports them as text, JSON, or YAML.
    """
    configure_logging(verbose)


# Register all subcommands
cli.add_command(toolchains_command)
cli.add_command(report_command)
cli.add_command(device_command)
