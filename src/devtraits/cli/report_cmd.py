"""``devtraits report [BUNDLE]`` — Build, filter, and export a device report.

Discovers every platform database inside the bundle, narrows the result
with ``--query``, and renders it as a table, flat text, JSON, or YAML.
BUNDLE may be the bundle itself or any path inside it; when omitted, the
first toolchain in the applications directory is used.

Exit Codes:
    0 — A non-empty report was produced.
    1 — Structured serialization failed.
    2 — No bundle, or the (filtered) report is empty.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from devtraits.cli._bundle import EXIT_NO_RESULT, applications_dir_option, select_bundle
from devtraits.core.export import STRUCTURED_FORMATS, export_structured, export_text
from devtraits.core.filtering import filter_report
from devtraits.core.report import BundleReport
from devtraits.discovery import BundleScanner


def _render(report: BundleReport, output_format: str) -> str | None:
    """Render ``report`` as text; ``None`` means serialization failed."""
    if output_format in STRUCTURED_FORMATS:
        return export_structured(report, output_format)
    if not report:
        from devtraits.cli.output import NO_REPORT_MESSAGE
        return NO_REPORT_MESSAGE
    return export_text(report)


@click.command("report")
@click.argument(
    "bundle",
    type=click.Path(exists=True, path_type=Path),
    required=False,
    default=None,
)
@applications_dir_option
@click.option(
    "--query", "-q",
    default="",
    help="Case-insensitive text to search platforms and devices for.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "text", *STRUCTURED_FORMATS]),
    default="table",
    help="Output format: table (default), text, json, or yaml.",
)
@click.option(
    "--output", "-o", "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the export to a file instead of stdout (tables are written as text).",
)
def report_command(
    bundle: Path | None,
    applications_dir: Path,
    query: str,
    output_format: str,
    output_path: Path | None,
) -> None:
    """Show the device catalogue of a toolchain bundle.

    Platforms whose name contains the query are shown whole; other
    platforms keep only the devices whose details contain it.
    """
    bundle_root = select_bundle(bundle, applications_dir)
    report = filter_report(BundleScanner().create_report(bundle_root), query)

    if output_format == "table" and output_path is None:
        from devtraits.cli.output import print_report
        print_report(report)
        sys.exit(0 if report else EXIT_NO_RESULT)

    rendered = _render(report, "text" if output_format == "table" else output_format)
    if rendered is None:
        click.echo(f"Failed to export report as {output_format}.", err=True)
        sys.exit(1)

    if output_path is not None:
        output_path.write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Report written to: {output_path.resolve()}")
    else:
        click.echo(rendered)
    sys.exit(0 if report else EXIT_NO_RESULT)
