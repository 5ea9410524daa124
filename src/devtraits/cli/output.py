"""Rich output formatting helpers for the devtraits CLI.

Provides the table views for bundle reports and toolchain listings. Flat
text and structured exports are produced by ``devtraits.core.export`` and
echoed verbatim.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from devtraits.core.records import UNKNOWN
from devtraits.core.report import BundleReport, PlatformReport
from devtraits.discovery.models import ToolchainBundle

console = Console()

NO_REPORT_MESSAGE = "No report available."


def _cell(value: str) -> Text:
    """Dim the sentinel so real values stand out."""
    if value == UNKNOWN:
        return Text(value, style="dim")
    return Text(value)


def platform_table(report: PlatformReport) -> Table:
    """Build a table of one platform's devices in key order."""
    table = Table(
        title=f"{report.platform} ({len(report)} devices)",
        show_header=True, header_style="bold",
    )
    table.add_column("Product Description", style="bold")
    table.add_column("Product Type")
    table.add_column("Target")
    table.add_column("Type / Variant", style="dim")
    table.add_column("Fallback")
    table.add_column("App Variant")
    table.add_column("Trait Set", justify="right")
    for key, record in report.sorted_variants():
        table.add_row(
            key,
            _cell(record.product_type),
            _cell(record.target),
            f"{record.target_type} / {record.target_variant}",
            _cell(record.compatible_device_fallback),
            _cell(record.compatible_app_variant),
            str(record.device_trait_set),
        )
    return table


def print_report(report: BundleReport) -> None:
    """Print every platform table followed by a one-line summary.

    Args:
        report: The (possibly filtered) report to display.
    """
    if not report:
        console.print(f"[dim]{NO_REPORT_MESSAGE}[/dim]")
        return
    for platform in report:
        console.print(platform_table(platform))
    devices = sum(len(platform) for platform in report)
    console.print(f"[bold]{len(report)}[/bold] platform(s) | {devices} device(s)")


def print_toolchains(bundles: list[ToolchainBundle]) -> None:
    """Print a table of discovered toolchain bundles."""
    if not bundles:
        console.print("[dim]No toolchain bundles found.[/dim]")
        return
    table = Table(title="Toolchain Bundles", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Path", style="dim")
    for bundle in bundles:
        table.add_row(bundle.name, bundle.version or "-", str(bundle.path))
    console.print(table)
