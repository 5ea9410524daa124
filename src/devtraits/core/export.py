"""Text and structured exports of device records and bundle reports.

Two export shapes are produced from whatever report is currently shown
(possibly filtered):

- **Text**: one ``[<ProductDescription>]`` block per record, platforms in
  report order and records in key order, trimmed of surrounding
  whitespace. Suitable for pasting.
- **Structured**: a list of ``{"platform", "variants"}`` objects rendered
  as pretty-printed JSON (default) or YAML. ``parse_structured`` reads
  either back into a ``BundleReport``.

Serialization failures are logged and reported as ``None``; they never
propagate to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from devtraits.core.records import DeviceRecord
from devtraits.core.report import BundleReport, PlatformReport
from devtraits.exceptions import ExportError

logger = logging.getLogger(__name__)

STRUCTURED_FORMATS: tuple[str, ...] = ("json", "yaml")


# ---------------------------------------------------------------------------
# Text export
# ---------------------------------------------------------------------------


def export_record_text(record: DeviceRecord) -> str:
    """Render one record as a bracketed block followed by a blank line."""
    return f"[{record.product_description}]\n{record.export_edit_friendly}\n\n"


def export_text(report: BundleReport) -> str:
    """Render every record of ``report`` as one trimmed text block."""
    chunks: list[str] = []
    for platform in report:
        for _, record in platform.sorted_variants():
            chunks.append(export_record_text(record))
    return "".join(chunks).strip()


# ---------------------------------------------------------------------------
# Structured export
# ---------------------------------------------------------------------------


def report_to_data(report: BundleReport) -> list[dict[str, Any]]:
    """Convert a report to plain lists and dicts.

    Platform order is preserved; variants are emitted in key order so the
    output is reproducible.
    """
    return [
        {
            "platform": platform.platform,
            "variants": {
                key: record.to_dict() for key, record in platform.sorted_variants()
            },
        }
        for platform in report
    ]


def _dump(data: list[dict[str, Any]], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(
            data, sort_keys=False, allow_unicode=True, default_flow_style=False,
        )
    raise ExportError(f"Unsupported structured format: {fmt!r}")


def dump_structured(report: BundleReport, fmt: str = "json") -> str:
    """Serialize ``report``, raising ``ExportError`` on failure.

    Args:
        report: The report to serialize.
        fmt: One of ``STRUCTURED_FORMATS``.

    Raises:
        ExportError: Unsupported format or encoding failure.
    """
    try:
        return _dump(report_to_data(report), fmt)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise ExportError(f"Failed to serialize report as {fmt}: {exc}") from exc


def export_structured(report: BundleReport, fmt: str = "json") -> str | None:
    """Serialize ``report``; returns ``None`` (and logs) on failure."""
    try:
        return dump_structured(report, fmt)
    except ExportError:
        logger.warning("Structured export failed", exc_info=True)
        return None


def _load(text: str, fmt: str) -> Any:
    if fmt == "json":
        return json.loads(text)
    if fmt == "yaml":
        return yaml.safe_load(text)
    raise ExportError(f"Unsupported structured format: {fmt!r}")


def parse_structured(text: str, fmt: str = "json") -> BundleReport:
    """Rebuild a ``BundleReport`` from a structured export.

    Variant keys are taken from the document as written, so a report
    exported and parsed back has the same platforms, keys, and records.

    Raises:
        ExportError: The text is not valid ``fmt`` or does not have the
            report shape.
    """
    try:
        data = _load(text, fmt)
    except (ValueError, yaml.YAMLError) as exc:
        raise ExportError(f"Malformed {fmt} report: {exc}") from exc

    if data is None:
        return ()
    if not isinstance(data, list):
        raise ExportError("Structured report must be a list of platforms")

    platforms: list[PlatformReport] = []
    for entry in data:
        if not isinstance(entry, dict) or "platform" not in entry:
            raise ExportError(f"Malformed platform entry: {entry!r}")
        variants = entry.get("variants") or {}
        if not isinstance(variants, dict):
            raise ExportError(f"Malformed variants for {entry['platform']!r}")
        records: dict[str, DeviceRecord] = {}
        for key, value in variants.items():
            if not isinstance(value, dict):
                raise ExportError(f"Malformed record {key!r}: {value!r}")
            records[str(key)] = DeviceRecord.from_dict(value)
        platforms.append(PlatformReport(platform=str(entry["platform"]), variants=records))
    return tuple(platforms)
