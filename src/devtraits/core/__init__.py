"""Report-building pipeline: records, reader, filtering, and exports."""

from __future__ import annotations

from devtraits.core.export import (
    STRUCTURED_FORMATS,
    dump_structured,
    export_record_text,
    export_structured,
    export_text,
    parse_structured,
)
from devtraits.core.filtering import filter_platform, filter_report
from devtraits.core.reader import (
    DEVICE_TRAITS_SUBPATH,
    load_device_records,
    load_platform_report,
    read_device_records,
)
from devtraits.core.records import UNKNOWN, DeviceRecord
from devtraits.core.report import BundleReport, PlatformReport

__all__ = [
    "BundleReport",
    "DEVICE_TRAITS_SUBPATH",
    "DeviceRecord",
    "PlatformReport",
    "STRUCTURED_FORMATS",
    "UNKNOWN",
    "dump_structured",
    "export_record_text",
    "export_structured",
    "export_text",
    "filter_platform",
    "filter_report",
    "load_device_records",
    "load_platform_report",
    "parse_structured",
    "read_device_records",
]
