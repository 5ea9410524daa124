"""Free-text narrowing of bundle reports.

Matching is case-insensitive substring search, evaluated per platform:

1. If the platform name contains the query, the platform is kept whole.
2. Otherwise only records whose rendered field values
   (``DeviceRecord.search_text``) contain the query are kept, in a new
   ``PlatformReport``. A platform with no matching record is dropped.

An empty query is a no-op. Filtering is idempotent: a kept platform either
still matches by name or consists solely of records that match.
"""

from __future__ import annotations

from devtraits.core.report import BundleReport, PlatformReport


def _matches(haystack: str, needle: str) -> bool:
    return needle in haystack.lower()


def filter_platform(report: PlatformReport, query: str) -> PlatformReport | None:
    """Narrow a single platform report.

    Args:
        report: The platform report to narrow.
        query: Non-empty search text.

    Returns:
        ``report`` itself when its name matches, a new report holding only
        the matching records, or ``None`` when nothing matches.
    """
    needle = query.lower()
    if _matches(report.platform, needle):
        return report

    matching = [
        record for _, record in report.sorted_variants()
        if _matches(record.search_text, needle)
    ]
    if not matching:
        return None
    return PlatformReport.from_records(report.platform, matching)


def filter_report(report: BundleReport, query: str) -> BundleReport:
    """Narrow a bundle report to the platforms and records matching ``query``.

    Args:
        report: The report to narrow.
        query: Search text. Empty text returns ``report`` unchanged.

    Returns:
        A new tuple of surviving platforms in their original order. An
        empty tuple means nothing matched.
    """
    if not query:
        return report
    narrowed: list[PlatformReport] = []
    for platform in report:
        kept = filter_platform(platform, query)
        if kept is not None:
            narrowed.append(kept)
    return tuple(narrowed)
