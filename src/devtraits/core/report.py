"""Report data structures: ``PlatformReport`` and ``BundleReport``.

A ``PlatformReport`` is the device catalogue of one platform inside a
toolchain bundle, keyed by product description. A ``BundleReport`` is the
ordered tuple of platform reports for one bundle.

Both are immutable. Narrowing a report (see ``devtraits.core.filtering``)
always builds new values and never touches the originals.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from devtraits.core.records import DeviceRecord


def variants_from_records(records: Iterable[DeviceRecord]) -> dict[str, DeviceRecord]:
    """Key records by product description; a later duplicate replaces an earlier one."""
    variants: dict[str, DeviceRecord] = {}
    for record in records:
        variants[record.product_description] = record
    return variants


@dataclass(frozen=True)
class PlatformReport:
    """Device catalogue of a single platform.

    Attributes:
        platform: Platform name, i.e. the platform directory's base name
            without its extension (``iPhoneOS.platform`` -> ``iPhoneOS``).
        variants: Read-only mapping of product description to record.
            Not part of the hash, so equal reports hash alike by platform.
        id: Opaque identity for display layers. Not part of equality.
    """

    platform: str
    variants: Mapping[str, DeviceRecord] = field(hash=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def __post_init__(self) -> None:
        # Own a private copy so later changes to the caller's dict are invisible.
        object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))

    @classmethod
    def from_records(cls, platform: str, records: Iterable[DeviceRecord]) -> PlatformReport:
        """Build a report, keying ``records`` by product description."""
        return cls(platform=platform, variants=variants_from_records(records))

    def sorted_keys(self) -> list[str]:
        """Variant keys in display order (lexicographic)."""
        return sorted(self.variants)

    def sorted_variants(self) -> Iterator[tuple[str, DeviceRecord]]:
        """Yield ``(key, record)`` pairs in display order."""
        for key in self.sorted_keys():
            yield key, self.variants[key]

    def __len__(self) -> int:
        return len(self.variants)


# One toolchain bundle's platforms, ordered by platform directory name.
BundleReport = tuple[PlatformReport, ...]
