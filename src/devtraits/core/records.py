"""Device record model.

A ``DeviceRecord`` is one row of the ``Devices`` table inside a platform's
``device_traits.db``. Records are built once, at read time, through
``DeviceRecord.from_row`` which is the only place that applies the
defaulting rules:

- A missing (``None``) or empty text value becomes ``UNKNOWN``.
- A missing, non-integer, or out-of-range ``DeviceTraitSet`` becomes ``0``.

Records are frozen and never change after construction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

UNKNOWN = "unknown"

# Column name -> attribute name, in the table's declared column order.
FIELDS: dict[str, str] = {
    "Target": "target",
    "TargetType": "target_type",
    "TargetVariant": "target_variant",
    "Platform": "platform",
    "ProductType": "product_type",
    "ProductDescription": "product_description",
    "CompatibleDeviceFallback": "compatible_device_fallback",
    "CompatibleAppVariant": "compatible_app_variant",
    "DeviceTraitSet": "device_trait_set",
}

# Order in which fields appear in the human-readable rendering.
_RENDER_ORDER: tuple[str, ...] = (
    "platform",
    "target",
    "target_type",
    "target_variant",
    "product_type",
    "product_description",
    "compatible_device_fallback",
    "compatible_app_variant",
    "device_trait_set",
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Plain ASCII decimal, optionally signed; no underscores or other digit scripts.
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _text(value: Any) -> str:
    """Normalise a nullable text column to a non-empty string."""
    if value is None:
        return UNKNOWN
    text = value if isinstance(value, str) else str(value)
    return text or UNKNOWN


def _trait_set(value: Any) -> int:
    """Normalise a nullable integer column; anything unusable is 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL.fullmatch(text):
            return 0
        try:
            value = int(text)
        except ValueError:
            return 0
    if not isinstance(value, int):
        return 0
    if value < _INT64_MIN or value > _INT64_MAX:
        return 0
    return value


@dataclass(frozen=True)
class DeviceRecord:
    """Traits of a single device target as recorded by the toolchain.

    Attributes:
        target: Board identifier (e.g., "d73ap"). Primary key of the table.
        target_type: Target class (e.g., "iPhone").
        target_variant: Variant tag (e.g., "arm64e").
        platform: Platform the record was declared for (e.g., "iphoneos").
        product_type: Marketing-independent product id (e.g., "iPhone15,2").
        product_description: Human-readable name (e.g., "iPhone 14 Pro").
            Used as the catalogue key of a ``PlatformReport``.
        compatible_device_fallback: Fallback device class.
        compatible_app_variant: App thinning variant.
        device_trait_set: Foreign key into the traits table (not followed).
    """

    target: str = UNKNOWN
    target_type: str = UNKNOWN
    target_variant: str = UNKNOWN
    platform: str = UNKNOWN
    product_type: str = UNKNOWN
    product_description: str = UNKNOWN
    compatible_device_fallback: str = UNKNOWN
    compatible_app_variant: str = UNKNOWN
    device_trait_set: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> DeviceRecord:
        """Build a record from a raw row keyed by column name.

        Absent keys are treated exactly like ``NULL`` columns.
        """
        values: dict[str, Any] = {}
        for column, attr in FIELDS.items():
            raw = row[column] if column in row.keys() else None
            if attr == "device_trait_set":
                values[attr] = _trait_set(raw)
            else:
                values[attr] = _text(raw)
        return cls(**values)

    @property
    def human_readable_report(self) -> str:
        """Multi-line labelled rendering used for display and searching."""
        return (
            f"Platform: {self.platform}\n"
            f"Target: {self.target} TargetType: {self.target_type} "
            f"TargetVariant: {self.target_variant}\n"
            f"ProductType: {self.product_type} "
            f"ProductDescription: {self.product_description}\n"
            f"CompatibleDeviceFallback: {self.compatible_device_fallback} "
            f"CompatibleAppVariant: {self.compatible_app_variant}\n"
            f"DeviceTraitSet: {self.device_trait_set}"
        )

    @property
    def search_text(self) -> str:
        """Field values of ``human_readable_report``, in order, without labels.

        Free-text search matches against this text.
        """
        return "\n".join(str(getattr(self, attr)) for attr in _RENDER_ORDER)

    @property
    def export_edit_friendly(self) -> str:
        """Rendering used by text exports.

        Kept separate from ``human_readable_report`` so exports can change
        shape without affecting search behaviour.
        """
        return self.human_readable_report

    def to_dict(self) -> dict[str, Any]:
        """Structured form keyed by the database column names."""
        return {column: getattr(self, attr) for column, attr in FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeviceRecord:
        """Inverse of ``to_dict``; missing keys follow the defaulting rules."""
        return cls.from_row(data)
