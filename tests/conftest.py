"""Shared fixtures for devtraits tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from devtraits.core.records import DeviceRecord
from devtraits.core.report import BundleReport, PlatformReport

from tests.helpers import IPHONE_14, IPHONE_14_PRO, create_bundle, create_platform


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[logging.Logger]:
    """Undo any ``configure_logging`` changes to the package logger."""
    logger = logging.getLogger("devtraits")
    level, handlers = logger.level, logger.handlers[:]
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


@pytest.fixture
def xcode_bundle(tmp_path: Path) -> Path:
    """A bundle with one populated platform and one without a database."""
    bundle = create_bundle(tmp_path)
    create_platform(bundle, "iPhoneOS.platform", [IPHONE_14, IPHONE_14_PRO])
    create_platform(bundle, "MacOSX.platform")
    return bundle


@pytest.fixture
def iphone_report() -> BundleReport:
    """In-memory report equivalent to ``xcode_bundle``."""
    return (
        PlatformReport.from_records(
            "iPhoneOS",
            [DeviceRecord.from_row(IPHONE_14), DeviceRecord.from_row(IPHONE_14_PRO)],
        ),
    )


@pytest.fixture
def two_platform_report() -> BundleReport:
    """Report with a phone platform and a watch platform."""
    watch = DeviceRecord(
        target="N199AP", target_type="Watch", target_variant="arm64_32",
        platform="watchos", product_type="Watch6,14",
        product_description="Apple Watch Series 8", device_trait_set=40,
    )
    return (
        PlatformReport.from_records(
            "iPhoneOS",
            [DeviceRecord.from_row(IPHONE_14), DeviceRecord.from_row(IPHONE_14_PRO)],
        ),
        PlatformReport.from_records("WatchOS", [watch]),
    )
