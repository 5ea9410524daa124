"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import IPHONE_14, IPHONE_14_PRO, create_bundle, create_platform


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def applications_dir(tmp_path: Path) -> Path:
    """An applications directory holding one toolchain and one other app."""
    apps = tmp_path / "Applications"
    apps.mkdir()
    bundle = create_bundle(apps, "Xcode.app", version="15.0")
    create_platform(bundle, "iPhoneOS.platform", [IPHONE_14, IPHONE_14_PRO])
    create_platform(bundle, "MacOSX.platform")
    create_bundle(apps, "Notes.app", identifier="com.apple.Notes")
    return apps
