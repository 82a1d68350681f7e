"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from organizer.domain.geometry import Rect
from tests.fakes.fake_host import FakeDisplayHost, FakeWindow
from tests.fakes.fake_scheduler import FakeScheduler
from tests.fakes.fake_settings_store import FakeSettingsStore


@pytest.fixture
def dual_monitor_host() -> FakeDisplayHost:
    return FakeDisplayHost(
        monitors=[Rect(0, 0, 1920, 1080), Rect(1920, 0, 1920, 1080)]
    )


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def settings_store() -> FakeSettingsStore:
    return FakeSettingsStore()


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow(frame=Rect(50, 50, 800, 600), monitor=0)


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"
