"""Shared fixtures for the sector overlay tests."""

from pathlib import Path

import pytest

from sector_core.config import ConfigLoader
from sector_core.connection import InMemoryRemoteStore, LoggingNotifier, RecordingMapSurface


CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"

RECTANGLE = [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]


@pytest.fixture
def config_loader():
    """ConfigLoader reading the repository configuration."""
    return ConfigLoader(str(CONFIG_DIR))


@pytest.fixture
def roster():
    """Personnel roster as stored under ``personnel``."""
    return {
        "p1": {"name": "Asha Rao", "deviceId": "d1", "latitude": 1, "longitude": 2},
        "p2": {"name": "Vikram Singh", "deviceId": "d2", "latitude": 3, "longitude": 4},
    }


@pytest.fixture
def store(roster):
    """In-memory store seeded with the roster."""
    return InMemoryRemoteStore({"personnel": roster})


@pytest.fixture
def surface():
    return RecordingMapSurface()


@pytest.fixture
def notifier():
    return LoggingNotifier()
