"""Pytest fixtures for tests."""

import threading
from pathlib import Path
from unittest.mock import Mock

import pytest

from loadring.device import DeviceWriter
from loadring.policy import build_policy
from loadring.sampler import LoadSampler


@pytest.fixture
def loadavg_file(tmp_path: Path) -> Path:
    """A /proc/loadavg look-alike holding a low load."""
    path = tmp_path / "loadavg"
    path.write_text("0.00 0.01 0.05 1/123 4567\n")
    return path


@pytest.fixture
def device_file(tmp_path: Path) -> Path:
    """Path standing in for the LED ring control file."""
    return tmp_path / "nuc_led"


@pytest.fixture
def policy_4_cores():
    """Default color table scaled for 4 cores."""
    return build_policy(4)


@pytest.fixture
def mock_sampler():
    """Sampler mock; set .sample.return_value or .side_effect per test."""
    return Mock(spec=LoadSampler)


@pytest.fixture
def mock_writer():
    """Device writer mock that records every applied state."""
    return Mock(spec=DeviceWriter)


@pytest.fixture
def stop_event():
    return threading.Event()
