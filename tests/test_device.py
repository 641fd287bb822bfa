"""Tests for the LED ring device writer."""

from pathlib import Path

import pytest

from loadring.device import DeviceWriter, format_command
from loadring.exceptions import DeviceWriteError
from loadring.models import OFF_STATE, BlinkPattern, RingColor, VisualState


class TestFormatCommand:
    """Test the driver command grammar."""

    @pytest.mark.unit
    def test_format(self):
        state = VisualState(load_threshold=0.4, color=RingColor.BLUE, brightness=40)
        assert format_command(state) == "ring,40,none,blue"

    @pytest.mark.unit
    def test_format_blink(self):
        state = VisualState(color=RingColor.RED, brightness=100, blink=BlinkPattern.FADE_FAST)
        assert format_command(state) == "ring,100,fade_fast,red"

    @pytest.mark.unit
    def test_format_off(self):
        assert format_command(OFF_STATE) == "ring,0,none,off"


class TestDeviceWriter:
    """Test writing commands to the control file."""

    @pytest.mark.unit
    def test_apply_writes_command(self, device_file: Path):
        DeviceWriter(device_file).apply(OFF_STATE)
        assert device_file.read_text() == "ring,0,none,off"

    @pytest.mark.unit
    def test_apply_overwrites(self, device_file: Path):
        writer = DeviceWriter(device_file)
        writer.apply(VisualState(color=RingColor.GREEN, brightness=80))
        writer.apply(OFF_STATE)
        assert device_file.read_text() == "ring,0,none,off"

    @pytest.mark.unit
    def test_apply_failure(self, tmp_path: Path):
        writer = DeviceWriter(tmp_path / "no-such-dir" / "nuc_led")
        with pytest.raises(DeviceWriteError) as exc_info:
            writer.apply(OFF_STATE)
        assert exc_info.value.command == "ring,0,none,off"
        assert exc_info.value.recoverable
        assert exc_info.value.recovery_hint
