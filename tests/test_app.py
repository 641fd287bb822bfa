"""Integration tests for the assembled daemon."""

import os
import signal
import threading
from pathlib import Path

import pytest

from loadring.app import LoadRingApp
from loadring.models import AppConfig


@pytest.fixture
def config(loadavg_file: Path, device_file: Path) -> AppConfig:
    return AppConfig(
        load_avg_path=loadavg_file,
        device_path=device_file,
        poll_interval=0.05,
        cores=4,
    )


class TestLoadRingApp:
    """Test the daemon end to end against temporary files."""

    @pytest.mark.unit
    def test_policy_scaled_for_configured_cores(self, config):
        app = LoadRingApp(config)
        assert app.cores == 4
        assert app.policy.rules[1].load_threshold == pytest.approx(0.08)
        assert app.monitor.interval == 0.05

    @pytest.mark.integration
    def test_writes_state_then_off_on_stop(self, config, device_file: Path):
        app = LoadRingApp(config)
        seen = []

        def watch():
            # Capture the running state before stopping the daemon
            for _ in range(100):
                if device_file.exists() and device_file.read_text():
                    seen.append(device_file.read_text())
                    break
                threading.Event().wait(0.02)
            app.stop()

        watcher = threading.Thread(target=watch, daemon=True)
        watcher.start()
        app.run()
        watcher.join(timeout=5)

        assert seen == ["ring,10,none,blue"]
        assert device_file.read_text() == "ring,0,none,off"
        assert app.monitor.state.writes == 1

    @pytest.mark.integration
    def test_sigterm_switches_ring_off(self, config, device_file: Path):
        app = LoadRingApp(config)
        before = signal.getsignal(signal.SIGTERM)

        timer = threading.Timer(0.2, os.kill, args=(os.getpid(), signal.SIGTERM))
        timer.start()
        try:
            app.run()
        finally:
            timer.cancel()

        assert app.shutdown_handler.received_signal == signal.SIGTERM
        assert device_file.read_text() == "ring,0,none,off"
        assert signal.getsignal(signal.SIGTERM) == before

    @pytest.mark.integration
    def test_unreadable_load_source_does_not_stop_daemon(self, config, tmp_path: Path, device_file: Path):
        config = config.model_copy(update={"load_avg_path": tmp_path / "missing"})
        app = LoadRingApp(config)
        threading.Timer(0.2, app.stop).start()

        app.run()

        assert app.monitor.state.ticks >= 2
        assert app.monitor.state.writes == 0
        assert device_file.read_text() == "ring,0,none,off"
