"""Daemon assembly: wires config, policy, sampler, writer and signals."""

import logging
import threading
from typing import Optional

from loadring.device import DeviceWriter
from loadring.models import AppConfig
from loadring.monitor import MonitorLoop
from loadring.policy import build_policy
from loadring.sampler import LoadSampler
from loadring.shutdown import ShutdownHandler

logger = logging.getLogger(__name__)


class LoadRingApp:
    """
    The loadring daemon.

    Lifecycle:
    1. __init__: Build the scaled color policy and the monitor loop
    2. run(): Install signal handlers and block in the loop until a
       termination signal arrives; the ring is switched off before returning
    """

    def __init__(self, config: AppConfig, stop_event: Optional[threading.Event] = None):
        self.config = config
        self.cores = config.resolve_cores()
        self.policy = build_policy(self.cores)
        self.monitor = MonitorLoop(
            sampler=LoadSampler(config.load_avg_path),
            policy=self.policy,
            writer=DeviceWriter(config.device_path),
            interval=config.poll_interval,
            retry_failed_writes=config.retry_failed_writes,
            stop_event=stop_event,
        )
        self.shutdown_handler = ShutdownHandler(self.monitor.stop_event)

    def run(self) -> None:
        """Run until SIGINT/SIGTERM (or stop()), then return."""
        logger.info(
            f"starting | cores: {self.cores} | load: {self.config.load_avg_path} "
            f"| device: {self.config.device_path}"
        )
        for line in self.policy.describe().splitlines():
            logger.info(f"color rule {line}")
        if self.config.retry_failed_writes:
            logger.info("Failed ring writes will be retried on the next tick")

        with self.shutdown_handler:
            self.monitor.run()

        logger.info("loadring stopped")

    def stop(self) -> None:
        self.monitor.stop()
