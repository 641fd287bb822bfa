"""Monitor loop: sample load, resolve a color, update the ring on change."""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from loadring.device import DeviceWriter
from loadring.exceptions import DeviceWriteError, ErrorContext, LoadSampleError
from loadring.models import OFF_STATE, VisualState
from loadring.policy import ColorPolicy
from loadring.sampler import LoadSampler

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


@dataclass
class RunState:
    """Mutable loop state, owned by a single MonitorLoop."""

    previous_state: Optional[VisualState] = None
    ticks: int = 0
    writes: int = 0
    failed_writes: int = 0


class MonitorLoop:
    """
    Periodically maps the system load to an LED ring state.

    The loop alternates between waiting (Idle) and a single evaluation pass
    (tick). Nothing that happens inside a tick ends the loop: sampling
    errors, unchanged states and failed writes all lead to the next wait.
    Only stop() ends it, after which the ring is switched off once.

    Failed writes:
        By default a failed write still becomes the previous state, so the
        same state is not rewritten until the load maps to a different one.
        With ``retry_failed_writes`` the previous state only advances on a
        successful write and the state is retried every tick.
    """

    def __init__(
        self,
        sampler: LoadSampler,
        policy: ColorPolicy,
        writer: DeviceWriter,
        interval: float = DEFAULT_POLL_INTERVAL,
        retry_failed_writes: bool = False,
        stop_event: Optional[threading.Event] = None,
    ):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")

        self.sampler = sampler
        self.policy = policy
        self.writer = writer
        self.interval = interval
        self.retry_failed_writes = retry_failed_writes
        self.state = RunState()
        self._stop_event = stop_event or threading.Event()

    @property
    def stop_event(self) -> threading.Event:
        return self._stop_event

    @property
    def is_stopping(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Ask the loop to finish after the current tick or wait."""
        self._stop_event.set()

    def tick(self) -> Optional[VisualState]:
        """
        Run one evaluation pass.

        Returns:
            The state sent to the device, or None if nothing was written
        """
        self.state.ticks += 1

        try:
            load = self.sampler.sample()
        except LoadSampleError as e:
            logger.warning(f"Load sample failed: {e.technical_message}")
            return None

        resolved = self.policy.resolve(load)
        if resolved == self.state.previous_state:
            return None

        logger.info(f"load: {load} | color: {resolved}")
        try:
            self.writer.apply(resolved)
        except DeviceWriteError as e:
            self.state.failed_writes += 1
            logger.error(f"Ring update failed: {e.technical_message}")
            if self.retry_failed_writes:
                return None
        else:
            self.state.writes += 1

        self.state.previous_state = resolved
        return resolved

    def run(self) -> None:
        """Tick every ``interval`` seconds until stopped.

        The ring is switched off on the way out, also when a tick raises.
        """
        logger.info(f"Monitoring load every {self.interval:g}s")
        try:
            while not self._stop_event.is_set():
                self.tick()
                self._stop_event.wait(self.interval)
        finally:
            self.teardown()

    def teardown(self) -> None:
        """Best-effort write of the off state."""
        with ErrorContext("switch ring off", logger_instance=logger, re_raise=False):
            self.writer.apply(OFF_STATE)
            logger.info("Ring switched off")
