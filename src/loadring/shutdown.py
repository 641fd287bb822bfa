"""Signal-driven shutdown.

Termination signals do not exit the process directly. The handler sets
the stop event shared with the monitor loop; the loop wakes from its wait,
switches the ring off and returns, and the CLI exits with status 0.
"""

import logging
import signal
import threading
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ShutdownHandler:
    """
    Converts SIGINT/SIGTERM into a stop request.

    Python only runs signal handlers in the main thread, so install() must
    be called from there. Usable as a context manager that restores the
    previous handlers on exit.
    """

    def __init__(
        self,
        stop_event: threading.Event,
        signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
    ):
        self.stop_event = stop_event
        self.signals = tuple(signals)
        self.received_signal: Optional[signal.Signals] = None
        self._previous_handlers: dict = {}

    def install(self) -> None:
        """Register the handler for every configured signal."""
        for sig in self.signals:
            self._previous_handlers[sig] = signal.signal(sig, self._handle)
        logger.debug(f"Shutdown handler installed for {[s.name for s in self.signals]}")

    def restore(self) -> None:
        """Put back the handlers that were active before install()."""
        for sig, previous in self._previous_handlers.items():
            signal.signal(sig, previous)
        self._previous_handlers.clear()

    def _handle(self, signum, frame) -> None:
        sig = signal.Signals(signum)
        if self.received_signal is not None:
            logger.info(f"Already shutting down, ignoring signal: {sig.name}")
            return

        self.received_signal = sig
        logger.info(f"shutting down | signal: {sig.name}")
        self.stop_event.set()

    def __enter__(self):
        self.install()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.restore()
