"""LED ring device writer."""

import logging
from pathlib import Path

from loadring.exceptions import DeviceWriteError
from loadring.models import VisualState

logger = logging.getLogger(__name__)

DEFAULT_DEVICE_PATH = Path("/proc/acpi/nuc_led")


def format_command(state: VisualState) -> str:
    """Render a state in the driver grammar ``ring,<brightness>,<blink>,<color>``."""
    return f"ring,{state.brightness},{state.blink.value},{state.color.value}"


class DeviceWriter:
    """
    Writes visual states to the LED ring control file.

    Each apply() is a single write that replaces the previous device
    state. Failures are reported, never retried here.
    """

    def __init__(self, path: Path = DEFAULT_DEVICE_PATH):
        self.path = Path(path)

    def apply(self, state: VisualState) -> None:
        """
        Send ``state`` to the device.

        Raises:
            DeviceWriteError: If the control file cannot be opened or written
        """
        command = format_command(state)
        try:
            with open(self.path, "w") as f:
                f.write(command)
        except OSError as e:
            raise DeviceWriteError(self.path, command, str(e)) from e

        logger.debug(f"Wrote {command!r} to {self.path}")
