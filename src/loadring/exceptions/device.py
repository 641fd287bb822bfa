"""Indicator device exceptions.

- DeviceError: Base class for LED ring device errors
- DeviceWriteError: A command could not be written to the device
"""

from pathlib import Path

from .base import LoadRingError


class DeviceError(LoadRingError):
    """LED ring device operation failed."""

    def __init__(self, user_message: str, device_path: Path | str | None = None, **kwargs):
        super().__init__(user_message, **kwargs)
        self.device_path = device_path


class DeviceWriteError(DeviceError):
    """Writing a command to the LED ring control file failed."""

    def __init__(self, device_path: Path | str, command: str, original_error: str | None = None):
        """
        Initialize device write error.

        Args:
            device_path: The control file that rejected the write
            command: The command that was being written
            original_error: The underlying OS error message
        """
        user_msg = f"Failed to update LED ring at {device_path}"
        tech_msg = f"Write of {command!r} to {device_path} failed"
        if original_error:
            tech_msg += f": {original_error}"

        recovery = (
            f"Check that the LED driver is loaded and {device_path} is writable "
            "(the daemon usually needs to run as root)"
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_path=device_path,
            recoverable=True,
            recovery_hint=recovery,
        )
        self.command = command
        self.original_error = original_error
