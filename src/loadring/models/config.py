"""Application configuration model."""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from loadring.utils import read_model_or_default, write_model

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".loadring" / "config.json"


class AppConfig(BaseModel):
    """Daemon configuration and settings.

    Every field has a default, so the daemon runs without a config file.
    """

    # Paths
    load_avg_path: Path = Field(
        default=Path("/proc/loadavg"),
        description="OS file exposing the load averages (first field = 1-minute load)",
    )
    device_path: Path = Field(
        default=Path("/proc/acpi/nuc_led"),
        description="LED ring control file that accepts 'ring,<brightness>,<blink>,<color>'",
    )

    # Loop settings
    poll_interval: float = Field(
        default=5.0, gt=0, description="Seconds between load samples"
    )
    cores: int | None = Field(
        default=None,
        ge=1,
        description="Core count used to scale the color table (None = auto-detect)",
    )
    retry_failed_writes: bool = Field(
        default=False,
        description=(
            "Rewrite a state whose device write failed on the next tick. "
            "When disabled a failed write is treated as applied and not retried."
        ),
    )

    @field_serializer("load_avg_path", "device_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    def resolve_cores(self) -> int:
        """Configured core count, or the number of CPUs of this host."""
        if self.cores is not None:
            return self.cores
        detected = os.cpu_count()
        if detected is None:
            logger.warning("Could not detect CPU count, scaling color table for 1 core")
            return 1
        return detected

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.loadring/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return read_model_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        write_model(self, path)
