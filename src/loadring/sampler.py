"""Load average sampling."""

import logging
from pathlib import Path

from loadring.exceptions import LoadParseError, LoadReadError

logger = logging.getLogger(__name__)

DEFAULT_LOADAVG_PATH = Path("/proc/loadavg")


class LoadSampler:
    """Reads the 1-minute load average from a /proc/loadavg style file.

    No retries: a failed sample is reported to the caller, which decides
    whether to try again on its next tick.
    """

    def __init__(self, path: Path = DEFAULT_LOADAVG_PATH):
        self.path = Path(path)

    def sample(self) -> float:
        """
        Read and parse the first field of the load file.

        Returns:
            The 1-minute load average

        Raises:
            LoadReadError: If the file cannot be read
            LoadParseError: If the file is not text, is empty, or its first field is not a number
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise LoadReadError(self.path, str(e)) from e

        try:
            content = raw.decode()
        except UnicodeDecodeError as e:
            raise LoadParseError(self.path, repr(raw), "not valid text") from e

        fields = content.split()
        if not fields:
            raise LoadParseError(self.path, content, "no data")

        try:
            load = float(fields[0])
        except ValueError as e:
            raise LoadParseError(self.path, content, f"not a number: {fields[0]!r}") from e

        logger.debug(f"Sampled load {load} from {self.path}")
        return load
