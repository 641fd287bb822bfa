"""Load sampling exceptions.

- LoadSampleError: Base class for load average sampling errors
- LoadReadError: The load data source could not be read
- LoadParseError: The load data source held no usable load value
"""

from pathlib import Path

from .base import LoadRingError


class LoadSampleError(LoadRingError):
    """Sampling the load average failed."""

    def __init__(self, user_message: str, path: Path | str | None = None, **kwargs):
        super().__init__(user_message, **kwargs)
        self.path = path


class LoadReadError(LoadSampleError):
    """Load data source is missing or unreadable."""

    def __init__(self, path: Path | str, original_error: str | None = None):
        """
        Initialize load read error.

        Args:
            path: The load data source that failed
            original_error: The underlying OS error message
        """
        user_msg = f"Cannot read load average from {path}"
        tech_msg = user_msg
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            path=path,
            recoverable=True,
            recovery_hint=f"Check that {path} exists and is readable (set 'load_avg_path' in the config)",
        )
        self.original_error = original_error


class LoadParseError(LoadSampleError):
    """Load data source content is not a valid load average."""

    def __init__(self, path: Path | str, content: str, reason: str):
        """
        Initialize load parse error.

        Args:
            path: The load data source that was read
            content: The raw content that failed to parse
            reason: Why the content was rejected
        """
        super().__init__(
            user_message=f"Malformed load average data in {path}: {reason}",
            technical_message=f"Failed to parse {path} content {content!r}: {reason}",
            path=path,
            recoverable=True,
        )
        self.content = content
        self.reason = reason
