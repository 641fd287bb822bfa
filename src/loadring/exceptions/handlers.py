"""
Centralized error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────┐
│  CLI                                │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑ LoadRingError
┌─────────────────────────────────────┐
│  DAEMON (monitor loop, config)      │
│  - Catches low-level exceptions     │
│  - Converts to LoadRingError        │
└─────────────────────────────────────┘
                  ↑ OSError, ValueError, ValidationError
┌─────────────────────────────────────┐
│  LOW LEVEL (/proc files, pydantic)  │
└─────────────────────────────────────┘
```

| Pattern | Code |
|---------|------|
| Best-effort section, log and continue | `with ErrorContext("switch ring off", re_raise=False): ...` |
| Config validation failure | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error at the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

from .base import LoadRingError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("switch ring off", re_raise=False) as ctx:
            writer.apply(OFF_STATE)

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, LoadRingError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> LoadRingError:
    """
    Convert Pydantic validation errors to loadring exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, LoadRingError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
