"""
Custom exception hierarchy for loadring.

## Exception Hierarchy

```
LoadRingError (base)
├── LoadSampleError
│   ├── LoadReadError
│   └── LoadParseError
├── DeviceError
│   └── DeviceWriteError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Sampling and device errors are recoverable: the monitor loop logs them and
carries on with the next tick. Configuration errors stop the daemon at
startup with a recovery hint.

### Example: Unwritable LED control file

```python
from loadring.exceptions import DeviceWriteError

raise DeviceWriteError("/proc/acpi/nuc_led", "ring,80,none,white", "Permission denied")

# User sees: "Failed to update LED ring at /proc/acpi/nuc_led"
# Logs show: "Write of 'ring,80,none,white' to /proc/acpi/nuc_led failed: Permission denied"
```
"""

from .base import LoadRingError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import DeviceError, DeviceWriteError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .sampler import LoadParseError, LoadReadError, LoadSampleError

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device
    "DeviceError",
    "DeviceWriteError",
    # Handlers
    "ErrorContext",
    # Sampler
    "LoadParseError",
    "LoadReadError",
    # Base
    "LoadRingError",
    "LoadSampleError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
