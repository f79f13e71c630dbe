"""
Custom exception hierarchy for chromatrix.

## Exception Hierarchy

```
ChromatrixError (base)
├── DeviceError
│   ├── UnsupportedDeviceError
│   ├── DeviceNotFoundError
│   └── DeviceParseError
├── EffectError
│   ├── InvalidFpsError
│   └── EffectSerializationError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

File system failures are not wrapped: reading the host device listing or
writing an effect file raises the builtin ``OSError`` family unchanged.

### Example: Keyboard without a lighting matrix

```python
from chromatrix import Effect, Keyboard
from chromatrix.exceptions import UnsupportedDeviceError

try:
    Effect(Keyboard.RAZER_ANANSI, icon="icon.png")
except UnsupportedDeviceError as e:
    print(e.get_full_message())
```
"""

from .base import ChromatrixError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import DeviceError, DeviceNotFoundError, DeviceParseError, UnsupportedDeviceError
from .effect import EffectError, EffectSerializationError, InvalidFpsError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "ChromatrixError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "DeviceParseError",
    "UnsupportedDeviceError",
    # Effect
    "EffectError",
    "EffectSerializationError",
    "InvalidFpsError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
