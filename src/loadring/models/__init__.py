"""Data models for loadring."""

from .config import DEFAULT_CONFIG_PATH, AppConfig
from .enums import BlinkPattern, RingColor
from .visual_state import OFF_STATE, VisualState

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    # Models
    "OFF_STATE",
    "VisualState",
    # Enums
    "BlinkPattern",
    "RingColor",
]
