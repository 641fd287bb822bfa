"""Enumerations for the LED ring vocabulary."""

from enum import Enum


class RingColor(str, Enum):
    """Colors understood by the ring LED driver."""

    WHITE = "white"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    YELLOW = "yellow"
    PINK = "pink"
    RED = "red"
    OFF = "off"


class BlinkPattern(str, Enum):
    """Blink/fade patterns understood by the ring LED driver."""

    NONE = "none"
    BLINK_FAST = "blink_fast"  # 1 Hz
    BLINK_MEDIUM = "blink_medium"  # 0.5 Hz
    BLINK_SLOW = "blink_slow"  # 0.25 Hz
    FADE_FAST = "fade_fast"
    FADE_MEDIUM = "fade_medium"
    FADE_SLOW = "fade_slow"
