"""Visual state model for the LED ring."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import BlinkPattern, RingColor


class VisualState(BaseModel):
    """One addressable LED ring configuration, paired with its load threshold.

    The threshold is the exclusive upper bound of load for which this state
    is selected. Equality compares all four fields.

    The model is frozen so a policy table built from it is read-only and
    states can be compared and hashed.
    """

    model_config = ConfigDict(frozen=True)

    load_threshold: float = Field(default=0.0, description="Exclusive upper load bound for this state")
    color: RingColor = Field(description="Ring color")
    brightness: int = Field(ge=0, le=100, description="Brightness (0-100)")
    blink: BlinkPattern = Field(default=BlinkPattern.NONE, description="Blink pattern")

    def scaled(self, factor: float) -> "VisualState":
        """Return a copy with the threshold multiplied by ``factor``."""
        return self.model_copy(update={"load_threshold": self.load_threshold * factor})

    def label(self) -> str:
        """Short human-readable form, e.g. ``blue/40/none``."""
        return f"{self.color.value}/{self.brightness}/{self.blink.value}"

    def __str__(self) -> str:
        return f"{self.label()} (< {self.load_threshold:g})"


OFF_STATE = VisualState(
    load_threshold=0.0,
    color=RingColor.OFF,
    brightness=0,
    blink=BlinkPattern.NONE,
)
