"""loadring: system load average indicator for LED rings."""

__version__ = "0.1.0"
