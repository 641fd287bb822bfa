"""Command line interface for loadring."""

from .main import cli

__all__ = ["cli"]
