"""Generic utility modules for loadring."""

from .persistence import read_model, read_model_or_default, write_model

__all__ = ["read_model", "read_model_or_default", "write_model"]
