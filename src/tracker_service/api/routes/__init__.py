"""Route modules."""

from . import data, export

__all__ = ["data", "export"]
