"""Blueprint exports."""

from . import options

__all__ = ["options"]
