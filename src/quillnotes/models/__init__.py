"""SQLModel table exports."""

from .option import Option

__all__ = ["Option"]
