"""Repository protocol definitions for domain layer."""

from .option import OptionRepository

__all__ = ["OptionRepository"]
