"""Concrete repository implementations using SQLModel."""

from .option import SQLModelOptionRepository

__all__ = ["SQLModelOptionRepository"]
