"""Persisted option record."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar

from sqlmodel import Field, SQLModel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Option(SQLModel, table=True):
    """Named string value, either synced across instances or local to this one.

    ``name`` and ``is_synced`` are fixed at creation; only ``value`` and
    ``utc_date_modified`` change afterwards.
    """

    __tablename__: ClassVar[str] = "options"

    name: str = Field(primary_key=True, max_length=128)
    value: str = Field(nullable=False)
    is_synced: bool = Field(default=False, nullable=False)
    utc_date_modified: datetime = Field(default_factory=_utc_now, nullable=False)

    def touch(self) -> None:
        """Bump the modification timestamp ahead of a value write."""

        self.utc_date_modified = _utc_now()
