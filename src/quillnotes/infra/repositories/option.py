"""SQLModel implementation of the Option repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.option import Option


class SQLModelOptionRepository:
    """SQLModel-based option repository; every write commits immediately."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get(self, name: str) -> Optional[Option]:
        """Retrieve an option by name."""
        with self.session_factory() as session:
            obj = session.exec(select(Option).where(Option.name == name)).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self) -> list[Option]:
        """List all live options."""
        with self.session_factory() as session:
            rows = list(session.exec(select(Option)).all())
            session.expunge_all()
            return rows

    def insert(self, option: Option) -> Option:
        """Insert a new option."""
        with self.session_factory() as session:
            session.add(option)
            session.commit()
            session.refresh(option)
            session.expunge(option)
            return option

    def update_value(self, name: str, value: str) -> Optional[Option]:
        """Write a new value and bump the modification timestamp."""
        with self.session_factory() as session:
            option = session.exec(select(Option).where(Option.name == name)).first()
            if option is None:
                return None
            option.value = value
            option.touch()
            session.add(option)
            session.commit()
            session.refresh(option)
            session.expunge(option)
            return option


__all__ = ["SQLModelOptionRepository"]
