"""Option repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.option import Option


class OptionRepository(Protocol):
    """Repository for persisted options."""

    def get(self, name: str) -> Optional[Option]:
        """Retrieve an option by name."""
        ...

    def list_all(self) -> list[Option]:
        """List all live options."""
        ...

    def insert(self, option: Option) -> Option:
        """Insert a new option; fails when the name is already taken."""
        ...

    def update_value(self, name: str, value: str) -> Optional[Option]:
        """Write a new value for an existing option, or return None if it is absent."""
        ...
