"""Option store: typed access to persisted key-value options.

Options hold user preferences (theme, sync server) as well as application
state. Values are always stored as strings and interpreted on read through
the typed accessors (``get_option_int``, ``get_option_bool``).

Options flagged ``is_synced`` are replicated to the user's other instances
by the sync subsystem; the rest stay local to this device.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..domain.repositories import OptionRepository
from ..logging_config import get_logger
from ..models.option import Option
from .errors import (
    OptionAlreadyExistsError,
    OptionError,
    OptionNotFoundError,
    OptionParseError,
    OptionPersistenceError,
)
from .option_names import OptionKind, encode_value, kind_of, parse_decimal_int

logger = get_logger(__name__)

OptionMap = dict[str, str]


class OptionService:
    """Process-facing API over the option repository."""

    def __init__(self, repository: OptionRepository):
        self.repository = repository

    def get_option_or_null(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None if the option does not exist."""
        option = self.repository.get(name)
        return option.value if option is not None else None

    def get_option(self, name: str) -> str:
        """Return the value of ``name``.

        Raises:
            OptionNotFoundError: if the option does not exist.
        """
        value = self.get_option_or_null(name)
        if value is None:
            raise OptionNotFoundError(name)
        return value

    def get_option_int(self, name: str, default: Optional[int] = None) -> int:
        """Parse the option as plain decimal text (digits with an optional leading minus).

        Unparseable text yields ``default`` when one is given, otherwise
        ``OptionParseError``. A missing option always raises.
        """
        value = self.get_option(name)
        parsed = parse_decimal_int(value)
        if parsed is None:
            if default is None:
                raise OptionParseError(name, value, "integer")
            return default
        return parsed

    def get_option_bool(self, name: str) -> bool:
        """Interpret the option as exactly ``"true"`` or ``"false"``."""
        value = self.get_option(name)
        if value not in ("true", "false"):
            raise OptionParseError(name, value, "boolean")
        return value == "true"

    def get_option_typed(self, name: str) -> str | int | bool:
        """Read ``name`` with the accessor matching its registered kind."""
        kind = kind_of(name)
        if kind is OptionKind.INT:
            return self.get_option_int(name)
        if kind is OptionKind.BOOL:
            return self.get_option_bool(name)
        return self.get_option(name)

    def set_option(self, name: str, value: object) -> None:
        """Write ``value`` to ``name``, creating a local-only option if it is absent."""
        encoded = encode_value(value)
        try:
            updated = self.repository.update_value(name, encoded)
        except SQLAlchemyError as exc:
            logger.error("Failed to update option %s", name, exc_info=True)
            raise OptionPersistenceError(f"Could not update option '{name}'") from exc

        if updated is None:
            self.create_option(name, encoded, False)
            return
        logger.debug("Updated option %s", name)

    def create_option(self, name: str, value: object, is_synced: bool) -> Option:
        """Insert a new option.

        Args:
            name: Unique option name.
            value: Value to store; non-string values are encoded first.
            is_synced: True for values shared across instances (e.g. locale),
                False for device-local ones (e.g. theme).

        Raises:
            OptionAlreadyExistsError: if an option with ``name`` exists.
            OptionPersistenceError: if the write did not complete.
        """
        option = Option(name=name, value=encode_value(value), is_synced=is_synced)
        try:
            created = self.repository.insert(option)
        except IntegrityError as exc:
            raise OptionAlreadyExistsError(name) from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to create option %s", name, exc_info=True)
            raise OptionPersistenceError(f"Could not create option '{name}'") from exc
        logger.debug("Created option %s", name, extra={"is_synced": is_synced})
        return created

    def get_options(self) -> list[Option]:
        """Return all live options in no particular order."""
        return self.repository.list_all()

    def get_option_map(self) -> OptionMap:
        """Return a fresh name -> value snapshot of every option."""
        return {option.name: option.value for option in self.repository.list_all()}


__all__ = [
    "OptionAlreadyExistsError",
    "OptionError",
    "OptionMap",
    "OptionNotFoundError",
    "OptionParseError",
    "OptionPersistenceError",
    "OptionService",
]
