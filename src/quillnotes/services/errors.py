"""Error taxonomy for option access and persistence."""

from __future__ import annotations


class OptionError(Exception):
    """Base class for option store failures."""


class OptionNotFoundError(OptionError, KeyError):
    """Raised when an option requested by name does not exist."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Option '{self.name}' doesn't exist"


class OptionParseError(OptionError, ValueError):
    """Raised when a stored string does not match the expected type."""

    def __init__(self, name: str, raw_value: str, expected: str):
        super().__init__(f"Could not parse '{raw_value}' into {expected} for option '{name}'")
        self.name = name
        self.raw_value = raw_value
        self.expected = expected


class OptionPersistenceError(OptionError):
    """Raised when the durable write behind a create or update did not complete."""


class OptionAlreadyExistsError(OptionPersistenceError):
    """Raised when creating an option whose name is already taken."""

    def __init__(self, name: str):
        super().__init__(f"Option '{name}' already exists")
        self.name = name
