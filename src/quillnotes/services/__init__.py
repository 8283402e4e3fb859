"""Option store services."""

from .errors import (
    OptionAlreadyExistsError,
    OptionError,
    OptionNotFoundError,
    OptionParseError,
    OptionPersistenceError,
)
from .options import OptionService

__all__ = [
    "OptionAlreadyExistsError",
    "OptionError",
    "OptionNotFoundError",
    "OptionParseError",
    "OptionPersistenceError",
    "OptionService",
]
