"""Exception hierarchy for the collision database."""
from __future__ import annotations

from typing import Iterable


class CollisionDBError(RuntimeError):
    """Base class for domain specific exceptions."""


class UnopenedFileException(CollisionDBError):
    """Raised when a species or transport database file cannot be read or parsed."""


class DataNotFoundException(CollisionDBError):
    """Raised when a species, mixture member or collision integral has no data."""


class ModelParameterException(CollisionDBError):
    """Raised for an unknown or incompletely parameterised integral model."""


class IncorrectValueException(CollisionDBError):
    """Raised for physically meaningless input such as non-positive temperatures."""


class ConfigurationException(CollisionDBError):
    """Raised when the database attributes violate a constraint."""


class InvalidGroupNameException(CollisionDBError):
    """Raised for a collision group name without a recognised type suffix."""

    def __init__(self, name: str, allowed: Iterable[str]) -> None:
        self.name = name
        self.allowed = tuple(allowed)
        super().__init__(
            f"Bad collision integral group type: '{name[-2:]}' in group name: '{name}'. "
            f"Allowed group types are {', '.join(repr(s) for s in self.allowed)}."
        )
