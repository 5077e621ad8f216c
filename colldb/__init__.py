"""Collision integral database for transport properties of ionized gas mixtures."""

from . import constants, exceptions, models, numerics
from .approximations import Approximation
from .interactions import CollisionPair
from .mixtures import Mixture
from .models import GroupType
from .particles import Species
from .transport import CollisionDB, CollisionGroup, TabulationConfig

__all__ = [
    "constants",
    "exceptions",
    "models",
    "numerics",
    "Approximation",
    "CollisionDB",
    "CollisionGroup",
    "CollisionPair",
    "GroupType",
    "Mixture",
    "Species",
    "TabulationConfig",
]
