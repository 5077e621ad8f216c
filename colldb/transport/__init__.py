"""Collision integral database and its cached groups."""
from __future__ import annotations

from .collision_db import CollisionDB
from .collision_group import CollisionGroup
from .pair_index import PairSelection, SpeciesPairIndex
from .tabulation import TabulationConfig

__all__ = [
    "CollisionDB",
    "CollisionGroup",
    "PairSelection",
    "SpeciesPairIndex",
    "TabulationConfig",
]
