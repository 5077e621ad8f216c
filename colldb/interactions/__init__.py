"""Species-pair interactions."""
from __future__ import annotations

from .interaction import CollisionPair, PairEvaluator

__all__ = ["CollisionPair", "PairEvaluator"]
