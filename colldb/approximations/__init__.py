"""Collision integral correlations."""
from __future__ import annotations

from .approximation import Approximation

__all__ = ["Approximation"]
