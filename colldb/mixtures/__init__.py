"""Mixture state."""
from __future__ import annotations

from .mixture import Mixture

__all__ = ["Mixture"]
