"""Species definitions."""
from __future__ import annotations

from .particle import ELECTRON_NAME, Species

__all__ = ["ELECTRON_NAME", "Species"]
