"""Numeric helpers for tabulation and triangular pair addressing."""
from __future__ import annotations

from .numeric import interpolate_uniform, is_whole_number, triangular_index, uniform_grid

__all__ = [
    "interpolate_uniform",
    "is_whole_number",
    "triangular_index",
    "uniform_grid",
]
