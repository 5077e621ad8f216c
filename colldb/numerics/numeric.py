from __future__ import annotations

import math

import numpy as np


def is_whole_number(x: float, rtol: float = 1.0e-15) -> bool:
    """True when a positive x is an integer within relative tolerance rtol."""
    if x <= 0.0 or not math.isfinite(x):
        return False
    return abs(x - round(x)) / x < rtol


def uniform_grid(t_min: float, t_max: float, dt: float) -> np.ndarray:
    """
    Return the nodes t_min, t_min + dt, ..., t_max.

    The span (t_max - t_min)/dt is expected to be whole; the last node is set to
    t_max exactly so that the upper bound is always a node.
    """
    n_points = int(round((t_max - t_min) / dt)) + 1
    grid = t_min + dt * np.arange(n_points, dtype=float)
    grid[-1] = t_max
    return grid


def interpolate_uniform(table: np.ndarray, t_min: float, dt: float, T: float) -> np.ndarray:
    """
    Linearly interpolate the rows of a table tabulated on a uniform grid.

    table has shape (n_points, n_values); T must lie inside the grid.
    """
    n_points = table.shape[0]
    if n_points == 1:
        return table[0].copy()
    x = (T - t_min) / dt
    i = min(max(int(math.floor(x)), 0), n_points - 2)
    w = x - i
    if w == 0.0:
        return table[i].copy()
    return (1.0 - w) * table[i] + w * table[i + 1]


def triangular_index(n: int, i: int, j: int) -> int:
    """Linear index of the unordered pair (i, j) in an n x n upper triangle."""
    if i > j:
        return triangular_index(n, j, i)
    return n * i + j - i * (i + 1) // 2
