from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..numerics import interpolate_uniform
from .pair_index import PairSelection, SpeciesPairIndex
from .tabulation import TabulationConfig

logger = logging.getLogger(__name__)


class CollisionGroup:
    """
    Collision integrals of one kind over a selection of species pairs.

    The group is refreshed explicitly with `refresh(T)`; `values` then returns a
    copy of the integrals at that temperature, one per member pair and in pair
    index order. With tabulation enabled, temperatures inside [Tmin, Tmax] are
    served by linear interpolation in a table built on first use; temperatures
    outside the range are always evaluated directly.
    """

    def __init__(
        self,
        kind: str,
        pairs: SpeciesPairIndex,
        selection: PairSelection,
        tabulation: TabulationConfig,
    ) -> None:
        self.kind = kind
        self.selection = selection
        self.tabulation = tabulation
        self._members = pairs.select(selection)
        self._table: Optional[np.ndarray] = None
        self._values = np.zeros(len(self._members))
        self._temperature: Optional[float] = None

    def __len__(self) -> int:
        return len(self._members)

    @property
    def size(self) -> int:
        return len(self._members)

    @property
    def temperature(self) -> Optional[float]:
        """Temperature of the last refresh, None before the first one."""
        return self._temperature

    @property
    def values(self) -> np.ndarray:
        return self._values.copy()

    @property
    def is_tabulated(self) -> bool:
        return self._table is not None

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __array__(self, dtype=None, copy=None):
        return np.array(self._values, dtype=dtype)

    def evaluate(self, T: float) -> np.ndarray:
        """Direct evaluation of every member at T, bypassing any table."""
        return np.array([pair.get(self.kind, T) for pair in self._members], dtype=float).reshape(len(self._members))

    def _build_table(self) -> np.ndarray:
        grid = self.tabulation.grid()
        logger.debug(
            "Tabulating %s for %d pairs on %d points in [%g, %g] K",
            self.kind, len(self._members), grid.size, self.tabulation.Tmin, self.tabulation.Tmax,
        )
        table = np.empty((grid.size, len(self._members)))
        for row, T in enumerate(grid):
            table[row] = self.evaluate(float(T))
        return table

    def refresh(self, T: float) -> "CollisionGroup":
        """Recompute the group values at temperature T and return the group."""
        T = float(T)
        if T == self._temperature:
            return self
        if not self._members:
            self._temperature = T
            return self
        if self.tabulation.contains(T):
            if self._table is None:
                self._table = self._build_table()
            self._values = interpolate_uniform(self._table, self.tabulation.Tmin, self.tabulation.dT, T)
        else:
            self._values = self.evaluate(T)
        self._temperature = T
        return self

    def __repr__(self) -> str:
        return f"CollisionGroup(kind={self.kind!r}, size={self.size}, T={self._temperature})"
