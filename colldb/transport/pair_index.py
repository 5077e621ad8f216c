from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..interactions import CollisionPair
from ..numerics import triangular_index
from ..particles import Species


@dataclass(frozen=True)
class PairSelection:
    """A subset of the pair index, either a contiguous span or an explicit index list."""

    indices: Tuple[int, ...]
    contiguous: bool = False

    @classmethod
    def span(cls, start: int, stop: int) -> "PairSelection":
        return cls(tuple(range(start, stop)), contiguous=True)

    @classmethod
    def listed(cls, indices: Sequence[int]) -> "PairSelection":
        return cls(tuple(int(i) for i in indices), contiguous=False)

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)


class SpeciesPairIndex:
    """
    All unordered species pairs (i, j), i <= j, in triangular order.

    The outer loop runs over i ascending and the inner loop over j >= i, so the
    linear position of (i, j) is n*i + j - i*(i+1)/2. When electrons are present
    they occupy species index 0, which places every electron pair in front.
    """

    def __init__(
        self,
        species: Sequence[Species],
        database: Mapping[str, Any] | None = None,
        *,
        evaluator: Optional[Callable] = None,
    ) -> None:
        self.n_species = len(species)
        self._pairs: List[CollisionPair] = [
            CollisionPair(species[i], species[j], database, indices=(i, j), evaluator=evaluator)
            for i in range(self.n_species)
            for j in range(i, self.n_species)
        ]

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, index: int) -> CollisionPair:
        return self._pairs[index]

    def __iter__(self) -> Iterator[CollisionPair]:
        return iter(self._pairs)

    def index(self, i: int, j: int) -> int:
        return triangular_index(self.n_species, i, j)

    def pair(self, i: int, j: int) -> CollisionPair:
        return self._pairs[self.index(i, j)]

    def select(self, selection: PairSelection) -> List[CollisionPair]:
        return [self._pairs[k] for k in selection]

    def diagonal(self, first: int = 0) -> PairSelection:
        """Self pairs (i, i) for i >= first; these are not contiguous in the index."""
        return PairSelection.listed([self.index(i, i) for i in range(first, self.n_species)])

    def index_pairs(self) -> np.ndarray:
        """(n_pairs, 2) array of the species indices of every pair."""
        return np.array([p.indices for p in self._pairs], dtype=int).reshape(-1, 2)
