from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from ..approximations import Approximation
from ..exceptions import DataNotFoundException
from ..models import InteractionType
from ..particles import Species

PairEvaluator = Callable[["CollisionPair", str, float], Any]


class CollisionPair:
    """Collision integrals of one unordered species pair.

    Integral definitions are read from the ``pairs`` section of the transport
    database (key ``"A + B"`` in either order), falling back to the
    ``defaults`` entry for the interaction type and then to ``defaults.all``.
    Integrals are built lazily on first request for a kind.
    """

    def __init__(
        self,
        species1: Species,
        species2: Species,
        database: Mapping[str, Any] | None = None,
        *,
        indices: tuple[int, int] = (0, 0),
        evaluator: Optional[PairEvaluator] = None,
    ) -> None:
        self.species1 = species1
        self.species2 = species2
        self.indices = indices
        self.interaction_type = self._infer_type(species1, species2)
        self._evaluator = evaluator
        self._approximation = Approximation()
        self._integrals: Dict[str, Callable] = {}
        self._definitions: Dict[str, Any] = {}
        self._read_data(database or {})

    @property
    def name(self) -> str:
        return f"{self.species1.name} + {self.species2.name}"

    @staticmethod
    def _infer_type(species1: Species, species2: Species) -> InteractionType:
        if species1.charge == 0 and species2.charge == 0:
            return InteractionType.NEUTRAL_NEUTRAL
        if (species1.charge == 0) ^ (species2.charge == 0):
            if species1.is_electron or species2.is_electron:
                return InteractionType.NEUTRAL_ELECTRON
            return InteractionType.NEUTRAL_ION
        return InteractionType.CHARGED_CHARGED

    def _read_data(self, database: Mapping[str, Any]) -> None:
        defaults = database.get("defaults") or {}
        for section in (defaults.get("all"), defaults.get(self.interaction_type.value)):
            if section:
                self._definitions.update(section)
        pairs = database.get("pairs") or {}
        reverse = f"{self.species2.name} + {self.species1.name}"
        entry = pairs.get(self.name, pairs.get(reverse))
        if entry:
            self._definitions.update(entry)

    def _integral(self, kind: str) -> Callable:
        if kind not in self._integrals:
            if kind not in self._definitions:
                raise DataNotFoundException(f"No {kind} collision integral found for {self.name} interaction")
            self._integrals[kind] = self._approximation.build(self._definitions[kind], f"{kind} of {self.name}")
        return self._integrals[kind]

    def get(self, kind: str, T):
        """Value of the integral `kind` at temperature T (scalar or array)."""
        if self._evaluator is not None:
            return self._evaluator(self, kind, T)
        if kind in self._definitions:
            return self._integral(kind)(T)
        # ratios derived from the base integrals
        if kind == "Ast":
            return self.get("Q22", T) / self.get("Q11", T)
        if kind == "Bst":
            return (5.0 * self.get("Q12", T) - 4.0 * self.get("Q13", T)) / self.get("Q11", T)
        if kind == "Cst":
            return self.get("Q12", T) / self.get("Q11", T)
        raise DataNotFoundException(f"No {kind} collision integral found for {self.name} interaction")

    def __repr__(self) -> str:
        return f"CollisionPair({self.name!r}, indices={self.indices})"
