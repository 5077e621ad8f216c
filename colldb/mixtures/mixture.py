from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from ..exceptions import DataNotFoundException, IncorrectValueException
from ..particles import Species


class Mixture:
    """
    Minimal thermodynamic state read by the collision database.

    Holds the species list, with the electron (if any) moved to index 0, and the
    current heavy-particle and electron temperatures.
    """

    def __init__(
        self,
        species: Sequence[Species] | None = None,
        *,
        species_names: str | None = None,
        species_filename: str | None = None,
        T: float = 300.0,
        Te: float | None = None,
    ) -> None:
        loaded = list(species or [])
        if species_names:
            loaded.extend(Species(token, species_filename) for token in self.split_string(species_names))
        electrons = [s for s in loaded if s.is_electron]
        if len(electrons) > 1:
            raise IncorrectValueException("A mixture may contain at most one electron species")
        self._species: List[Species] = electrons + [s for s in loaded if not s.is_electron]
        if not self._species:
            raise IncorrectValueException("A mixture needs at least one species")
        self.species_name_map: Dict[str, int] = {s.name: idx for idx, s in enumerate(self._species)}
        if len(self.species_name_map) != len(self._species):
            raise IncorrectValueException("Species names in a mixture must be unique")
        self._mw = np.array([s.molar_mass for s in self._species])
        self._mw.setflags(write=False)
        self._T = 0.0
        self._Te = 0.0
        self.set_state(T, Te)

    @staticmethod
    def split_string(input_string: str) -> List[str]:
        return [token.strip() for token in input_string.split(",") if token.strip()]

    def set_state(self, T: float, Te: float | None = None) -> None:
        """Set heavy-particle and electron temperatures; Te defaults to T."""
        Te = T if Te is None else Te
        if T <= 0.0 or Te <= 0.0:
            raise IncorrectValueException(f"Temperatures must be positive (T={T}, Te={Te})")
        self._T = float(T)
        self._Te = float(Te)

    def T(self) -> float:
        return self._T

    def Te(self) -> float:
        return self._Te

    @property
    def species(self) -> List[Species]:
        return list(self._species)

    @property
    def n_species(self) -> int:
        return len(self._species)

    @property
    def has_electrons(self) -> bool:
        return self._species[0].is_electron

    @property
    def n_heavy(self) -> int:
        return self.n_species - (1 if self.has_electrons else 0)

    def species_mw(self, i: int | None = None):
        """Molar mass of species i in kg/mol, or the full read-only array."""
        if i is None:
            return self._mw
        return float(self._mw[i])

    def species_index(self, name: str) -> int:
        if name not in self.species_name_map:
            raise DataNotFoundException(f"Species {name} is not part of the mixture")
        return self.species_name_map[name]

    def get_names(self) -> str:
        return " ".join(s.name for s in self._species)
